"""
Relational repository base: per-operation sessions, timeouts and error translation.
"""

import asyncio
from typing import Any, Awaitable, Callable, List, Optional, Type, TypeVar
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.config import settings
from framework.exceptions.handler import StorageError, StorageErrorKind
from framework.logging.logger import get_logger

T = TypeVar("T")

logger = get_logger("repository")


def _identity(row: Any) -> Any:
    return row


def select_columns(record: Type[SQLModel]):
    """Select every column of a table as a plain row rather than a session-bound instance."""
    return select(*record.__table__.columns)


def row_builder(entity: Type[T]) -> Callable[[Any], T]:
    """Build detached entities from column rows; fields keep the entity's declared order."""
    def build(row: Any) -> T:
        return entity.model_validate(dict(row._mapping))

    return build


class SQLRepository:
    """
    Base class for every relational backend.

    Each public operation borrows a connection from the pool through its own
    session, so no transaction spans two calls. Writes are committed before
    the session is released; reads never commit.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession], timeout: Optional[float] = None):
        """Initialize repository with a session factory (the storage handle)."""
        self.session_factory = session_factory
        self.timeout = settings.DB_QUERY_TIMEOUT if timeout is None else timeout

    async def run(
        self,
        operation: Callable[[AsyncSession], Awaitable[T]],
        write: bool = False,
    ) -> T:
        """Run operation in a fresh session within the timeout; failures become StorageError."""
        async def _in_session() -> T:
            async with self.session_factory() as session:
                result = await operation(session)
                if write:
                    await session.commit()
                return result

        try:
            return await asyncio.wait_for(_in_session(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise self._fail(
                f"Storage operation timed out after {self.timeout:g}s", StorageErrorKind.TIMEOUT
            ) from e
        except IntegrityError as e:
            raise self._fail("Storage constraint violated", StorageErrorKind.CONSTRAINT, e) from e
        except (OperationalError, InterfaceError) as e:
            raise self._fail("Storage unavailable", StorageErrorKind.CONNECTION, e) from e
        except SQLAlchemyError as e:
            raise self._fail("Storage query failed", StorageErrorKind.QUERY, e) from e
        except ValidationError as e:
            raise self._fail("Storage returned a malformed row", StorageErrorKind.MALFORMED_ROW, e) from e

    def _fail(self, message: str, kind: StorageErrorKind, cause: Optional[Exception] = None) -> StorageError:
        detail = f": {cause}" if cause is not None else ""
        logger.error(f"{type(self).__name__} {kind.value} - {message}{detail}")
        return StorageError(message, kind)

    async def fetch_all(self, statement, build: Callable[[Any], T] = _identity) -> List[T]:
        """Execute a select and build one entity per row."""
        async def _op(session: AsyncSession) -> List[T]:
            result = await session.exec(statement)
            return [build(row) for row in result.all()]

        return await self.run(_op)

    async def fetch_one(self, statement, build: Callable[[Any], T] = _identity) -> Optional[T]:
        """Execute a select; None when no row matches."""
        async def _op(session: AsyncSession) -> Optional[T]:
            result = await session.exec(statement)
            row = result.first()
            return build(row) if row is not None else None

        return await self.run(_op)

    async def insert(self, record: SQLModel) -> int:
        """Insert a new row and return the identifier the store assigned."""
        async def _op(session: AsyncSession) -> int:
            session.add(record)
            await session.flush()
            return record.id

        return await self.run(_op, write=True)

    async def execute(self, statement) -> int:
        """Execute an update/delete statement; returns the affected row count."""
        async def _op(session: AsyncSession) -> int:
            result = await session.exec(statement)
            return result.rowcount

        return await self.run(_op, write=True)
