from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession


class MySQLDriver:
    """Owns the pooled async engine shared by every relational repository."""

    def __init__(
        self,
        url: str,
        pool_size: int = 25,
        max_overflow: int = 0,
        pool_recycle: int = 300,
        connect_timeout: int = 5,
    ):
        self.engine = create_async_engine(
            url,
            echo=False,
            future=True,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_recycle=pool_recycle,
            pool_pre_ping=True,
            connect_args={"connect_timeout": connect_timeout},
        )
        self.session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @classmethod
    def from_settings(cls, settings) -> "MySQLDriver":
        return cls(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=settings.DB_POOL_RECYCLE,
            connect_timeout=settings.DB_CONNECT_TIMEOUT,
        )

    async def connect(self):
        """Check the database is reachable (the engine opens connections lazily)."""
        async with self.engine.begin() as conn:
            await conn.execute(text("SELECT 1"))

    async def disconnect(self):
        """Close every pooled connection."""
        await self.engine.dispose()
