"""Breeder repository contract and MySQL implementation."""

from abc import ABC, abstractmethod
from typing import List, Optional
from sqlalchemy import delete, update
from framework.repository.base import SQLRepository, row_builder, select_columns
from .models import Breeder, BreederRecord


class BreederRepository(ABC):
    """Persistence contract for breeders."""

    @abstractmethod
    async def all_breeders(self) -> List[Breeder]:
        """All breeders ordered by business name."""

    @abstractmethod
    async def get_breeder_by_id(self, id: int) -> Optional[Breeder]:
        """Breeder by ID, or None."""

    @abstractmethod
    async def insert_breeder(self, breeder: Breeder) -> int:
        """Insert breeder (its id is ignored) and return the new ID."""

    @abstractmethod
    async def update_breeder(self, breeder: Breeder) -> None:
        """Replace every field of the breeder with the same ID."""

    @abstractmethod
    async def delete_breeder(self, id: int) -> None:
        """Delete breeder by ID; a missing ID is not an error."""


breeder_from_row = row_builder(Breeder)


class MySQLBreederRepository(SQLRepository, BreederRepository):

    async def all_breeders(self) -> List[Breeder]:
        statement = select_columns(BreederRecord).order_by(BreederRecord.breeder_name)
        return await self.fetch_all(statement, breeder_from_row)

    async def get_breeder_by_id(self, id: int) -> Optional[Breeder]:
        statement = select_columns(BreederRecord).where(BreederRecord.id == id)
        return await self.fetch_one(statement, breeder_from_row)

    async def insert_breeder(self, breeder: Breeder) -> int:
        return await self.insert(BreederRecord(**breeder.model_dump(exclude={"id"})))

    async def update_breeder(self, breeder: Breeder) -> None:
        values = breeder.model_dump(exclude={"id"})
        await self.execute(update(BreederRecord).where(BreederRecord.id == breeder.id).values(**values))

    async def delete_breeder(self, id: int) -> None:
        await self.execute(delete(BreederRecord).where(BreederRecord.id == id))
