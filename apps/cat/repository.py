"""Cat domain repository contract and its MySQL implementation."""

from abc import ABC, abstractmethod
from typing import List, Optional
from sqlalchemy import delete, update
from framework.repository.base import SQLRepository, row_builder, select_columns
from ..common.breeds import Breed, breed_select, breed_from_row
from .models import Cat, CatBreedRecord, CatRecord


class CatRepository(ABC):
    """Persistence contract for cats and their breeds; all backends implement it."""

    @abstractmethod
    async def all_breeds(self) -> List[Breed]:
        """All cat breeds ordered by name."""

    @abstractmethod
    async def get_breed_by_id(self, id: int) -> Optional[Breed]:
        """Breed by ID, or None."""

    @abstractmethod
    async def all_cats(self) -> List[Cat]:
        """All cats ordered by name."""

    @abstractmethod
    async def get_cat_by_id(self, id: int) -> Optional[Cat]:
        """Cat by ID, or None."""

    @abstractmethod
    async def insert_cat(self, cat: Cat) -> int:
        """Insert cat (its id is ignored) and return the new ID."""

    @abstractmethod
    async def update_cat(self, cat: Cat) -> None:
        """Replace every field of the cat with the same ID."""

    @abstractmethod
    async def delete_cat(self, id: int) -> None:
        """Delete cat by ID; a missing ID is not an error."""


cat_from_row = row_builder(Cat)


class MySQLCatRepository(SQLRepository, CatRepository):
    """Cat repository backed by the cat_breeds and cats tables."""

    async def all_breeds(self) -> List[Breed]:
        statement = breed_select(CatBreedRecord).order_by(CatBreedRecord.breed)
        return await self.fetch_all(statement, breed_from_row)

    async def get_breed_by_id(self, id: int) -> Optional[Breed]:
        statement = breed_select(CatBreedRecord).where(CatBreedRecord.id == id)
        return await self.fetch_one(statement, breed_from_row)

    async def all_cats(self) -> List[Cat]:
        statement = select_columns(CatRecord).order_by(CatRecord.cat_name)
        return await self.fetch_all(statement, cat_from_row)

    async def get_cat_by_id(self, id: int) -> Optional[Cat]:
        statement = select_columns(CatRecord).where(CatRecord.id == id)
        return await self.fetch_one(statement, cat_from_row)

    async def insert_cat(self, cat: Cat) -> int:
        return await self.insert(CatRecord(**cat.model_dump(exclude={"id"})))

    async def update_cat(self, cat: Cat) -> None:
        statement = update(CatRecord).where(CatRecord.id == cat.id).values(**cat.model_dump(exclude={"id"}))
        await self.execute(statement)

    async def delete_cat(self, id: int) -> None:
        await self.execute(delete(CatRecord).where(CatRecord.id == id))
