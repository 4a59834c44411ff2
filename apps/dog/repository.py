"""Dog domain repository contract and its MySQL implementation."""

from abc import ABC, abstractmethod
from typing import List, Optional
from sqlalchemy import delete, update
from framework.repository.base import SQLRepository, row_builder, select_columns
from ..common.breeds import Breed, breed_select, breed_from_row
from .models import Dog, DogBreedRecord, DogRecord


class DogRepository(ABC):
    """Persistence contract for dogs and their breeds; all backends implement it."""

    @abstractmethod
    async def all_breeds(self) -> List[Breed]:
        """All dog breeds ordered by name."""

    @abstractmethod
    async def get_breed_by_id(self, id: int) -> Optional[Breed]:
        """Breed by ID, or None."""

    @abstractmethod
    async def all_dogs(self) -> List[Dog]:
        """All dogs ordered by name."""

    @abstractmethod
    async def get_dog_by_id(self, id: int) -> Optional[Dog]:
        """Dog by ID, or None."""

    @abstractmethod
    async def insert_dog(self, dog: Dog) -> int:
        """Insert dog (its id is ignored) and return the new ID."""

    @abstractmethod
    async def update_dog(self, dog: Dog) -> None:
        """Replace every field of the dog with the same ID."""

    @abstractmethod
    async def delete_dog(self, id: int) -> None:
        """Delete dog by ID; a missing ID is not an error."""


dog_from_row = row_builder(Dog)


class MySQLDogRepository(SQLRepository, DogRepository):
    """Dog repository backed by the dog_breeds and dogs tables."""

    async def all_breeds(self) -> List[Breed]:
        statement = breed_select(DogBreedRecord).order_by(DogBreedRecord.breed)
        return await self.fetch_all(statement, breed_from_row)

    async def get_breed_by_id(self, id: int) -> Optional[Breed]:
        statement = breed_select(DogBreedRecord).where(DogBreedRecord.id == id)
        return await self.fetch_one(statement, breed_from_row)

    async def all_dogs(self) -> List[Dog]:
        statement = select_columns(DogRecord).order_by(DogRecord.dog_name)
        return await self.fetch_all(statement, dog_from_row)

    async def get_dog_by_id(self, id: int) -> Optional[Dog]:
        statement = select_columns(DogRecord).where(DogRecord.id == id)
        return await self.fetch_one(statement, dog_from_row)

    async def insert_dog(self, dog: Dog) -> int:
        return await self.insert(DogRecord(**dog.model_dump(exclude={"id"})))

    async def update_dog(self, dog: Dog) -> None:
        statement = update(DogRecord).where(DogRecord.id == dog.id).values(**dog.model_dump(exclude={"id"}))
        await self.execute(statement)

    async def delete_dog(self, id: int) -> None:
        await self.execute(delete(DogRecord).where(DogRecord.id == id))
