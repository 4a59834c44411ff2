from typing import List, Optional
from framework.logging.logger import get_logger
from ..common.breeds import Breed
from .models import Dog
from .repository import DogRepository

logger = get_logger("dog_service")

class DogService:
    """
    Dog use cases. Depends on the DogRepository contract only, so the
    composition root decides whether MySQL or fixtures sit underneath.
    Validation and derived fields belong here, not in routes or repositories.
    """

    def __init__(self, repo: DogRepository):
        self.repo = repo

    async def get_all_breeds(self) -> List[Breed]:
        return await self.repo.all_breeds()

    async def get_breed_by_id(self, id: int) -> Optional[Breed]:
        return await self.repo.get_breed_by_id(id)

    async def get_all_dogs(self) -> List[Dog]:
        return await self.repo.all_dogs()

    async def get_dog_by_id(self, id: int) -> Optional[Dog]:
        return await self.repo.get_dog_by_id(id)

    async def create_dog(self, dog: Dog) -> int:
        """Store a new dog and return its generated ID."""
        dog_id = await self.repo.insert_dog(dog)
        logger.info(f"Dog {dog.dog_name} created with id {dog_id}")
        return dog_id

    async def update_dog(self, dog: Dog) -> None:
        await self.repo.update_dog(dog)
        logger.info(f"Dog {dog.id} updated")

    async def delete_dog(self, id: int) -> None:
        await self.repo.delete_dog(id)
        logger.info(f"Dog {id} deleted")
