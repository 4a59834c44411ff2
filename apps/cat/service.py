from typing import List, Optional
from framework.logging.logger import get_logger
from ..common.breeds import Breed
from .models import Cat
from .repository import CatRepository

logger = get_logger("cat_service")

class CatService:
    """Cat use cases over any CatRepository backend."""

    def __init__(self, repo: CatRepository):
        self.repo = repo

    async def get_all_breeds(self) -> List[Breed]:
        return await self.repo.all_breeds()

    async def get_breed_by_id(self, id: int) -> Optional[Breed]:
        return await self.repo.get_breed_by_id(id)

    async def get_all_cats(self) -> List[Cat]:
        return await self.repo.all_cats()

    async def get_cat_by_id(self, id: int) -> Optional[Cat]:
        return await self.repo.get_cat_by_id(id)

    async def create_cat(self, cat: Cat) -> int:
        """Store a new cat and return its generated ID."""
        cat_id = await self.repo.insert_cat(cat)
        logger.info(f"Cat {cat.cat_name} created with id {cat_id}")
        return cat_id

    async def update_cat(self, cat: Cat) -> None:
        await self.repo.update_cat(cat)
        logger.info(f"Cat {cat.id} updated")

    async def delete_cat(self, id: int) -> None:
        await self.repo.delete_cat(id)
        logger.info(f"Cat {id} deleted")
