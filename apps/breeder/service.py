from typing import List, Optional
from framework.logging.logger import get_logger
from .models import Breeder
from .repository import BreederRepository

logger = get_logger("breeder_service")

class BreederService:
    def __init__(self, repo: BreederRepository):
        """Initialize BreederService with any BreederRepository backend."""
        self.repo = repo

    async def get_all_breeders(self) -> List[Breeder]:
        return await self.repo.all_breeders()

    async def get_breeder_by_id(self, id: int) -> Optional[Breeder]:
        """Breeder by ID; None when unknown (not an error)."""
        return await self.repo.get_breeder_by_id(id)

    async def create_breeder(self, breeder: Breeder) -> int:
        breeder_id = await self.repo.insert_breeder(breeder)
        logger.info(f"Breeder {breeder.breeder_name} created with id {breeder_id}")
        return breeder_id

    async def update_breeder(self, breeder: Breeder) -> None:
        await self.repo.update_breeder(breeder)
        logger.info(f"Breeder {breeder.id} updated")

    async def delete_breeder(self, id: int) -> None:
        await self.repo.delete_breeder(id)
        logger.info(f"Breeder {id} deleted")
