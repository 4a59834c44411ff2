from typing import List, Optional
from framework.repository.fixture import FIXTURE_INSERT_ID, FixtureTable
from .models import Breeder
from .repository import BreederRepository

BREEDERS = FixtureTable(
    [
        {
            "id": 1,
            "breeder_name": "Happy Paws Breeders",
            "address": "123 Main Street",
            "city": "Portland",
            "prov_state": "OR",
            "country": "USA",
            "zip": "97201",
            "phone": "555-1234",
            "email": "info@happypaws.com",
            "active": 1,
        },
        {
            "id": 2,
            "breeder_name": "Furry Friends Inc",
            "address": "456 Oak Avenue",
            "city": "Seattle",
            "prov_state": "WA",
            "country": "USA",
            "zip": "98101",
            "phone": "555-5678",
            "email": "contact@furryfriends.com",
            "active": 1,
        },
    ],
    build=Breeder.model_validate,
    order_by="breeder_name",
)


class FixtureBreederRepository(BreederRepository):

    async def all_breeders(self) -> List[Breeder]:
        return BREEDERS.all()

    async def get_breeder_by_id(self, id: int) -> Optional[Breeder]:
        return BREEDERS.get(id)

    async def insert_breeder(self, breeder: Breeder) -> int:
        return FIXTURE_INSERT_ID

    async def update_breeder(self, breeder: Breeder) -> None:
        return None

    async def delete_breeder(self, id: int) -> None:
        return None
