"""In-memory cat repository for exercising services and routes without a database."""

from datetime import datetime, timezone
from typing import List, Optional
from framework.repository.fixture import FIXTURE_INSERT_ID, FixtureTable
from ..common.breeds import Breed, breed_from_fixture
from .models import Cat
from .repository import CatRepository

CAT_BREEDS = FixtureTable(
    [
        {
            "id": 1,
            "breed": "Persian",
            "weight_low_lbs": 7,
            "weight_high_lbs": 12,
            "average_lifespan": 15,
            "details": "Long-haired, gentle cat",
            "alternate_names": "",
            "geographic_origin": "Iran",
        },
        {
            "id": 2,
            "breed": "Siamese",
            "weight_low_lbs": 8,
            "weight_high_lbs": 12,
            "average_lifespan": 15,
            "details": "Vocal, social cat",
            "alternate_names": "",
            "geographic_origin": "Thailand",
        },
    ],
    build=breed_from_fixture,
    order_by="breed",
)

CATS = FixtureTable(
    [
        {
            "id": 1,
            "cat_name": "Whiskers",
            "breed_id": 1,
            "breeder_id": 1,
            "color": "Orange Tabby",
            "date_of_birth": datetime(2021, 5, 10, tzinfo=timezone.utc),
            "spayed_neutered": 1,
            "description": "Playful tabby cat",
            "weight": 12,
        },
        {
            "id": 2,
            "cat_name": "Luna",
            "breed_id": 2,
            "breeder_id": 1,
            "color": "Seal Point",
            "date_of_birth": datetime(2020, 8, 15, tzinfo=timezone.utc),
            "spayed_neutered": 1,
            "description": "Talkative Siamese",
            "weight": 10,
        },
    ],
    build=Cat.model_validate,
    order_by="cat_name",
)


class FixtureCatRepository(CatRepository):
    """Fixed cat data; inserts return FIXTURE_INSERT_ID, updates and deletes do nothing."""

    async def all_breeds(self) -> List[Breed]:
        return CAT_BREEDS.all()

    async def get_breed_by_id(self, id: int) -> Optional[Breed]:
        return CAT_BREEDS.get(id)

    async def all_cats(self) -> List[Cat]:
        return CATS.all()

    async def get_cat_by_id(self, id: int) -> Optional[Cat]:
        return CATS.get(id)

    async def insert_cat(self, cat: Cat) -> int:
        return FIXTURE_INSERT_ID

    async def update_cat(self, cat: Cat) -> None:
        return None

    async def delete_cat(self, id: int) -> None:
        return None
