"""In-memory dog repository for exercising services and routes without a database."""

from datetime import datetime, timezone
from typing import List, Optional
from framework.repository.fixture import FIXTURE_INSERT_ID, FixtureTable
from ..common.breeds import Breed, breed_from_fixture
from .models import Dog
from .repository import DogRepository

DOG_BREEDS = FixtureTable(
    [
        {
            "id": 1,
            "breed": "Chihuahua",
            "weight_low_lbs": 2,
            "weight_high_lbs": 6,
            "average_lifespan": 15,
            "details": "Small, alert dog with sassy personality",
            "alternate_names": "",
            "geographic_origin": "Mexico",
        },
        {
            "id": 2,
            "breed": "German Shepherd",
            "weight_low_lbs": 50,
            "weight_high_lbs": 90,
            "average_lifespan": 12,
            "details": "Intelligent, loyal working dog",
            "alternate_names": "Alsatian",
            "geographic_origin": "Germany",
        },
        {
            "id": 3,
            "breed": "Labrador Retriever",
            "weight_low_lbs": 55,
            "weight_high_lbs": 80,
            "average_lifespan": 12,
            "details": "Friendly, outgoing, and active",
            "alternate_names": "Lab",
            "geographic_origin": "Canada",
        },
    ],
    build=breed_from_fixture,
    order_by="breed",
)

DOGS = FixtureTable(
    [
        {
            "id": 1,
            "dog_name": "Max",
            "breed_id": 2,
            "breeder_id": 1,
            "color": "Black and Tan",
            "date_of_birth": datetime(2020, 1, 15, tzinfo=timezone.utc),
            "spayed_neutered": 0,
            "description": "Friendly German Shepherd",
            "weight": 75,
        },
        {
            "id": 2,
            "dog_name": "Bella",
            "breed_id": 1,
            "breeder_id": 1,
            "color": "Tan",
            "date_of_birth": datetime(2021, 3, 20, tzinfo=timezone.utc),
            "spayed_neutered": 1,
            "description": "Small but mighty Chihuahua",
            "weight": 5,
        },
    ],
    build=Dog.model_validate,
    order_by="dog_name",
)


class FixtureDogRepository(DogRepository):
    """Reads the fixed data set; writes report success and store nothing."""

    async def all_breeds(self) -> List[Breed]:
        return DOG_BREEDS.all()

    async def get_breed_by_id(self, id: int) -> Optional[Breed]:
        return DOG_BREEDS.get(id)

    async def all_dogs(self) -> List[Dog]:
        return DOGS.all()

    async def get_dog_by_id(self, id: int) -> Optional[Dog]:
        return DOGS.get(id)

    async def insert_dog(self, dog: Dog) -> int:
        return FIXTURE_INSERT_ID

    async def update_dog(self, dog: Dog) -> None:
        return None

    async def delete_dog(self, id: int) -> None:
        return None
