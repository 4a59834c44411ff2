"""
Model registration: importing this module registers every table on SQLModel.metadata.
Breeders come first because the animal tables reference breeders.id.
"""
from apps.breeder.models import BreederRecord
from apps.dog.models import DogRecord, DogBreedRecord
from apps.cat.models import CatRecord, CatBreedRecord

__all__ = ["BreederRecord", "DogRecord", "DogBreedRecord", "CatRecord", "CatBreedRecord"]
