from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from pydantic import field_validator
from ..common.breeds import BreedRecordBase
from ..common.dates import as_utc

class CatBreedRecord(BreedRecordBase, table=True):
    __tablename__ = "cat_breeds"
    id: Optional[int] = Field(default=None, primary_key=True)

class Cat(SQLModel):
    """An individual cat as every backend returns it; many cats reference one breed and one breeder."""
    id: Optional[int] = Field(default=None, primary_key=True)
    cat_name: str = Field(max_length=255, index=True)
    breed_id: int = Field(foreign_key="cat_breeds.id")
    breeder_id: int = Field(foreign_key="breeders.id")
    color: str = Field(max_length=255)
    date_of_birth: datetime
    spayed_neutered: int = Field(default=0, description="0/1 flag")
    description: str = Field(default="", max_length=255)
    weight: int

    @field_validator("date_of_birth")
    @classmethod
    def date_of_birth_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

class CatRecord(Cat, table=True):
    __tablename__ = "cats"
