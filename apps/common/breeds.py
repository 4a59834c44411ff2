"""Breed model and queries shared by the dog and cat domains."""

from typing import Any, Dict, Optional, Type
from sqlalchemy import func
from sqlmodel import SQLModel, Field, select


def average_weight(low: int, high: int) -> int:
    """Integer mean of the weight bounds, halves rounded up like the store's unsigned cast."""
    return (low + high + 1) // 2


class BreedRecordBase(SQLModel):
    """Columns of a breed table; the average weight is never stored."""
    breed: str = Field(max_length=255, index=True)
    weight_low_lbs: int
    weight_high_lbs: int
    lifespan: int
    details: Optional[str] = None
    alternate_names: Optional[str] = Field(default=None, max_length=255)
    geographic_origin: Optional[str] = Field(default=None, max_length=255)


class Breed(SQLModel):
    """Breed as returned by every backend."""
    id: int
    breed: str
    weight_low_lbs: int
    weight_high_lbs: int
    average_weight: int
    average_lifespan: int
    details: str = ""
    alternate_names: str = ""
    geographic_origin: str = ""


def breed_select(record: Type[BreedRecordBase]):
    """Select a breed table's columns in Breed shape, deriving the average weight in SQL."""
    return select(
        record.id,
        record.breed,
        record.weight_low_lbs,
        record.weight_high_lbs,
        ((record.weight_low_lbs + record.weight_high_lbs + 1) // 2).label("average_weight"),
        record.lifespan.label("average_lifespan"),
        func.coalesce(record.details, "").label("details"),
        func.coalesce(record.alternate_names, "").label("alternate_names"),
        func.coalesce(record.geographic_origin, "").label("geographic_origin"),
    )


def breed_from_row(row: Any) -> Breed:
    return Breed.model_validate(dict(row._mapping))


def breed_from_fixture(row: Dict[str, Any]) -> Breed:
    return Breed(
        average_weight=average_weight(row["weight_low_lbs"], row["weight_high_lbs"]),
        **row,
    )
