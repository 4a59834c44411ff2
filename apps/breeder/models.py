from sqlmodel import SQLModel, Field
from typing import Optional

class Breeder(SQLModel):
    id: Optional[int] = Field(default=None, primary_key=True)
    breeder_name: str = Field(max_length=255, index=True)
    address: str = Field(default="", max_length=255)
    city: str = Field(default="", max_length=255)
    prov_state: str = Field(default="", max_length=255)
    country: str = Field(default="", max_length=255)
    zip: str = Field(default="", max_length=20)
    phone: str = Field(default="", max_length=50)
    email: str = Field(default="", max_length=320)
    active: int = Field(default=1, description="0/1 flag")

class BreederRecord(Breeder, table=True):
    __tablename__ = "breeders"
