"""
Pydantic models for pets.

``owner_id`` names the owning user but is not checked against the
user collection when a pet is added.
"""

from typing import Optional

from pydantic import Field, StrictInt

from .base import CamelModel, RecordBase


class PetCreate(CamelModel):
    owner_id: Optional[str] = Field(None, examples=["u1"])
    name: Optional[str] = Field(None, examples=["Rex"])
    species: Optional[str] = Field(None, examples=["dog"])
    breed: Optional[str] = Field(None, examples=["lab"])
    age: Optional[StrictInt] = Field(None, examples=[3], description="Age in whole years")


class Pet(RecordBase):
    owner_id: str
    name: str
    species: str
    breed: str
    age: int
