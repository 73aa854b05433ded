"""
Pydantic models for adoption requests.

A request names the pet and the prospective adopter.  Requests start
out ``pending``; approval and rejection are decided elsewhere.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from .base import CamelModel, RecordBase


class AdoptionStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PetAdoptionCreate(CamelModel):
    pet_id: Optional[str] = Field(None, examples=["<pet id>"])
    adopter_id: Optional[str] = Field(None, examples=["<user id>"])


class PetAdoption(RecordBase):
    pet_id: str
    adopter_id: str
    status: AdoptionStatus = AdoptionStatus.PENDING
