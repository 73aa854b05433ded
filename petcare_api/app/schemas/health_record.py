"""Pydantic models for health records written by a veterinarian about a pet."""

from typing import Optional

from pydantic import Field

from .base import CamelModel, RecordBase


class HealthRecordCreate(CamelModel):
    pet_id: Optional[str] = Field(None, examples=["<pet id>"])
    veterinarian_id: Optional[str] = Field(None, examples=["<user id>"])
    record: Optional[str] = Field(None, examples=["Annual check-up, all clear"])


class HealthRecord(RecordBase):
    pet_id: str
    veterinarian_id: str
    record: str
