"""Pydantic models for prescriptions."""

from typing import Optional

from pydantic import Field

from .base import CamelModel, RecordBase


class PrescriptionCreate(CamelModel):
    pet_id: Optional[str] = Field(None, examples=["<pet id>"])
    veterinarian_id: Optional[str] = Field(None, examples=["<user id>"])
    medication: Optional[str] = Field(None, examples=["Amoxicillin"])
    dosage: Optional[str] = Field(None, examples=["250mg twice daily"])


class Prescription(RecordBase):
    pet_id: str
    veterinarian_id: str
    medication: str
    dosage: str
