"""
Pydantic models for veterinary appointments.

An appointment links a pet to the user who will see it.  The date is
kept as the string the client supplied.  Every appointment starts
out ``scheduled``.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from .base import CamelModel, RecordBase


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"


class AppointmentCreate(CamelModel):
    pet_id: Optional[str] = Field(None, examples=["<pet id>"])
    veterinarian_id: Optional[str] = Field(None, examples=["<user id>"])
    date: Optional[str] = Field(None, examples=["2024-01-01"])


class Appointment(RecordBase):
    pet_id: str
    veterinarian_id: str
    date: str
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
