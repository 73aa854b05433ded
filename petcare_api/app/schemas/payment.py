"""
Pydantic models for payment data.

A payment is made by a user for an appointment.  Amounts are whole
units of currency.  Payments are recorded as ``pending``; the other
statuses exist for settlement, which happens outside this service.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, StrictInt

from .base import CamelModel, RecordBase


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class PaymentCreate(CamelModel):
    """Schema for creating a payment."""

    user_id: Optional[str] = Field(None, examples=["<user id>"])
    appointment_id: Optional[str] = Field(None, examples=["<appointment id>"])
    amount: Optional[StrictInt] = Field(None, examples=[100])


class Payment(RecordBase):
    """Schema for reading a payment."""

    user_id: str
    appointment_id: str
    amount: int
    status: PaymentStatus = PaymentStatus.PENDING
