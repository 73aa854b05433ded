"""Pydantic models for notifications addressed to a single user."""

from typing import Optional

from pydantic import Field

from .base import CamelModel, RecordBase


class NotificationCreate(CamelModel):
    user_id: Optional[str] = Field(None, examples=["<user id>"])
    message: Optional[str] = Field(None, examples=["Your appointment is tomorrow"])


class Notification(RecordBase):
    user_id: str
    message: str
