"""
Pydantic models for direct messages between users.

Both the sender and the recipient must exist when the message is
sent.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel, RecordBase


class MessageCreate(CamelModel):
    sender_id: Optional[str] = Field(None, examples=["<user id>"])
    recipient_id: Optional[str] = Field(None, examples=["<user id>"])
    content: Optional[str] = Field(None, examples=["Rex is due for his shots"])


class Message(RecordBase):
    sender_id: str
    recipient_id: str
    content: str
