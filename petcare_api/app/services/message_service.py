"""
Service layer for direct messages between users.

A message is accepted only when both the sender and the recipient
are registered users.
"""

import logging
from typing import List

from ..schemas.message import Message, MessageCreate
from .base import BaseService
from .validation import ensure_exists, require_fields

logger = logging.getLogger(__name__)


class MessageService(BaseService):
    """Service for sending and listing messages."""

    def send_message(self, data: MessageCreate) -> Message:
        require_fields(data, "sender_id", "recipient_id", "content")

        with self.repositories.lock:
            ensure_exists(self.repositories.users, data.sender_id, "User")
            ensure_exists(self.repositories.users, data.recipient_id, "User")
            message = Message(
                **self._stamp(),
                sender_id=data.sender_id,
                recipient_id=data.recipient_id,
                content=data.content,
            )
            self.repositories.messages.insert(message.id, message)
        logger.info("Message %s sent from %s to %s", message.id, message.sender_id, message.recipient_id)
        return message

    def list_messages(self) -> List[Message]:
        """Return all messages as a list."""
        return self._listing(self.repositories.messages.values(), "No messages found")
