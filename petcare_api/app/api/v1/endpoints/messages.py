"""
Message endpoints for API v1.

These routes let users send direct messages to each other and list
all messages.  Both the sender and the recipient must exist.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from petcare_api.app.api.deps import get_message_service
from petcare_api.app.schemas import Message, MessageCreate
from petcare_api.app.services import MessageService

router = APIRouter()


@router.post("/", response_model=Message, status_code=status.HTTP_201_CREATED)
async def send_message(message: MessageCreate, service: MessageService = Depends(get_message_service)) -> Message:
    return service.send_message(message)


@router.get("/", response_model=List[Message])
async def list_messages(service: MessageService = Depends(get_message_service)) -> List[Message]:
    """List all messages."""
    return service.list_messages()
