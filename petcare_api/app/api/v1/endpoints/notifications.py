"""
Notification endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from petcare_api.app.api.deps import get_notification_service
from petcare_api.app.schemas import Notification, NotificationCreate
from petcare_api.app.services import NotificationService

router = APIRouter()


@router.post("/", response_model=Notification, status_code=status.HTTP_201_CREATED)
async def send_notification(
    notification: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
) -> Notification:
    return service.send_notification(notification)


@router.get("/", response_model=List[Notification])
async def list_notifications(
    service: NotificationService = Depends(get_notification_service),
) -> List[Notification]:
    return service.list_notifications()
