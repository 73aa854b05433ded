"""
Notifications addressed to a single registered user.
"""

import logging
from typing import List

from ..schemas.notification import Notification, NotificationCreate
from .base import BaseService
from .validation import ensure_exists, require_fields

logger = logging.getLogger(__name__)


class NotificationService(BaseService):

    def send_notification(self, data: NotificationCreate) -> Notification:
        require_fields(data, "user_id", "message")

        with self.repositories.lock:
            ensure_exists(self.repositories.users, data.user_id, "User")
            notification = Notification(**self._stamp(), user_id=data.user_id, message=data.message)
            self.repositories.notifications.insert(notification.id, notification)
        logger.info("Notification %s sent to user %s", notification.id, notification.user_id)
        return notification

    def list_notifications(self) -> List[Notification]:
        return self._listing(self.repositories.notifications.values(), "No notifications found")
