"""
Business logic for users.

Users are created once and never changed.  Email and username must be
unique; both are checked with a scan over the stored users while the
repository lock is held, so concurrent registrations cannot both
claim the same email.
"""

import logging
from typing import List

from ..schemas.user import User, UserCreate
from .base import BaseService
from .validation import (
    ensure_exists,
    ensure_unique,
    require_fields,
    validate_email,
    validate_phone,
)

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Registration and lookup of users."""

    def create_user(self, data: UserCreate) -> User:
        """Register a new user.

        Checks run in order: all fields present, email format, phone
        format, email unique, username unique.  The first failing
        check raises ``InvalidPayload`` and nothing is stored.
        """
        require_fields(data, "username", "email", "phone_number", "role")
        validate_email(data.email)
        validate_phone(data.phone_number)

        users = self.repositories.users
        with self.repositories.lock:
            ensure_unique(users, "email", data.email, "User with email already exists")
            ensure_unique(
                users,
                "username",
                data.username,
                "User with username already exists, try another one",
            )
            user = User(
                **self._stamp(),
                username=data.username,
                email=data.email,
                phone_number=data.phone_number,
                role=data.role,
            )
            users.insert(user.id, user)
        logger.info("Registered user %s (%s) as %s", user.id, user.username, user.role.value)
        return user

    def list_users(self) -> List[User]:
        """Return all users in registration order."""
        return self._listing(self.repositories.users.values(), "No users found")

    def get_user(self, user_id: str) -> User:
        return ensure_exists(self.repositories.users, user_id, "User")
