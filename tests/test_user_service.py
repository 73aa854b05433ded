"""
Tests for user registration and lookup.
"""

import re

import pytest

from petcare_api.app.core.clock import new_id, utc_now_iso
from petcare_api.app.core.errors import InvalidPayload, NotFound
from petcare_api.app.schemas import UserCreate, UserRole
from petcare_api.app.services import UserService

from .conftest import FIXED_TIME


def _payload(**overrides):
    fields = {
        "username": "jdoe",
        "email": "j@x.com",
        "phone_number": "+12345678901",
        "role": UserRole.PET_OWNER,
    }
    fields.update(overrides)
    return UserCreate(**fields)


class TestCreateUser:
    def test_creates_user_with_stamp(self, user_service):
        user = user_service.create_user(_payload())
        assert user.id == "id-1"
        assert user.created_at == FIXED_TIME
        assert user.username == "jdoe"
        assert user.role is UserRole.PET_OWNER
        assert user_service.list_users() == [user]

    def test_accepts_camel_case_input(self, user_service):
        payload = UserCreate(
            **{"username": "jdoe", "email": "j@x.com", "phoneNumber": "1234567890", "role": "Admin"}
        )
        user = user_service.create_user(payload)
        assert user.phone_number == "1234567890"
        assert user.role is UserRole.ADMIN

    @pytest.mark.parametrize("field", ["username", "email", "phone_number", "role"])
    def test_missing_field(self, user_service, field):
        with pytest.raises(InvalidPayload, match="All fields are required"):
            user_service.create_user(_payload(**{field: None}))
        assert user_service.repositories.users.count() == 0

    def test_blank_username_is_missing(self, user_service):
        with pytest.raises(InvalidPayload, match="All fields are required"):
            user_service.create_user(_payload(username="   "))

    def test_blank_role_is_missing(self, user_service):
        payload = UserCreate(username="jdoe", email="j@x.com", phone_number="1234567890", role="")
        assert payload.role is None
        with pytest.raises(InvalidPayload, match="All fields are required"):
            user_service.create_user(payload)

    def test_invalid_email(self, user_service):
        with pytest.raises(InvalidPayload, match="Invalid email format"):
            user_service.create_user(_payload(email="not-an-email"))

    def test_invalid_phone(self, user_service):
        with pytest.raises(InvalidPayload, match="Invalid phone number format"):
            user_service.create_user(_payload(phone_number="12345"))

    def test_duplicate_email(self, user_service, owner):
        with pytest.raises(InvalidPayload, match="User with email already exists"):
            user_service.create_user(_payload(username="other"))
        assert user_service.repositories.users.count() == 1

    def test_duplicate_username(self, user_service, owner):
        with pytest.raises(InvalidPayload) as excinfo:
            user_service.create_user(_payload(email="other@x.com"))
        assert excinfo.value.reason == "User with username already exists, try another one"

    def test_format_checked_before_uniqueness(self, user_service, owner):
        with pytest.raises(InvalidPayload, match="Invalid phone number format"):
            user_service.create_user(_payload(phone_number="abc"))

    def test_email_uniqueness_is_case_sensitive(self, user_service, owner):
        user = user_service.create_user(_payload(username="other", email="J@x.com"))
        assert user.email == "J@x.com"
        assert len(user_service.list_users()) == 2


class TestUserQueries:
    def test_list_users_empty_is_not_found(self, user_service):
        with pytest.raises(NotFound, match="No users found"):
            user_service.list_users()

    def test_list_users_empty_allowed(self, make_service):
        service = make_service(UserService, empty_result_is_error=False)
        assert service.list_users() == []

    def test_list_users_in_creation_order(self, user_service, owner, vet):
        assert [user.username for user in user_service.list_users()] == ["jdoe", "drsmith"]

    def test_get_user(self, user_service, owner):
        assert user_service.get_user(owner.id) == owner

    def test_get_unknown_user(self, user_service):
        with pytest.raises(NotFound, match="User with id nobody not found"):
            user_service.get_user("nobody")


class TestDefaultStamp:
    def test_default_id_and_clock(self, repositories):
        user = UserService(repositories).create_user(_payload())
        assert re.fullmatch(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}", user.id)
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", user.created_at)

    def test_new_ids_are_distinct(self):
        assert len({new_id() for _ in range(100)}) == 100

    def test_clock_format(self):
        assert utc_now_iso().endswith("Z")
