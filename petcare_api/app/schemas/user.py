"""
Pydantic models for user data.

A user is a pet owner, a veterinarian or an administrator.  The role
is stored but not enforced by any operation.  ``username`` and
``email`` are unique across all users.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel, RecordBase


class UserRole(str, Enum):
    PET_OWNER = "PetOwner"
    VETERINARIAN = "Veterinarian"
    ADMIN = "Admin"


class UserCreate(CamelModel):
    """Schema for registering a user."""

    username: Optional[str] = Field(None, examples=["jdoe"])
    email: Optional[str] = Field(None, examples=["j@x.com"])
    phone_number: Optional[str] = Field(None, examples=["+12345678901"])
    role: Optional[UserRole] = Field(None, examples=[UserRole.PET_OWNER])

    @field_validator("role", mode="before")
    @classmethod
    def blank_role_is_missing(cls, value):
        # A blank role is reported as a missing field, not as an unknown role.
        if isinstance(value, str) and not value.strip():
            return None
        return value


class User(RecordBase):
    """Schema for reading a user."""

    username: str
    email: str
    phone_number: str
    role: UserRole
