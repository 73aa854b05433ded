"""
Validation helpers shared by the create operations.

Checks run before anything is written and raise on the first
failure:

* presence (``require_fields``): ``None``, empty and blank strings
  are missing; ``0`` is present;
* format (``validate_email``, ``validate_phone``,
  ``validate_non_negative``, ``validate_positive``);
* uniqueness (``ensure_unique``): a linear scan over the collection;
* existence (``ensure_exists``): a single key lookup.

Format and presence failures raise ``InvalidPayload``; a missing
referenced record raises ``NotFound``.
"""

import logging
import re
from typing import Any

from ..core.errors import InvalidPayload, NotFound
from ..repositories.collection import Collection

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?[0-9]{10,14}")

ALL_FIELDS_REQUIRED = "All fields are required"


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_fields(payload: Any, *fields: str, message: str = ALL_FIELDS_REQUIRED) -> None:
    """Raise ``InvalidPayload`` if any of ``fields`` is missing on ``payload``."""
    missing = [name for name in fields if is_missing(getattr(payload, name, None))]
    if missing:
        logger.warning("Rejected payload, missing fields: %s", ", ".join(missing))
        raise InvalidPayload(message)


def validate_email(email: str) -> None:
    if not EMAIL_PATTERN.fullmatch(email):
        logger.warning("Rejected email %r", email)
        raise InvalidPayload("Invalid email format")


def validate_phone(phone_number: str) -> None:
    if not PHONE_PATTERN.fullmatch(phone_number):
        logger.warning("Rejected phone number %r", phone_number)
        raise InvalidPayload("Invalid phone number format")


def validate_non_negative(value: int, message: str) -> None:
    if value < 0:
        raise InvalidPayload(message)


def validate_positive(value: int, message: str) -> None:
    if value <= 0:
        raise InvalidPayload(message)


def ensure_unique(collection: Collection, field: str, value: Any, message: str) -> None:
    """Raise ``InvalidPayload`` if a stored record already has ``field == value``.

    This is an O(n) scan; a secondary index keyed by ``field`` is the
    upgrade path if creates on ``collection`` become frequent.
    """
    for record in collection.values():
        if getattr(record, field) == value:
            logger.warning("Rejected duplicate %s in %s", field, collection.table)
            raise InvalidPayload(message)


def ensure_exists(collection: Collection, key: str, label: str) -> Any:
    """Return the record stored under ``key`` or raise ``NotFound`` naming it."""
    record = collection.get(key)
    if record is None:
        logger.warning("%s with id %s not found", label, key)
        raise NotFound(f"{label} with id {key} not found")
    return record
