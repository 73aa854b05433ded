"""
Identifier and timestamp sources for newly created records.

Services receive these callables as collaborators so tests can pin
identifiers and timestamps.
"""

import uuid
from datetime import datetime, timezone


def new_id() -> str:
    """Return a fresh opaque record identifier (UUID4 string)."""
    return str(uuid.uuid4())


def utc_now_iso() -> str:
    """Return the current UTC time as ISO‑8601, e.g. ``2024-01-01T10:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
