"""
The set of entity collections owned by one running application.

``Repositories.open`` is called once at startup; the resulting object
is handed to every service instead of living in module globals.
"""

import logging
import threading
from dataclasses import dataclass, field

from ..core.db import COLLECTION_TABLES, init_db
from ..schemas import (
    Appointment,
    HealthRecord,
    Message,
    Notification,
    Payment,
    Pet,
    PetAdoption,
    Prescription,
    User,
)
from .collection import Collection

logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    """Owns the nine collections plus the lock guarding create operations.

    Create handlers hold ``lock`` across their read‑validate‑write
    sequence, so two concurrent creates cannot both pass a uniqueness
    or existence check against stale state.
    """

    users: Collection[User]
    pets: Collection[Pet]
    appointments: Collection[Appointment]
    health_records: Collection[HealthRecord]
    prescriptions: Collection[Prescription]
    messages: Collection[Message]
    notifications: Collection[Notification]
    payments: Collection[Payment]
    pet_adoptions: Collection[PetAdoption]
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @classmethod
    def open(cls, db_path: str) -> "Repositories":
        """Apply migrations to ``db_path`` and bind a collection to each table."""
        init_db(db_path)
        logger.info("Opened entity collections at %s", db_path)
        return cls(
            users=Collection("users", User, db_path),
            pets=Collection("pets", Pet, db_path),
            appointments=Collection("appointments", Appointment, db_path),
            health_records=Collection("health_records", HealthRecord, db_path),
            prescriptions=Collection("prescriptions", Prescription, db_path),
            messages=Collection("messages", Message, db_path),
            notifications=Collection("notifications", Notification, db_path),
            payments=Collection("payments", Payment, db_path),
            pet_adoptions=Collection("pet_adoptions", PetAdoption, db_path),
        )

    def counts(self) -> dict:
        """Number of records per collection, keyed by table name."""
        return {name: getattr(self, name).count() for name in COLLECTION_TABLES}
