"""
Business logic for health records.
"""

import logging
from typing import List

from ..schemas.health_record import HealthRecord, HealthRecordCreate
from .base import BaseService
from .validation import ensure_exists, require_fields

logger = logging.getLogger(__name__)


class HealthRecordService(BaseService):
    """Health records written about a pet by a veterinarian."""

    def add_health_record(self, data: HealthRecordCreate) -> HealthRecord:
        require_fields(data, "record", message="Record is required")
        require_fields(data, "pet_id", "veterinarian_id")

        with self.repositories.lock:
            ensure_exists(self.repositories.pets, data.pet_id, "Pet")
            ensure_exists(self.repositories.users, data.veterinarian_id, "Veterinarian")
            health_record = HealthRecord(
                **self._stamp(),
                pet_id=data.pet_id,
                veterinarian_id=data.veterinarian_id,
                record=data.record,
            )
            self.repositories.health_records.insert(health_record.id, health_record)
        logger.info("Added health record %s for pet %s", health_record.id, health_record.pet_id)
        return health_record

    def list_health_records(self) -> List[HealthRecord]:
        return self._listing(self.repositories.health_records.values(), "No health records found")

    def get_health_record(self, record_id: str) -> HealthRecord:
        return ensure_exists(self.repositories.health_records, record_id, "Health record")

    def list_user_health_records(self, user_id: str) -> List[HealthRecord]:
        """Return health records for the pets owned by ``user_id``."""
        pet_ids = {pet.id for pet in self.repositories.pets.filter(lambda pet: pet.owner_id == user_id)}
        records = self.repositories.health_records.filter(lambda record: record.pet_id in pet_ids)
        return self._listing(records, "No health records found for user")
