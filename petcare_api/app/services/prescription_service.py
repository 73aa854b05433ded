"""
Business logic for prescriptions.
"""

import logging
from typing import List

from ..schemas.prescription import Prescription, PrescriptionCreate
from .base import BaseService
from .validation import ensure_exists, require_fields

logger = logging.getLogger(__name__)


class PrescriptionService(BaseService):
    """Prescriptions issued for a pet by a veterinarian."""

    def add_prescription(self, data: PrescriptionCreate) -> Prescription:
        require_fields(data, "pet_id", "veterinarian_id", "medication", "dosage")

        with self.repositories.lock:
            ensure_exists(self.repositories.pets, data.pet_id, "Pet")
            ensure_exists(self.repositories.users, data.veterinarian_id, "Veterinarian")
            prescription = Prescription(
                **self._stamp(),
                pet_id=data.pet_id,
                veterinarian_id=data.veterinarian_id,
                medication=data.medication,
                dosage=data.dosage,
            )
            self.repositories.prescriptions.insert(prescription.id, prescription)
        logger.info(
            "Added prescription %s (%s) for pet %s",
            prescription.id,
            prescription.medication,
            prescription.pet_id,
        )
        return prescription

    def list_prescriptions(self) -> List[Prescription]:
        return self._listing(self.repositories.prescriptions.values(), "No prescriptions found")

    def get_prescription(self, prescription_id: str) -> Prescription:
        return ensure_exists(self.repositories.prescriptions, prescription_id, "Prescription")

    def list_pet_prescriptions(self, pet_id: str) -> List[Prescription]:
        prescriptions = self.repositories.prescriptions.filter(
            lambda prescription: prescription.pet_id == pet_id
        )
        return self._listing(prescriptions, "No prescriptions found for pet")
