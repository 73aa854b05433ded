"""
Business logic for pet adoption requests.
"""

import logging
from typing import List

from ..schemas.adoption import AdoptionStatus, PetAdoption, PetAdoptionCreate
from .base import BaseService
from .validation import ensure_exists, require_fields

logger = logging.getLogger(__name__)


class AdoptionService(BaseService):
    """Adoption requests; each starts out ``pending``."""

    def adopt_pet(self, data: PetAdoptionCreate) -> PetAdoption:
        require_fields(data, "pet_id", "adopter_id")

        with self.repositories.lock:
            ensure_exists(self.repositories.pets, data.pet_id, "Pet")
            ensure_exists(self.repositories.users, data.adopter_id, "User")
            adoption = PetAdoption(
                **self._stamp(),
                pet_id=data.pet_id,
                adopter_id=data.adopter_id,
                status=AdoptionStatus.PENDING,
            )
            self.repositories.pet_adoptions.insert(adoption.id, adoption)
        logger.info("Adoption request %s for pet %s by %s", adoption.id, adoption.pet_id, adoption.adopter_id)
        return adoption

    def list_pet_adoptions(self) -> List[PetAdoption]:
        return self._listing(self.repositories.pet_adoptions.values(), "No pet adoptions found")
