"""
Business logic for pets.

The owner id of a pet is recorded as given; it is not checked
against the stored users.
"""

import logging
from typing import List

from ..schemas.pet import Pet, PetCreate
from .base import BaseService
from .validation import ensure_exists, require_fields, validate_non_negative

logger = logging.getLogger(__name__)


class PetService(BaseService):
    """Registration and lookup of pets."""

    def add_pet(self, data: PetCreate) -> Pet:
        require_fields(data, "owner_id", "name", "species", "breed", "age")
        validate_non_negative(data.age, "Age must be a non-negative integer")

        with self.repositories.lock:
            pet = Pet(
                **self._stamp(),
                owner_id=data.owner_id,
                name=data.name,
                species=data.species,
                breed=data.breed,
                age=data.age,
            )
            self.repositories.pets.insert(pet.id, pet)
        logger.info("Added pet %s (%s) for owner %s", pet.id, pet.name, pet.owner_id)
        return pet

    def list_pets(self) -> List[Pet]:
        return self._listing(self.repositories.pets.values(), "No pets found")

    def get_pet(self, pet_id: str) -> Pet:
        return ensure_exists(self.repositories.pets, pet_id, "Pet")

    def list_user_pets(self, user_id: str) -> List[Pet]:
        """Return the pets whose ``owner_id`` equals ``user_id``."""
        pets = self.repositories.pets.filter(lambda pet: pet.owner_id == user_id)
        return self._listing(pets, "No pets found for user")
