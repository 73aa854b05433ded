"""
Business logic for veterinary appointments.

Scheduling requires the pet and the veterinarian to exist.  Every
new appointment has status ``scheduled``.
"""

import logging
from typing import List

from ..schemas.appointment import Appointment, AppointmentCreate, AppointmentStatus
from .base import BaseService
from .validation import ensure_exists, require_fields

logger = logging.getLogger(__name__)


class AppointmentService(BaseService):
    """Scheduling and lookup of appointments."""

    def schedule_appointment(self, data: AppointmentCreate) -> Appointment:
        """Schedule an appointment for an existing pet with an existing user.

        Raises ``InvalidPayload`` when a field is missing and
        ``NotFound`` naming the pet or veterinarian id that does not
        resolve.
        """
        require_fields(data, "pet_id", "veterinarian_id", "date")

        with self.repositories.lock:
            ensure_exists(self.repositories.pets, data.pet_id, "Pet")
            ensure_exists(self.repositories.users, data.veterinarian_id, "Veterinarian")
            appointment = Appointment(
                **self._stamp(),
                pet_id=data.pet_id,
                veterinarian_id=data.veterinarian_id,
                date=data.date,
                status=AppointmentStatus.SCHEDULED,
            )
            self.repositories.appointments.insert(appointment.id, appointment)
        logger.info(
            "Scheduled appointment %s for pet %s on %s",
            appointment.id,
            appointment.pet_id,
            appointment.date,
        )
        return appointment

    def list_appointments(self) -> List[Appointment]:
        return self._listing(self.repositories.appointments.values(), "No appointments found")

    def get_appointment(self, appointment_id: str) -> Appointment:
        return ensure_exists(self.repositories.appointments, appointment_id, "Appointment")

    def list_user_appointments(self, user_id: str) -> List[Appointment]:
        """Return appointments for the pets owned by ``user_id``."""
        pet_ids = {pet.id for pet in self.repositories.pets.filter(lambda pet: pet.owner_id == user_id)}
        appointments = self.repositories.appointments.filter(
            lambda appointment: appointment.pet_id in pet_ids
        )
        return self._listing(appointments, "No appointments found for user")
