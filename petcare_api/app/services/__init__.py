"""
Service layer.

Each service encapsulates the operations of one entity kind and works
against the ``Repositories`` it is constructed with.  Services raise
``InvalidPayload`` or ``NotFound`` for expected failures; API handlers
stay free of business rules.
"""

from .adoption_service import AdoptionService
from .appointment_service import AppointmentService
from .health_record_service import HealthRecordService
from .message_service import MessageService
from .notification_service import NotificationService
from .payment_service import PaymentService
from .pet_service import PetService
from .prescription_service import PrescriptionService
from .user_service import UserService

__all__ = [
    "AdoptionService",
    "AppointmentService",
    "HealthRecordService",
    "MessageService",
    "NotificationService",
    "PaymentService",
    "PetService",
    "PrescriptionService",
    "UserService",
]
