"""
Pydantic schema definitions for API payloads and stored records.

Each entity kind defines a ``*Create`` payload model and an immutable
record model.  Payload fields are optional at the schema level so
that missing values are reported by the service layer as
``InvalidPayload`` rather than by the framework.  Records are frozen:
nothing is ever mutated after creation.
"""

from .adoption import AdoptionStatus, PetAdoption, PetAdoptionCreate
from .appointment import Appointment, AppointmentCreate, AppointmentStatus
from .health_record import HealthRecord, HealthRecordCreate
from .message import Message, MessageCreate
from .notification import Notification, NotificationCreate
from .payment import Payment, PaymentCreate, PaymentStatus
from .pet import Pet, PetCreate
from .prescription import Prescription, PrescriptionCreate
from .user import User, UserCreate, UserRole

__all__ = [
    "AdoptionStatus",
    "Appointment",
    "AppointmentCreate",
    "AppointmentStatus",
    "HealthRecord",
    "HealthRecordCreate",
    "Message",
    "MessageCreate",
    "Notification",
    "NotificationCreate",
    "Payment",
    "PaymentCreate",
    "PaymentStatus",
    "Pet",
    "PetAdoption",
    "PetAdoptionCreate",
    "PetCreate",
    "Prescription",
    "PrescriptionCreate",
    "User",
    "UserCreate",
    "UserRole",
]
