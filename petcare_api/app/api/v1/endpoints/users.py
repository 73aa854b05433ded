"""
User endpoints for API v1.

Provide registration and listing of users, plus the per-user views of
pets, appointments and health records.  Roles are stored but no
endpoint checks them.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from petcare_api.app.api.deps import (
    get_appointment_service,
    get_health_record_service,
    get_pet_service,
    get_user_service,
)
from petcare_api.app.schemas import Appointment, HealthRecord, Pet, User, UserCreate
from petcare_api.app.services import (
    AppointmentService,
    HealthRecordService,
    PetService,
    UserService,
)

router = APIRouter()


@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate, service: UserService = Depends(get_user_service)) -> User:
    """Register a new user.

    Username and email must be unique; the email and phone number
    must be well formed.
    """
    return service.create_user(user)


@router.get("/", response_model=List[User])
async def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    return service.list_users()


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> User:
    return service.get_user(user_id)


@router.get("/{user_id}/pets", response_model=List[Pet])
async def list_user_pets(user_id: str, service: PetService = Depends(get_pet_service)) -> List[Pet]:
    """Pets whose owner is ``user_id``."""
    return service.list_user_pets(user_id)


@router.get("/{user_id}/appointments", response_model=List[Appointment])
async def list_user_appointments(
    user_id: str, service: AppointmentService = Depends(get_appointment_service)
) -> List[Appointment]:
    """Appointments of the pets owned by ``user_id``."""
    return service.list_user_appointments(user_id)


@router.get("/{user_id}/health-records", response_model=List[HealthRecord])
async def list_user_health_records(
    user_id: str, service: HealthRecordService = Depends(get_health_record_service)
) -> List[HealthRecord]:
    """Health records of the pets owned by ``user_id``."""
    return service.list_user_health_records(user_id)
