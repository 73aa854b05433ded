"""
Appointment endpoints for API v1.

Scheduling requires an existing pet and an existing veterinarian; a
missing one yields 404 naming the id.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from petcare_api.app.api.deps import get_appointment_service
from petcare_api.app.schemas import Appointment, AppointmentCreate
from petcare_api.app.services import AppointmentService

router = APIRouter()


@router.post("/", response_model=Appointment, status_code=status.HTTP_201_CREATED)
async def schedule_appointment(
    appointment: AppointmentCreate,
    service: AppointmentService = Depends(get_appointment_service),
) -> Appointment:
    return service.schedule_appointment(appointment)


@router.get("/", response_model=List[Appointment])
async def list_appointments(
    service: AppointmentService = Depends(get_appointment_service),
) -> List[Appointment]:
    return service.list_appointments()


@router.get("/{appointment_id}", response_model=Appointment)
async def get_appointment(
    appointment_id: str, service: AppointmentService = Depends(get_appointment_service)
) -> Appointment:
    return service.get_appointment(appointment_id)
