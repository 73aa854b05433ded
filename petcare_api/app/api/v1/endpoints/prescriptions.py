"""
Prescription endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from petcare_api.app.api.deps import get_prescription_service
from petcare_api.app.schemas import Prescription, PrescriptionCreate
from petcare_api.app.services import PrescriptionService

router = APIRouter()


@router.post("/", response_model=Prescription, status_code=status.HTTP_201_CREATED)
async def add_prescription(
    prescription: PrescriptionCreate,
    service: PrescriptionService = Depends(get_prescription_service),
) -> Prescription:
    return service.add_prescription(prescription)


@router.get("/", response_model=List[Prescription])
async def list_prescriptions(
    service: PrescriptionService = Depends(get_prescription_service),
) -> List[Prescription]:
    return service.list_prescriptions()


@router.get("/{prescription_id}", response_model=Prescription)
async def get_prescription(
    prescription_id: str, service: PrescriptionService = Depends(get_prescription_service)
) -> Prescription:
    return service.get_prescription(prescription_id)
