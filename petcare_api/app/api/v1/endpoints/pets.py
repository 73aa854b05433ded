"""
Pet endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from petcare_api.app.api.deps import get_pet_service, get_prescription_service
from petcare_api.app.schemas import Pet, PetCreate, Prescription
from petcare_api.app.services import PetService, PrescriptionService

router = APIRouter()


@router.post("/", response_model=Pet, status_code=status.HTTP_201_CREATED)
async def add_pet(pet: PetCreate, service: PetService = Depends(get_pet_service)) -> Pet:
    """Add a pet.  The owner id is stored as given."""
    return service.add_pet(pet)


@router.get("/", response_model=List[Pet])
async def list_pets(service: PetService = Depends(get_pet_service)) -> List[Pet]:
    return service.list_pets()


@router.get("/{pet_id}", response_model=Pet)
async def get_pet(pet_id: str, service: PetService = Depends(get_pet_service)) -> Pet:
    return service.get_pet(pet_id)


@router.get("/{pet_id}/prescriptions", response_model=List[Prescription])
async def list_pet_prescriptions(
    pet_id: str, service: PrescriptionService = Depends(get_prescription_service)
) -> List[Prescription]:
    return service.list_pet_prescriptions(pet_id)
