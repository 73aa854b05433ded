"""
Adoption request endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from petcare_api.app.api.deps import get_adoption_service
from petcare_api.app.schemas import PetAdoption, PetAdoptionCreate
from petcare_api.app.services import AdoptionService

router = APIRouter()


@router.post("/", response_model=PetAdoption, status_code=status.HTTP_201_CREATED)
async def adopt_pet(
    adoption: PetAdoptionCreate, service: AdoptionService = Depends(get_adoption_service)
) -> PetAdoption:
    return service.adopt_pet(adoption)


@router.get("/", response_model=List[PetAdoption])
async def list_pet_adoptions(service: AdoptionService = Depends(get_adoption_service)) -> List[PetAdoption]:
    return service.list_pet_adoptions()
