"""
Health record endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from petcare_api.app.api.deps import get_health_record_service
from petcare_api.app.schemas import HealthRecord, HealthRecordCreate
from petcare_api.app.services import HealthRecordService

router = APIRouter()


@router.post("/", response_model=HealthRecord, status_code=status.HTTP_201_CREATED)
async def add_health_record(
    record: HealthRecordCreate,
    service: HealthRecordService = Depends(get_health_record_service),
) -> HealthRecord:
    return service.add_health_record(record)


@router.get("/", response_model=List[HealthRecord])
async def list_health_records(
    service: HealthRecordService = Depends(get_health_record_service),
) -> List[HealthRecord]:
    return service.list_health_records()


@router.get("/{record_id}", response_model=HealthRecord)
async def get_health_record(
    record_id: str, service: HealthRecordService = Depends(get_health_record_service)
) -> HealthRecord:
    return service.get_health_record(record_id)
