"""
Payment endpoints for API v1.

These routes record payments for appointments and list them.  A new
payment is always ``pending``; no endpoint confirms or refunds it.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from petcare_api.app.api.deps import get_payment_service
from petcare_api.app.schemas import Payment, PaymentCreate
from petcare_api.app.services import PaymentService

router = APIRouter()


@router.post("/", response_model=Payment, status_code=status.HTTP_201_CREATED)
async def make_payment(payment: PaymentCreate, service: PaymentService = Depends(get_payment_service)) -> Payment:
    """Record a payment for an appointment.

    Returns 400 for a missing field or non-positive amount and 404 if
    the user or appointment does not exist.
    """
    return service.make_payment(payment)


@router.get("/", response_model=List[Payment])
async def list_payments(service: PaymentService = Depends(get_payment_service)) -> List[Payment]:
    return service.list_payments()
