"""
FastAPI dependencies that hand each request a service bound to the
application's repositories.
"""

from typing import Type, TypeVar

from fastapi import Request

from ..services import (
    AdoptionService,
    AppointmentService,
    HealthRecordService,
    MessageService,
    NotificationService,
    PaymentService,
    PetService,
    PrescriptionService,
    UserService,
)
from ..services.base import BaseService

ServiceT = TypeVar("ServiceT", bound=BaseService)


def _build(service_cls: Type[ServiceT], request: Request) -> ServiceT:
    state = request.app.state
    return service_cls(
        state.repositories,
        empty_result_is_error=state.settings.empty_result_is_error,
    )


def get_user_service(request: Request) -> UserService:
    return _build(UserService, request)


def get_pet_service(request: Request) -> PetService:
    return _build(PetService, request)


def get_appointment_service(request: Request) -> AppointmentService:
    return _build(AppointmentService, request)


def get_health_record_service(request: Request) -> HealthRecordService:
    return _build(HealthRecordService, request)


def get_prescription_service(request: Request) -> PrescriptionService:
    return _build(PrescriptionService, request)


def get_message_service(request: Request) -> MessageService:
    return _build(MessageService, request)


def get_notification_service(request: Request) -> NotificationService:
    return _build(NotificationService, request)


def get_payment_service(request: Request) -> PaymentService:
    return _build(PaymentService, request)


def get_adoption_service(request: Request) -> AdoptionService:
    return _build(AdoptionService, request)
