"""
Central pytest configuration for the Pet Care API tests.

Every test gets its own SQLite file under ``tmp_path``.  Services are
built with a counting id factory and a fixed clock so records are
predictable.
"""

import itertools

import pytest
from fastapi.testclient import TestClient

from petcare_api.app.core.config import Settings
from petcare_api.app.main import create_app
from petcare_api.app.repositories import Repositories
from petcare_api.app.schemas import (
    AppointmentCreate,
    PetCreate,
    UserCreate,
    UserRole,
)
from petcare_api.app.services import (
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

FIXED_TIME = "2024-01-01T10:00:00.000Z"


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "petcare.db")


@pytest.fixture
def repositories(db_path):
    return Repositories.open(db_path)


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def make_service(repositories, id_factory):
    """Build any service bound to the test repositories."""

    def _make(service_cls, **kwargs):
        return service_cls(repositories, id_factory=id_factory, clock=lambda: FIXED_TIME, **kwargs)

    return _make


@pytest.fixture
def user_service(make_service):
    return make_service(UserService)


@pytest.fixture
def pet_service(make_service):
    return make_service(PetService)


@pytest.fixture
def appointment_service(make_service):
    return make_service(AppointmentService)


@pytest.fixture
def health_record_service(make_service):
    return make_service(HealthRecordService)


@pytest.fixture
def prescription_service(make_service):
    return make_service(PrescriptionService)


@pytest.fixture
def message_service(make_service):
    return make_service(MessageService)


@pytest.fixture
def notification_service(make_service):
    return make_service(NotificationService)


@pytest.fixture
def payment_service(make_service):
    return make_service(PaymentService)


@pytest.fixture
def adoption_service(make_service):
    return make_service(AdoptionService)


@pytest.fixture
def owner(user_service):
    return user_service.create_user(
        UserCreate(
            username="jdoe",
            email="j@x.com",
            phone_number="+12345678901",
            role=UserRole.PET_OWNER,
        )
    )


@pytest.fixture
def vet(user_service):
    return user_service.create_user(
        UserCreate(
            username="drsmith",
            email="smith@vets.org",
            phone_number="0123456789",
            role=UserRole.VETERINARIAN,
        )
    )


@pytest.fixture
def pet(pet_service, owner):
    return pet_service.add_pet(
        PetCreate(owner_id=owner.id, name="Rex", species="dog", breed="lab", age=3)
    )


@pytest.fixture
def appointment(appointment_service, pet, vet):
    return appointment_service.schedule_appointment(
        AppointmentCreate(pet_id=pet.id, veterinarian_id=vet.id, date="2024-01-01")
    )


@pytest.fixture
def client(db_path):
    """HTTP client for an application backed by the test database."""
    app = create_app(Settings(database_url=db_path))
    with TestClient(app) as test_client:
        yield test_client
