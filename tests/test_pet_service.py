"""
Tests for pet registration and the per-owner pet listing.
"""

import pytest
from pydantic import ValidationError

from petcare_api.app.core.errors import InvalidPayload, NotFound
from petcare_api.app.schemas import PetCreate
from petcare_api.app.services import PetService


def _payload(**overrides):
    fields = {"owner_id": "u1", "name": "Rex", "species": "dog", "breed": "lab", "age": 3}
    fields.update(overrides)
    return PetCreate(**fields)


class TestAddPet:
    def test_adds_pet(self, pet_service, owner):
        pet = pet_service.add_pet(_payload(owner_id=owner.id))
        assert pet.owner_id == owner.id
        assert pet.age == 3
        assert pet_service.get_pet(pet.id) == pet

    def test_age_zero_is_accepted(self, pet_service):
        assert pet_service.add_pet(_payload(age=0)).age == 0

    def test_negative_age(self, pet_service):
        with pytest.raises(InvalidPayload, match="Age must be a non-negative integer"):
            pet_service.add_pet(_payload(age=-1))

    @pytest.mark.parametrize("field", ["owner_id", "name", "species", "breed", "age"])
    def test_missing_field(self, pet_service, field):
        with pytest.raises(InvalidPayload, match="All fields are required"):
            pet_service.add_pet(_payload(**{field: None}))
        assert pet_service.repositories.pets.count() == 0

    @pytest.mark.parametrize("age", [True, "3", 3.0])
    def test_age_is_not_coerced(self, age):
        with pytest.raises(ValidationError):
            _payload(age=age)

    def test_owner_is_not_checked(self, pet_service):
        pet = pet_service.add_pet(_payload(owner_id="unregistered"))
        assert pet.owner_id == "unregistered"


class TestPetQueries:
    def test_list_pets_empty(self, pet_service):
        with pytest.raises(NotFound, match="No pets found"):
            pet_service.list_pets()

    def test_list_pets_is_stable_between_writes(self, pet_service, pet):
        assert pet_service.list_pets() == pet_service.list_pets() == [pet]

    def test_get_unknown_pet(self, pet_service):
        with pytest.raises(NotFound, match="Pet with id p9 not found"):
            pet_service.get_pet("p9")

    def test_list_user_pets_filters_by_owner(self, pet_service, owner, vet):
        first = pet_service.add_pet(_payload(owner_id=owner.id, name="Rex"))
        pet_service.add_pet(_payload(owner_id=vet.id, name="Tom"))
        second = pet_service.add_pet(_payload(owner_id=owner.id, name="Fido"))
        assert pet_service.list_user_pets(owner.id) == [first, second]

    def test_list_user_pets_none_owned(self, pet_service, pet, vet):
        with pytest.raises(NotFound, match="No pets found for user"):
            pet_service.list_user_pets(vet.id)

    def test_list_user_pets_none_owned_allowed(self, make_service, pet, vet):
        service = make_service(PetService, empty_result_is_error=False)
        assert service.list_user_pets(vet.id) == []
