"""
Tests for the SQLite-backed collections and the repository registry.
"""

import sqlite3

import pytest
from pydantic import ValidationError

from petcare_api.app.core.db import COLLECTION_TABLES, get_database_path, init_db
from petcare_api.app.repositories import Collection, Repositories
from petcare_api.app.schemas import Pet

from .conftest import FIXED_TIME


def _pet(pet_id, owner_id="u1", name="Rex"):
    return Pet(
        id=pet_id,
        created_at=FIXED_TIME,
        owner_id=owner_id,
        name=name,
        species="dog",
        breed="lab",
        age=3,
    )


class TestCollection:
    def test_get_returns_inserted_record(self, repositories):
        pet = _pet("p1")
        repositories.pets.insert("p1", pet)
        assert repositories.pets.get("p1") == pet

    def test_get_unknown_key_returns_none(self, repositories):
        assert repositories.pets.get("missing") is None

    def test_values_keep_insertion_order(self, repositories):
        for key in ("p3", "p1", "p2"):
            repositories.pets.insert(key, _pet(key))
        assert [pet.id for pet in repositories.pets.values()] == ["p3", "p1", "p2"]

    def test_duplicate_key_is_rejected(self, repositories):
        repositories.pets.insert("p1", _pet("p1"))
        with pytest.raises(sqlite3.IntegrityError):
            repositories.pets.insert("p1", _pet("p1", name="Other"))
        assert repositories.pets.get("p1").name == "Rex"
        assert len(repositories.pets) == 1

    def test_filter_and_count(self, repositories):
        repositories.pets.insert("p1", _pet("p1", owner_id="u1"))
        repositories.pets.insert("p2", _pet("p2", owner_id="u2"))
        repositories.pets.insert("p3", _pet("p3", owner_id="u1"))
        owned = repositories.pets.filter(lambda pet: pet.owner_id == "u1")
        assert [pet.id for pet in owned] == ["p1", "p3"]
        assert repositories.pets.count() == 3

    def test_records_are_stored_as_camel_case_json(self, repositories, db_path):
        repositories.pets.insert("p1", _pet("p1"))
        conn = sqlite3.connect(db_path)
        try:
            data = conn.execute("SELECT data FROM pets WHERE id = 'p1'").fetchone()[0]
        finally:
            conn.close()
        assert '"ownerId":"u1"' in data
        assert '"createdAt"' in data

    def test_unknown_table_is_rejected(self, db_path):
        with pytest.raises(ValueError):
            Collection("pets; DROP TABLE users", Pet, db_path)

    def test_stored_records_are_immutable(self, repositories):
        repositories.pets.insert("p1", _pet("p1"))
        pet = repositories.pets.get("p1")
        with pytest.raises(ValidationError):
            pet.name = "Changed"


class TestRepositories:
    def test_open_creates_every_table(self, repositories):
        assert repositories.counts() == {table: 0 for table in COLLECTION_TABLES}

    def test_records_survive_reopening(self, db_path):
        first = Repositories.open(db_path)
        first.pets.insert("p1", _pet("p1"))
        second = Repositories.open(db_path)
        assert second.pets.get("p1") == _pet("p1")
        assert second.counts()["pets"] == 1

    def test_init_db_is_idempotent(self, db_path):
        init_db(db_path)
        init_db(db_path)
        conn = sqlite3.connect(db_path)
        try:
            versions = conn.execute("SELECT version FROM migrations").fetchall()
        finally:
            conn.close()
        assert versions == [(1,)]

    def test_open_creates_missing_directories(self, tmp_path):
        db_path = str(tmp_path / "nested" / "dir" / "petcare.db")
        repositories = Repositories.open(db_path)
        assert repositories.users.count() == 0


class TestDatabasePath:
    def test_absolute_path_is_kept(self, tmp_path):
        path = str(tmp_path / "data.db")
        assert get_database_path(path) == path

    def test_relative_path_is_resolved(self):
        resolved = get_database_path("data/petcare.db")
        assert resolved.endswith("petcare.db")
        assert resolved != "data/petcare.db"
