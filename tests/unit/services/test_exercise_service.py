"""Tests for the exercise catalog."""

import pytest

from gymapi.core.exceptions import ConflictError, NotFoundError, ValidationError
from gymapi.db.repositories.exercise import ExerciseRepository
from gymapi.schemas.exercise import ExerciseCreate
from gymapi.services.exercise_service import ExerciseService, entry_order


@pytest.fixture
def service(db):
    return ExerciseService(db)


class TestCatalog:
    def test_create_and_get(self, service):
        created = service.create(ExerciseCreate(name="Pull Up", description="Bodyweight"))
        fetched = service.get(created.id)
        assert fetched.name == "Pull Up"
        assert fetched.description == "Bodyweight"

    def test_name_conflict_ignores_case(self, service):
        service.create(ExerciseCreate(name="Pull Up"))
        with pytest.raises(ConflictError):
            service.create(ExerciseCreate(name="pull up"))

    def test_concurrent_create_conflicts(self, service, monkeypatch):
        service.create(ExerciseCreate(name="Pull Up"))
        monkeypatch.setattr(ExerciseRepository, "get_by_name", lambda self, name: None)
        with pytest.raises(ConflictError):
            service.create(ExerciseCreate(name="Pull Up"))
        assert [e.name for e in service.list_exercises()] == ["Pull Up"]

    def test_get_missing(self, service):
        with pytest.raises(NotFoundError):
            service.get(12345)

    def test_list_is_sorted_by_name(self, service, exercises):
        assert [e.name for e in service.list_exercises()] == ["Bench Press", "Deadlift", "Squat"]

    def test_search_and_paging(self, service, exercises):
        assert [e.name for e in service.list_exercises(search="sQu")] == ["Squat"]
        assert [e.name for e in service.list_exercises(skip=1, limit=1)] == ["Deadlift"]


class TestExistenceGate:
    def test_all_present(self, service, exercises):
        service.ensure_exist(e.id for e in exercises)

    def test_missing_ids_are_reported(self, service, exercises):
        with pytest.raises(ValidationError) as exc_info:
            service.ensure_exist([exercises[0].id, 999999, 888888])
        assert [d["value"] for d in exc_info.value.details] == [888888, 999999]

    def test_empty_is_fine(self, service):
        service.ensure_exist([])


class TestEntryOrder:
    def test_explicit_order_wins(self):
        assert entry_order(0, 7) == 7

    def test_defaults_to_one_based_position(self):
        assert entry_order(0, None) == 1
        assert entry_order(4, None) == 5
