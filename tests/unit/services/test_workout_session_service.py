"""Tests for workout session logging."""

import datetime

import pytest

from gymapi.core.exceptions import NotFoundError, ValidationError
from gymapi.schemas.routine import RoutineCreate
from gymapi.schemas.workout_session import SessionExerciseIn, WorkoutSessionCreate, WorkoutSessionUpdate
from gymapi.services.routine_service import RoutineService
from gymapi.services.workout_session_service import WorkoutSessionService


@pytest.fixture
def service(db):
    return WorkoutSessionService(db)


class TestCreate:
    def test_exercise_gate_rejects_unknown_id(self, service, athlete):
        with pytest.raises(ValidationError):
            service.create(athlete.id, WorkoutSessionCreate(title="Monday", exercises=[
                SessionExerciseIn(exercise_id=999999, sets=3, reps=10)]))
        assert service.list_sessions(athlete.id) == []

    def test_exercise_gate_accepts_known_id(self, service, athlete, exercises):
        entry = service.create(athlete.id, WorkoutSessionCreate(title="Monday", exercises=[
            SessionExerciseIn(exercise_id=exercises[0].id, sets=3, reps=10, notes="easy")]))
        assert entry.exercises[0].exercise.name == "Bench Press"
        assert entry.exercises[0].notes == "easy"
        assert entry.exercises[0].order == 1

    def test_started_at_defaults_to_now(self, service, athlete):
        before = datetime.datetime.utcnow()
        entry = service.create(athlete.id, WorkoutSessionCreate(title="Monday"))
        assert entry.started_at >= before
        assert entry.completed_at is None

    def test_timezone_aware_input_is_stored_as_utc(self, service, athlete):
        started = datetime.datetime(2026, 3, 1, 10, 0, tzinfo=datetime.timezone(datetime.timedelta(hours=2)))
        entry = service.create(athlete.id, WorkoutSessionCreate(title="Monday", started_at=started))
        assert entry.started_at == datetime.datetime(2026, 3, 1, 8, 0)

    def test_routine_must_belong_to_user(self, service, athlete, make_user, db):
        other, _ = make_user("other@gym.com")
        foreign = RoutineService(db).create(other.id, RoutineCreate(title="Theirs"))
        with pytest.raises(NotFoundError):
            service.create(athlete.id, WorkoutSessionCreate(title="Monday", routine_id=foreign.id))

    def test_linked_routine_is_embedded(self, service, athlete, db):
        routine = RoutineService(db).create(athlete.id, RoutineCreate(title="Push"))
        entry = service.create(athlete.id, WorkoutSessionCreate(title="Monday", routine_id=routine.id))
        assert entry.routine.title == "Push"


class TestReadAndList:
    def test_other_users_session_is_not_found(self, service, athlete, make_user):
        other, _ = make_user("other@gym.com")
        entry = service.create(other.id, WorkoutSessionCreate(title="Theirs"))
        with pytest.raises(NotFoundError):
            service.get(athlete.id, entry.id)

    def test_filters_and_ordering(self, service, athlete):
        day = datetime.datetime(2026, 3, 1, 9, 0)
        service.create(athlete.id, WorkoutSessionCreate(title="old", started_at=day,
                                                        completed_at=day + datetime.timedelta(hours=1)))
        service.create(athlete.id, WorkoutSessionCreate(title="new", started_at=day + datetime.timedelta(days=2)))

        assert [e.title for e in service.list_sessions(athlete.id)] == ["new", "old"]
        assert [e.title for e in service.list_sessions(athlete.id, completed=True)] == ["old"]
        assert [e.title for e in service.list_sessions(athlete.id, completed=False)] == ["new"]
        assert [e.title for e in service.list_sessions(athlete.id, start=day + datetime.timedelta(days=1))] == ["new"]
        assert [e.title for e in service.list_sessions(athlete.id, limit=1, offset=1)] == ["old"]


class TestUpdate:
    def test_complete_a_session(self, service, athlete):
        entry = service.create(athlete.id, WorkoutSessionCreate(title="Monday"))
        done = datetime.datetime(2026, 3, 1, 11, 0)
        updated = service.update(athlete.id, entry.id, WorkoutSessionUpdate(completed_at=done, duration=3600))
        assert updated.completed_at == done
        assert updated.duration == 3600
        assert updated.title == "Monday"

    def test_completed_at_can_be_reset(self, service, athlete):
        done = datetime.datetime(2026, 3, 1, 11, 0)
        entry = service.create(athlete.id, WorkoutSessionCreate(title="Monday", completed_at=done))
        updated = service.update(athlete.id, entry.id, WorkoutSessionUpdate(completed_at=None))
        assert updated.completed_at is None

    def test_exercises_replaced_only_when_present(self, service, athlete, exercises):
        entry = service.create(athlete.id, WorkoutSessionCreate(title="Monday", exercises=[
            SessionExerciseIn(exercise_id=exercises[0].id, sets=3, reps=10)]))

        kept = service.update(athlete.id, entry.id, WorkoutSessionUpdate(notes="felt good"))
        assert [e.exercise_id for e in kept.exercises] == [exercises[0].id]

        replaced = service.update(athlete.id, entry.id, WorkoutSessionUpdate(exercises=[
            SessionExerciseIn(exercise_id=exercises[1].id, sets=5, reps=5)]))
        assert [e.exercise_id for e in replaced.exercises] == [exercises[1].id]

    def test_update_foreign_session(self, service, athlete, make_user):
        other, _ = make_user("other@gym.com")
        entry = service.create(other.id, WorkoutSessionCreate(title="Theirs"))
        with pytest.raises(NotFoundError):
            service.update(athlete.id, entry.id, WorkoutSessionUpdate(title="Mine"))


class TestDelete:
    def test_delete(self, service, athlete, exercises):
        entry = service.create(athlete.id, WorkoutSessionCreate(title="Monday", exercises=[
            SessionExerciseIn(exercise_id=exercises[0].id, sets=3, reps=10)]))
        service.delete(athlete.id, entry.id)
        with pytest.raises(NotFoundError):
            service.get(athlete.id, entry.id)
