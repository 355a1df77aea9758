"""
Workout session service.

Sessions belong to whoever performed them: every operation is scoped to
``user_id``. A session may be linked to a routine the same user is the
subject of (assigned routines included, since the athlete performs them).
Session and exercises are written in one transaction.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from gymapi.core.exceptions import NotFoundError
from gymapi.db.repositories.routine import RoutineRepository
from gymapi.db.repositories.workout_session import WorkoutSessionRepository
from gymapi.models.workout_session import SessionExercise, WorkoutSession
from gymapi.schemas.workout_session import (RoutineSummary, SessionExerciseIn, SessionExerciseResponse,
                                            WorkoutSessionCreate, WorkoutSessionResponse, WorkoutSessionUpdate, )
from gymapi.services.exercise_service import ExerciseService, entry_order

logger = logging.getLogger(__name__)

_PATCHABLE_FIELDS = ("title", "notes", "completed_at", "duration")


class WorkoutSessionService:
    """Service for workout session business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutSessionRepository(session)
        self.routines = RoutineRepository(session)
        self.exercises = ExerciseService(session)

    def create(self, user_id: int, data: WorkoutSessionCreate) -> WorkoutSessionResponse:
        """
        Log a session.

        Raises:
            NotFoundError: ``routine_id`` given but not a routine of ``user_id``
            ValidationError: An exercise id is not in the catalog
        """
        if data.routine_id is not None and not self.routines.get_for_subject(data.routine_id, user_id):
            raise NotFoundError("Routine")

        exercises = self._build_exercises(data.exercises or [])
        entry = WorkoutSession(user_id=user_id, routine_id=data.routine_id, title=data.title, notes=data.notes,
                               started_at=data.started_at or datetime.datetime.utcnow(),
                               completed_at=data.completed_at, duration=data.duration, )
        entry = self.repository.create_with_exercises(entry, exercises)
        logger.info("User %s logged session %s", user_id, entry.id)
        return self._to_responses([entry])[0]

    def get(self, user_id: int, entry_id: int) -> WorkoutSessionResponse:
        return self._to_responses([self._get_owned_entry(user_id, entry_id)])[0]

    def list_sessions(self, user_id: int, routine_id: Optional[int] = None, start: Optional[datetime.datetime] = None,
                      end: Optional[datetime.datetime] = None, completed: Optional[bool] = None,
                      limit: Optional[int] = None, offset: Optional[int] = None, ) -> list[WorkoutSessionResponse]:
        """Sessions of the user, newest first. ``completed`` maps to ``completed_at`` set / unset."""
        entries = self.repository.list_by_user(user_id, routine_id=routine_id, start=start, end=end,
                                               completed=completed, limit=limit, offset=offset, )
        return self._to_responses(entries)

    def update(self, user_id: int, entry_id: int, data: WorkoutSessionUpdate) -> WorkoutSessionResponse:
        """
        Partially update a session.

        Fields change only when present in the request; ``completed_at: null``
        is accepted and re-opens the session. A present ``exercises`` key
        replaces the whole list.

        Raises:
            NotFoundError: Session absent or not owned by ``user_id``
            ValidationError: An exercise id is not in the catalog
        """
        entry = self._get_owned_entry(user_id, entry_id)
        fields = data.model_fields_set

        new_exercises: Optional[list[SessionExercise]] = None
        if "exercises" in fields:
            new_exercises = self._build_exercises(data.exercises or [])

        for key in _PATCHABLE_FIELDS:
            if key in fields:
                setattr(entry, key, getattr(data, key))
        entry.updated_at = datetime.datetime.utcnow()

        entry = self.repository.update_with_exercises(entry, new_exercises)
        return self._to_responses([entry])[0]

    def delete(self, user_id: int, entry_id: int) -> None:
        entry = self._get_owned_entry(user_id, entry_id)
        self.repository.delete(entry)
        logger.info("User %s deleted session %s", user_id, entry_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_entry(self, user_id: int, entry_id: int) -> WorkoutSession:
        entry = self.repository.get_for_user(entry_id, user_id)
        if not entry:
            raise NotFoundError("Session")
        return entry

    def _build_exercises(self, items: list[SessionExerciseIn]) -> list[SessionExercise]:
        self.exercises.ensure_exist(item.exercise_id for item in items)
        return [SessionExercise(exercise_id=item.exercise_id, sets=item.sets, reps=item.reps, weight=item.weight,
                                rest=item.rest, order=entry_order(position, item.order), notes=item.notes, )
                for position, item in enumerate(items)]

    def _to_responses(self, entries: list[WorkoutSession]) -> list[WorkoutSessionResponse]:
        grouped = self.repository.get_exercises_for_sessions([e.id for e in entries])
        catalog = self.exercises.summaries(row.exercise_id for rows in grouped.values() for row in rows)

        routine_titles: dict[int, RoutineSummary] = {}
        for entry in entries:
            if entry.routine_id is not None and entry.routine_id not in routine_titles:
                routine = self.routines.get_by_id(entry.routine_id)
                if routine:
                    routine_titles[routine.id] = RoutineSummary.model_validate(routine)

        return [WorkoutSessionResponse(
            id=entry.id, user_id=entry.user_id, routine_id=entry.routine_id,
            routine=routine_titles.get(entry.routine_id) if entry.routine_id is not None else None,
            title=entry.title, notes=entry.notes, started_at=entry.started_at, completed_at=entry.completed_at,
            duration=entry.duration,
            exercises=[SessionExerciseResponse(id=row.id, session_id=row.session_id, exercise_id=row.exercise_id,
                                               exercise=catalog.get(row.exercise_id), sets=row.sets, reps=row.reps,
                                               weight=row.weight, rest=row.rest, order=row.order, notes=row.notes, )
                       for row in grouped.get(entry.id, [])],
            created_at=entry.created_at, updated_at=entry.updated_at, ) for entry in entries]
