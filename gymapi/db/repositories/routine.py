"""
Routine repository.

Handles database operations for :class:`Routine` and its
:class:`RoutineExercise` rows. A routine and its exercises are one
aggregate: every write touching both runs in a single transaction.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from gymapi.db.session import atomic
from gymapi.models.routine import Routine, RoutineExercise
from gymapi.models.workout_session import WorkoutSession


class RoutineRepository:
    """Repository for Routine database operations."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_by_id(self, routine_id: int) -> Optional[Routine]:
        return self.session.get(Routine, routine_id)

    def get_for_subject(self, routine_id: int, user_id: int) -> Optional[Routine]:
        """Routine ``routine_id`` if ``user_id`` is the user it belongs to."""
        statement = select(Routine).where(Routine.id == routine_id, Routine.user_id == user_id)
        return self.session.exec(statement).first()

    def get_for_author(self, routine_id: int, user_id: int) -> Optional[Routine]:
        """Routine ``routine_id`` if ``user_id`` is the user who created it."""
        statement = select(Routine).where(Routine.id == routine_id, Routine.created_by == user_id)
        return self.session.exec(statement).first()

    def list_by_user(self, user_id: int) -> list[Routine]:
        statement = (select(Routine).where(Routine.user_id == user_id)
                     .order_by(Routine.updated_at.desc(), Routine.id.desc()))
        return list(self.session.exec(statement).all())

    def get_exercises(self, routine_id: int) -> list[RoutineExercise]:
        statement = (select(RoutineExercise).where(RoutineExercise.routine_id == routine_id)
                     .order_by(RoutineExercise.order, RoutineExercise.id))
        return list(self.session.exec(statement).all())

    def get_exercises_for_routines(self, routine_ids: list[int]) -> dict[int, list[RoutineExercise]]:
        """Ordered exercises of several routines, keyed by routine id."""
        grouped: dict[int, list[RoutineExercise]] = {routine_id: [] for routine_id in routine_ids}
        if not routine_ids:
            return grouped
        statement = (select(RoutineExercise).where(RoutineExercise.routine_id.in_(set(routine_ids)))
                     .order_by(RoutineExercise.routine_id, RoutineExercise.order, RoutineExercise.id))
        for row in self.session.exec(statement).all():
            grouped[row.routine_id].append(row)
        return grouped

    def exercise_counts_by_user(self, user_id: int) -> list[tuple[datetime.datetime, int]]:
        """``(created_at, exercise_count)`` for every routine of a user."""
        statement = (select(Routine.created_at, func.count(RoutineExercise.id))
                     .join(RoutineExercise, RoutineExercise.routine_id == Routine.id, isouter=True)
                     .where(Routine.user_id == user_id)
                     .group_by(Routine.id, Routine.created_at))
        return [(created_at, count) for created_at, count in self.session.exec(statement).all()]

    # ------------------------------------------------------------------
    # Transactional writes
    # ------------------------------------------------------------------

    def create_with_exercises(self, routine: Routine, exercises: list[RoutineExercise]) -> Routine:
        """Insert a routine and its exercises atomically."""
        with atomic(self.session):
            self.session.add(routine)
            self.session.flush()
            for exercise in exercises:
                exercise.routine_id = routine.id
                self.session.add(exercise)
        self.session.refresh(routine)
        return routine

    def update_with_exercises(self, routine: Routine,
                              exercises: Optional[list[RoutineExercise]] = None) -> Routine:
        """
        Persist field changes on ``routine``, optionally replacing its exercises.

        With ``exercises`` given (even empty) every existing row is deleted and
        the new set inserted in the same transaction. ``None`` leaves the
        current exercises untouched. The caller must already have checked that
        it may write to ``routine``.
        """
        with atomic(self.session):
            self.session.add(routine)
            if exercises is not None:
                self._replace_exercises(routine.id, exercises)
        self.session.refresh(routine)
        return routine

    def delete(self, routine: Routine) -> None:
        """Delete a routine with its exercises and detach sessions logged from it."""
        with atomic(self.session):
            for row in self.get_exercises(routine.id):
                self.session.delete(row)
            linked = self.session.exec(select(WorkoutSession).where(WorkoutSession.routine_id == routine.id)).all()
            for workout in linked:
                workout.routine_id = None
                self.session.add(workout)
            self.session.delete(routine)

    def _replace_exercises(self, routine_id: int, exercises: list[RoutineExercise]) -> None:
        for row in self.get_exercises(routine_id):
            self.session.delete(row)
        self.session.flush()
        for exercise in exercises:
            exercise.routine_id = routine_id
            self.session.add(exercise)
