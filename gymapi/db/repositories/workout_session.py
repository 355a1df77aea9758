"""
Workout session repository.

Handles database operations for :class:`WorkoutSession` and its
:class:`SessionExercise` rows, plus the aggregation queries behind
progress and workout statistics.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from gymapi.db.session import atomic
from gymapi.models.exercise import Exercise
from gymapi.models.workout_session import SessionExercise, WorkoutSession


class WorkoutSessionRepository:
    """Repository for WorkoutSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_for_user(self, entry_id: int, user_id: int) -> Optional[WorkoutSession]:
        statement = select(WorkoutSession).where(WorkoutSession.id == entry_id, WorkoutSession.user_id == user_id)
        return self.session.exec(statement).first()

    def list_by_user(self, user_id: int, routine_id: Optional[int] = None,
                     start: Optional[datetime.datetime] = None, end: Optional[datetime.datetime] = None,
                     completed: Optional[bool] = None, limit: Optional[int] = None,
                     offset: Optional[int] = None, ) -> list[WorkoutSession]:
        statement = select(WorkoutSession).where(*self._user_filters(user_id, start, end))
        if routine_id is not None:
            statement = statement.where(WorkoutSession.routine_id == routine_id)
        if completed is True:
            statement = statement.where(WorkoutSession.completed_at.is_not(None))
        elif completed is False:
            statement = statement.where(WorkoutSession.completed_at.is_(None))
        statement = statement.order_by(WorkoutSession.started_at.desc(), WorkoutSession.id.desc())
        if offset:
            statement = statement.offset(offset)
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    def get_exercises(self, entry_id: int) -> list[SessionExercise]:
        statement = (select(SessionExercise).where(SessionExercise.session_id == entry_id)
                     .order_by(SessionExercise.order, SessionExercise.id))
        return list(self.session.exec(statement).all())

    def get_exercises_for_sessions(self, entry_ids: list[int]) -> dict[int, list[SessionExercise]]:
        grouped: dict[int, list[SessionExercise]] = {entry_id: [] for entry_id in entry_ids}
        if not entry_ids:
            return grouped
        statement = (select(SessionExercise).where(SessionExercise.session_id.in_(set(entry_ids)))
                     .order_by(SessionExercise.session_id, SessionExercise.order, SessionExercise.id))
        for row in self.session.exec(statement).all():
            grouped[row.session_id].append(row)
        return grouped

    # ------------------------------------------------------------------
    # Aggregation queries for progress and stats
    # ------------------------------------------------------------------

    def exercise_history(self, user_id: int, exercise_id: int, start: Optional[datetime.datetime] = None,
                         end: Optional[datetime.datetime] = None,
                         limit: Optional[int] = None, ) -> list[tuple[SessionExercise, WorkoutSession]]:
        """Entries of one exercise across the user's completed sessions, newest session first."""
        statement = (select(SessionExercise, WorkoutSession)
                     .join(WorkoutSession, WorkoutSession.id == SessionExercise.session_id)
                     .where(SessionExercise.exercise_id == exercise_id,
                            WorkoutSession.completed_at.is_not(None),
                            *self._user_filters(user_id, start, end))
                     .order_by(WorkoutSession.started_at.desc(), SessionExercise.order, SessionExercise.id))
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    def count_sessions(self, user_id: int, start: Optional[datetime.datetime] = None,
                       end: Optional[datetime.datetime] = None, completed_only: bool = False, ) -> int:
        statement = select(func.count()).select_from(WorkoutSession).where(*self._user_filters(user_id, start, end))
        if completed_only:
            statement = statement.where(WorkoutSession.completed_at.is_not(None))
        return self.session.exec(statement).first() or 0

    def sum_completed_duration(self, user_id: int, start: Optional[datetime.datetime] = None,
                               end: Optional[datetime.datetime] = None, ) -> int:
        statement = (select(func.coalesce(func.sum(WorkoutSession.duration), 0))
                     .where(WorkoutSession.completed_at.is_not(None), *self._user_filters(user_id, start, end)))
        return int(self.session.exec(statement).first() or 0)

    def most_used_exercises(self, user_id: int, start: Optional[datetime.datetime] = None,
                            end: Optional[datetime.datetime] = None,
                            limit: int = 5, ) -> list[tuple[int, str, int]]:
        """``(exercise_id, name, count)`` of the most frequently logged exercises."""
        usage = func.count(SessionExercise.id).label("usage")
        statement = (select(Exercise.id, Exercise.name, usage)
                     .join(SessionExercise, SessionExercise.exercise_id == Exercise.id)
                     .join(WorkoutSession, WorkoutSession.id == SessionExercise.session_id)
                     .where(*self._user_filters(user_id, start, end))
                     .group_by(Exercise.id, Exercise.name)
                     .order_by(usage.desc(), Exercise.id)
                     .limit(limit))
        return [(exercise_id, name, count) for exercise_id, name, count in self.session.exec(statement).all()]

    # ------------------------------------------------------------------
    # Transactional writes
    # ------------------------------------------------------------------

    def create_with_exercises(self, entry: WorkoutSession, exercises: list[SessionExercise]) -> WorkoutSession:
        """Insert a session and its exercises atomically."""
        with atomic(self.session):
            self.session.add(entry)
            self.session.flush()
            for exercise in exercises:
                exercise.session_id = entry.id
                self.session.add(exercise)
        self.session.refresh(entry)
        return entry

    def update_with_exercises(self, entry: WorkoutSession,
                              exercises: Optional[list[SessionExercise]] = None) -> WorkoutSession:
        """
        Persist field changes on ``entry``, optionally replacing its exercises.

        Same contract as :meth:`RoutineRepository.update_with_exercises`:
        ownership must already be verified by the caller.
        """
        with atomic(self.session):
            self.session.add(entry)
            if exercises is not None:
                for row in self.get_exercises(entry.id):
                    self.session.delete(row)
                self.session.flush()
                for exercise in exercises:
                    exercise.session_id = entry.id
                    self.session.add(exercise)
        self.session.refresh(entry)
        return entry

    def delete(self, entry: WorkoutSession) -> None:
        with atomic(self.session):
            for row in self.get_exercises(entry.id):
                self.session.delete(row)
            self.session.delete(entry)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _user_filters(user_id: int, start: Optional[datetime.datetime],
                      end: Optional[datetime.datetime]) -> list:
        filters = [WorkoutSession.user_id == user_id]
        if start is not None:
            filters.append(WorkoutSession.started_at >= start)
        if end is not None:
            filters.append(WorkoutSession.started_at <= end)
        return filters
