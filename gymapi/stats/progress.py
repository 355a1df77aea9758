"""
Exercise progress and workout statistics.

Only **completed** sessions count as progress history. Aggregates follow
a forgiving convention so a sparse log never breaks the numbers:

- a missing weight counts as 0 for both the max and the average,
- averages divide by ``max(count, 1)`` so an empty history yields 0.
"""

from __future__ import annotations

import datetime
from typing import Optional, Sequence

from sqlmodel import Session

from gymapi.db.repositories.workout_session import WorkoutSessionRepository
from gymapi.models.workout_session import SessionExercise
from gymapi.schemas.exercise import ExerciseResponse
from gymapi.schemas.progress import (ExerciseHistoryEntry, ExerciseProgressResponse, ExerciseProgressStats,
                                     MostUsedExercise, SessionRef, WorkoutStats, )
from gymapi.services.exercise_service import ExerciseService

# Number of exercises reported in ``most_used_exercises``
MOST_USED_LIMIT = 5


# ======================================================================
# Pure aggregation
# ======================================================================


def summarize_history(entries: Sequence[SessionExercise]) -> ExerciseProgressStats:
    """Aggregate stats over the history entries of one exercise."""
    weights = [entry.weight or 0.0 for entry in entries]
    reps = [entry.reps or 0 for entry in entries]
    denominator = len(entries) or 1

    return ExerciseProgressStats(total_sessions=len(entries), max_weight=max(weights, default=0.0),
                                 max_reps=max(reps, default=0), avg_weight=sum(weights) / denominator,
                                 avg_reps=sum(reps) / denominator, )


def average_duration(total_duration: int, completed_sessions: int) -> float:
    return total_duration / (completed_sessions or 1)


# ======================================================================
# Queries
# ======================================================================


def compute_exercise_progress(db: Session, user_id: int, exercise_id: int,
                              start: Optional[datetime.datetime] = None, end: Optional[datetime.datetime] = None,
                              limit: Optional[int] = None, ) -> ExerciseProgressResponse:
    """History of one exercise across the user's completed sessions, newest first.

    Raises:
        NotFoundError: The exercise is not in the catalog
    """
    exercise = ExerciseService(db).get_model(exercise_id)
    rows = WorkoutSessionRepository(db).exercise_history(user_id, exercise_id, start, end, limit)

    history = [ExerciseHistoryEntry(id=entry.id, session_id=entry.session_id, exercise_id=entry.exercise_id,
                                    sets=entry.sets, reps=entry.reps, weight=entry.weight, rest=entry.rest,
                                    order=entry.order, notes=entry.notes,
                                    session=SessionRef(id=workout.id, title=workout.title,
                                                       started_at=workout.started_at,
                                                       completed_at=workout.completed_at, ), )
               for entry, workout in rows]

    return ExerciseProgressResponse(exercise=ExerciseResponse.model_validate(exercise), history=history,
                                    stats=summarize_history([entry for entry, _ in rows]), )


def compute_workout_stats(db: Session, user_id: int, start: Optional[datetime.datetime] = None,
                          end: Optional[datetime.datetime] = None, ) -> WorkoutStats:
    """Session counts, completed duration and most logged exercises in a date range."""
    repository = WorkoutSessionRepository(db)

    total = repository.count_sessions(user_id, start, end)
    completed = repository.count_sessions(user_id, start, end, completed_only=True)
    total_duration = repository.sum_completed_duration(user_id, start, end)
    most_used = repository.most_used_exercises(user_id, start, end, limit=MOST_USED_LIMIT)

    return WorkoutStats(total_sessions=total, completed_sessions=completed, in_progress_sessions=total - completed,
                        total_duration=total_duration,
                        avg_duration=average_duration(total_duration, completed),
                        most_used_exercises=[MostUsedExercise(id=eid, name=name, count=count)
                                             for eid, name, count in most_used], )
