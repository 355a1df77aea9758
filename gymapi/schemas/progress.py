"""
Progress and statistics API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from gymapi.schemas.exercise import ExerciseResponse


class SessionRef(BaseModel):
    """The session a history entry was logged in."""

    id: int
    title: str
    started_at: datetime.datetime
    completed_at: Optional[datetime.datetime]


class ExerciseHistoryEntry(BaseModel):
    id: int
    session_id: int
    exercise_id: int
    sets: int
    reps: int
    weight: Optional[float] = None
    rest: Optional[int] = None
    order: int
    notes: Optional[str] = None
    session: SessionRef


class ExerciseProgressStats(BaseModel):
    """Aggregates over the returned history. Missing weights count as 0."""

    total_sessions: int
    max_weight: float
    max_reps: int
    avg_weight: float
    avg_reps: float


class ExerciseProgressResponse(BaseModel):
    exercise: ExerciseResponse
    history: list[ExerciseHistoryEntry]
    stats: ExerciseProgressStats


class MostUsedExercise(BaseModel):
    id: int
    name: str
    count: int = Field(..., description="Number of session entries logging this exercise")


class WorkoutStats(BaseModel):
    total_sessions: int
    completed_sessions: int
    in_progress_sessions: int
    total_duration: int = Field(..., description="Sum of completed sessions duration (seconds)")
    avg_duration: float = Field(..., description="total_duration / completed_sessions")
    most_used_exercises: list[MostUsedExercise]
