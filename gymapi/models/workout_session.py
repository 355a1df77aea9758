"""
Workout session database models.

A session is open while ``completed_at`` is null and completed once it
is set. The performed exercises are stored as ``SessionExercise`` rows.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class WorkoutSession(SQLModel, table=True):
    """A logged workout, optionally performed from one of the user's routines."""

    __tablename__ = "workout_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE")
    routine_id: Optional[int] = Field(default=None, foreign_key="routines.id", index=True, ondelete="SET NULL")

    title: str = Field(max_length=100, nullable=False)
    notes: Optional[str] = Field(default=None, max_length=1000)

    started_at: datetime = Field(default_factory=datetime.utcnow, nullable=False, index=True)
    completed_at: Optional[datetime] = Field(default=None, index=True)
    duration: Optional[int] = Field(default=None)  # seconds

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class SessionExercise(SQLModel, table=True):
    """One performed exercise of a session."""

    __tablename__ = "session_exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: int = Field(foreign_key="workout_sessions.id", nullable=False, index=True, ondelete="CASCADE")
    exercise_id: int = Field(foreign_key="exercises.id", nullable=False, index=True)

    sets: int = Field(nullable=False)
    reps: int = Field(nullable=False)
    weight: Optional[float] = Field(default=None)  # kg
    rest: Optional[int] = Field(default=None)  # seconds
    order: int = Field(default=1, nullable=False)
    notes: Optional[str] = Field(default=None, max_length=500)
