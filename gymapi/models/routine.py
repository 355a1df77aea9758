"""
Routine database models.

A routine belongs to ``user_id`` (its subject) and was authored by
``created_by``. The two differ only for routines a trainer assigned
to one of their athletes.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Routine(SQLModel, table=True):
    """A workout plan."""

    __tablename__ = "routines"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=100, nullable=False)
    description: Optional[str] = Field(default=None, max_length=500)

    # Subject: read scope
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE")
    # Author: write scope
    created_by: int = Field(foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE")

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class RoutineExercise(SQLModel, table=True):
    """One planned exercise of a routine. Sorted by ``order`` ascending."""

    __tablename__ = "routine_exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    routine_id: int = Field(foreign_key="routines.id", nullable=False, index=True, ondelete="CASCADE")
    exercise_id: int = Field(foreign_key="exercises.id", nullable=False, index=True)

    sets: int = Field(nullable=False)
    reps: int = Field(nullable=False)
    weight: Optional[float] = Field(default=None)  # kg
    rest: Optional[int] = Field(default=None)  # seconds
    # Not unique, not necessarily contiguous
    order: int = Field(default=1, nullable=False)
