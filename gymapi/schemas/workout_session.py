"""
Workout session API schemas.

Timestamps are stored as naive UTC; timezone-aware input is converted.
"""

import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field, field_validator

from gymapi.schemas.exercise import ExerciseSummary


def _to_naive_utc(value: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
    if value is not None and value.tzinfo is not None:
        return value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return value


UtcDateTime = Annotated[datetime.datetime, AfterValidator(_to_naive_utc)]


class SessionExerciseIn(BaseModel):
    """One performed exercise in a session create/update request."""

    exercise_id: int = Field(..., ge=1, description="Catalog exercise id")
    sets: int = Field(..., ge=1, le=50)
    reps: int = Field(..., ge=1, le=500)
    weight: Optional[float] = Field(None, ge=0, le=1000, description="Load in kg")
    rest: Optional[int] = Field(None, ge=0, le=3600, description="Rest between sets (seconds)")
    order: Optional[int] = Field(None, ge=1, description="Position, defaults to list index + 1")
    notes: Optional[str] = Field(None, max_length=500)


class WorkoutSessionCreate(BaseModel):
    """Schema for logging a workout session."""

    routine_id: Optional[int] = Field(None, ge=1, description="Routine this session was performed from")
    title: str = Field(..., min_length=1, max_length=100)
    notes: Optional[str] = Field(None, max_length=1000)
    started_at: Optional[UtcDateTime] = Field(None, description="Defaults to now")
    completed_at: Optional[UtcDateTime] = Field(None, description="Null while in progress")
    duration: Optional[int] = Field(None, ge=0, le=86400, description="Duration (seconds)")
    exercises: Optional[list[SessionExerciseIn]] = None

    class Config:
        str_strip_whitespace = True


class WorkoutSessionUpdate(BaseModel):
    """
    Schema for updating a session.

    Only keys present in the body are applied. ``completed_at: null``
    re-opens a session. A present ``exercises`` key replaces the whole list.
    """

    title: Optional[str] = Field(None, min_length=1, max_length=100)
    notes: Optional[str] = Field(None, max_length=1000)
    completed_at: Optional[UtcDateTime] = None
    duration: Optional[int] = Field(None, ge=0, le=86400)
    exercises: Optional[list[SessionExerciseIn]] = None

    class Config:
        str_strip_whitespace = True

    @field_validator("title", "exercises")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class RoutineSummary(BaseModel):
    id: int
    title: str

    class Config:
        from_attributes = True


class SessionExerciseResponse(BaseModel):
    id: int
    session_id: int
    exercise_id: int
    exercise: Optional[ExerciseSummary] = None
    sets: int
    reps: int
    weight: Optional[float] = None
    rest: Optional[int] = None
    order: int
    notes: Optional[str] = None

    class Config:
        from_attributes = True


class WorkoutSessionResponse(BaseModel):
    """Schema for workout session in API responses."""

    id: int
    user_id: int
    routine_id: Optional[int]
    routine: Optional[RoutineSummary] = None
    title: str
    notes: Optional[str]
    started_at: datetime.datetime
    completed_at: Optional[datetime.datetime]
    duration: Optional[int]
    exercises: list[SessionExerciseResponse]
    created_at: datetime.datetime
    updated_at: datetime.datetime
