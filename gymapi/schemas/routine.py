"""
Routine API schemas.

Exercise entries carry the catalog ``exercise_id``; their existence is
checked at the service layer. ``order`` defaults to the 1-based position
in the submitted list.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from gymapi.schemas.exercise import ExerciseSummary
from gymapi.schemas.user import UserSummary


class RoutineExerciseIn(BaseModel):
    """One planned exercise in a routine create/update request."""

    exercise_id: int = Field(..., ge=1, description="Catalog exercise id")
    sets: int = Field(..., ge=1, le=50)
    reps: int = Field(..., ge=1, le=500)
    weight: Optional[float] = Field(None, ge=0, le=1000, description="Load in kg")
    rest: Optional[int] = Field(None, ge=0, le=3600, description="Rest between sets (seconds)")
    order: Optional[int] = Field(None, ge=1, description="Position, defaults to list index + 1")


class RoutineCreate(BaseModel):
    """Schema for creating a routine for yourself."""

    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    exercises: list[RoutineExerciseIn] = Field(default_factory=list)

    class Config:
        str_strip_whitespace = True


class RoutineAssign(RoutineCreate):
    """Schema for a trainer assigning a new routine to one of their athletes."""

    athlete_id: int = Field(..., ge=1)


class RoutineUpdate(BaseModel):
    """
    Schema for updating a routine.

    Only keys present in the body are applied. A present ``exercises`` key
    (even ``[]``) replaces the whole exercise list.
    """

    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    exercises: Optional[list[RoutineExerciseIn]] = None

    class Config:
        str_strip_whitespace = True

    @field_validator("title", "exercises")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class RoutineExerciseResponse(BaseModel):
    id: int
    routine_id: int
    exercise_id: int
    exercise: Optional[ExerciseSummary] = None
    sets: int
    reps: int
    weight: Optional[float] = None
    rest: Optional[int] = None
    order: int

    class Config:
        from_attributes = True


class RoutineResponse(BaseModel):
    """Schema for routine in API responses."""

    id: int
    title: str
    description: Optional[str]
    user_id: int
    created_by: int
    creator: Optional[UserSummary] = None
    exercise_count: int
    exercises: list[RoutineExerciseResponse]
    created_at: datetime.datetime
    updated_at: datetime.datetime


class RoutineStats(BaseModel):
    total_routines: int
    total_exercises: int
    recent_routines: int = Field(..., description="Routines created in the last 30 days")
    average_exercises_per_routine: float
