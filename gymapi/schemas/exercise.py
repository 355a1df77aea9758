"""
Exercise catalog API schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ExerciseCreate(BaseModel):
    """Schema for adding an exercise to the catalog."""

    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)

    class Config:
        str_strip_whitespace = True


class ExerciseSummary(BaseModel):
    """Catalog entry embedded in routine and session exercises."""

    id: int
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class ExerciseResponse(ExerciseSummary):
    """Schema for exercise in API responses."""

    created_at: datetime
    updated_at: datetime
