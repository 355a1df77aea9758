"""
Body metrics API schemas.

Every field is optional. On the first write absent fields are stored as
null, afterwards only the keys present in the body are changed.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

Gender = Literal["male", "female", "other", "prefer_not_to_say"]


class UserMetricsUpdate(BaseModel):
    """Schema for the metrics upsert."""

    height: Optional[float] = Field(None, ge=50, le=300, description="Height (cm)")
    weight: Optional[float] = Field(None, ge=20, le=500, description="Body weight (kg)")
    age: Optional[int] = Field(None, ge=1, le=150, description="Age (years)")
    gender: Optional[Gender] = None
    body_fat: Optional[float] = Field(None, ge=0, le=100, description="Body fat (%)")
    muscle_mass: Optional[float] = Field(None, ge=0, le=500, description="Muscle mass (kg)")


class UserMetricsResponse(BaseModel):
    """Schema for metrics in API responses."""

    id: int
    user_id: int
    height: Optional[float]
    weight: Optional[float]
    age: Optional[int]
    gender: Optional[str]
    body_fat: Optional[float]
    muscle_mass: Optional[float]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
