"""
Body metrics database model.

One row per user, every measurement optional.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class UserMetrics(SQLModel, table=True):
    """Latest body measurements of a user (upserted, not versioned)."""

    __tablename__ = "user_metrics"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", unique=True, nullable=False, index=True, ondelete="CASCADE")

    height: Optional[float] = Field(default=None)  # cm
    weight: Optional[float] = Field(default=None)  # kg
    age: Optional[int] = Field(default=None)
    gender: Optional[str] = Field(default=None, max_length=32)
    body_fat: Optional[float] = Field(default=None)  # %
    muscle_mass: Optional[float] = Field(default=None)  # kg

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
