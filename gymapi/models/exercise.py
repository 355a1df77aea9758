"""
Exercise catalog model.

Catalog entries are shared by every routine and workout session.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Exercise(SQLModel, table=True):
    """A catalog exercise, referenced by id from routines and sessions."""

    __tablename__ = "exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=100, nullable=False)
    description: Optional[str] = Field(default=None, max_length=500)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
