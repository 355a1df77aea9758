"""
User database model.

Defines the User table for authentication and role assignment.
"""

import enum
from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Role(str, enum.Enum):
    """Closed set of user roles. Fixed at registration."""

    ATHLETE = "ATHLETE"
    TRAINER = "TRAINER"


class User(SQLModel, table=True):
    """
    User model for authentication.

    Stores credentials, display name and role.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)

    # Profile
    name: Optional[str] = Field(default=None, max_length=100)
    role: Role = Field(default=Role.ATHLETE, nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
