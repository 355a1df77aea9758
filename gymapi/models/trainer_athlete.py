"""
Trainer-athlete relationship model.

A trainer may manage many athletes and an athlete may have many trainers.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class TrainerAthlete(SQLModel, table=True):
    """Authorization edge letting a trainer assign routines to an athlete."""

    __tablename__ = "trainer_athletes"
    __table_args__ = (
        UniqueConstraint("trainer_id", "athlete_id", name="uq_trainer_athlete"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    trainer_id: int = Field(foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE")
    athlete_id: int = Field(foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE")

    created_at: datetime = Field(default_factory=datetime.utcnow)
