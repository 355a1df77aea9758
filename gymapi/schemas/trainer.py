"""
Trainer/athlete relationship API schemas.
"""

import datetime

from pydantic import BaseModel, Field

from gymapi.schemas.user import UserSummary


class AthleteLinkCreate(BaseModel):
    """Schema for a trainer adding an athlete."""

    athlete_id: int = Field(..., ge=1)


class AthleteLinkResponse(BaseModel):
    id: int
    trainer_id: int
    athlete_id: int
    created_at: datetime.datetime
    athlete: UserSummary


class LinkedAthlete(UserSummary):
    """An athlete as seen by one of their trainers."""

    created_at: datetime.datetime
    relationship_since: datetime.datetime
    routine_count: int


class LinkedTrainer(UserSummary):
    """A trainer as seen by one of their athletes."""

    created_at: datetime.datetime
    relationship_since: datetime.datetime
