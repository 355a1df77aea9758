"""
Trainer-athlete repository.

Handles database operations for :class:`TrainerAthlete` links.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from gymapi.models.routine import Routine
from gymapi.models.trainer_athlete import TrainerAthlete
from gymapi.models.user import User


class TrainerAthleteRepository:
    """Repository for TrainerAthlete database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, link: TrainerAthlete) -> TrainerAthlete:
        self.session.add(link)
        self.session.commit()
        self.session.refresh(link)
        return link

    def get(self, trainer_id: int, athlete_id: int) -> Optional[TrainerAthlete]:
        statement = select(TrainerAthlete).where(TrainerAthlete.trainer_id == trainer_id,
                                                 TrainerAthlete.athlete_id == athlete_id, )
        return self.session.exec(statement).first()

    def exists(self, trainer_id: int, athlete_id: int) -> bool:
        return self.get(trainer_id, athlete_id) is not None

    def list_athletes(self, trainer_id: int) -> list[tuple[TrainerAthlete, User]]:
        """Athletes linked to a trainer, newest link first."""
        statement = (select(TrainerAthlete, User).join(User, User.id == TrainerAthlete.athlete_id)
                     .where(TrainerAthlete.trainer_id == trainer_id)
                     .order_by(TrainerAthlete.created_at.desc(), TrainerAthlete.id.desc()))
        return list(self.session.exec(statement).all())

    def list_trainers(self, athlete_id: int) -> list[tuple[TrainerAthlete, User]]:
        """Trainers linked to an athlete, newest link first."""
        statement = (select(TrainerAthlete, User).join(User, User.id == TrainerAthlete.trainer_id)
                     .where(TrainerAthlete.athlete_id == athlete_id)
                     .order_by(TrainerAthlete.created_at.desc(), TrainerAthlete.id.desc()))
        return list(self.session.exec(statement).all())

    def count_routines_by_user(self, user_ids: list[int]) -> dict[int, int]:
        """Number of routines each user is the subject of."""
        if not user_ids:
            return {}
        statement = (select(Routine.user_id, func.count(Routine.id)).where(Routine.user_id.in_(set(user_ids)))
                     .group_by(Routine.user_id))
        return {user_id: count for user_id, count in self.session.exec(statement).all()}

    def delete(self, link: TrainerAthlete) -> None:
        self.session.delete(link)
        self.session.commit()
