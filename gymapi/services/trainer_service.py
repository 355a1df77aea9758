"""
Trainer service.

Manages trainer-athlete links, the authorization edges that let a
trainer assign routines to an athlete.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from gymapi.core.exceptions import ConflictError, ForbiddenError, InvalidRoleError, NotFoundError
from gymapi.db.repositories.trainer_athlete import TrainerAthleteRepository
from gymapi.db.repositories.user import UserRepository
from gymapi.models.trainer_athlete import TrainerAthlete
from gymapi.models.user import Role, User
from gymapi.schemas.trainer import AthleteLinkResponse, LinkedAthlete, LinkedTrainer
from gymapi.schemas.user import UserSummary

logger = logging.getLogger(__name__)


def ensure_role(user: User, role: Role) -> None:
    """
    Raises:
        ForbiddenError: ``user`` does not have ``role``
    """
    if user.role != role:
        raise ForbiddenError(f"This action requires the {role.value} role")


class TrainerService:
    """Service for trainer/athlete relationship business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = TrainerAthleteRepository(session)
        self.users = UserRepository(session)

    def add_athlete(self, trainer: User, athlete_id: int) -> AthleteLinkResponse:
        """
        Link an athlete to the trainer.

        Raises:
            ForbiddenError: Caller is not a trainer
            NotFoundError: No user with ``athlete_id``
            InvalidRoleError: That user is not an athlete
            ConflictError: The link already exists
        """
        ensure_role(trainer, Role.TRAINER)

        athlete = self.users.get_by_id(athlete_id)
        if not athlete:
            raise NotFoundError("Athlete")
        if athlete.role != Role.ATHLETE:
            raise InvalidRoleError("The specified user is not an athlete")
        if self.repository.exists(trainer.id, athlete_id):
            raise ConflictError("This athlete is already assigned to you")

        try:
            link = self.repository.create(TrainerAthlete(trainer_id=trainer.id, athlete_id=athlete_id))
        except IntegrityError:
            # Lost a race with a concurrent insert of the same pair
            self.session.rollback()
            raise ConflictError("This athlete is already assigned to you")

        logger.info("Trainer %s added athlete %s", trainer.id, athlete_id)
        return AthleteLinkResponse(id=link.id, trainer_id=link.trainer_id, athlete_id=link.athlete_id,
                                   created_at=link.created_at, athlete=UserSummary.model_validate(athlete), )

    def remove_athlete(self, trainer: User, athlete_id: int) -> None:
        """
        Raises:
            NotFoundError: The trainer has no link to ``athlete_id``
        """
        ensure_role(trainer, Role.TRAINER)

        link = self.repository.get(trainer.id, athlete_id)
        if not link:
            raise NotFoundError("Relationship", "This athlete is not assigned to you")
        self.repository.delete(link)
        logger.info("Trainer %s removed athlete %s", trainer.id, athlete_id)

    def list_athletes(self, trainer: User) -> list[LinkedAthlete]:
        ensure_role(trainer, Role.TRAINER)

        rows = self.repository.list_athletes(trainer.id)
        routine_counts = self.repository.count_routines_by_user([athlete.id for _, athlete in rows])
        return [LinkedAthlete(id=athlete.id, name=athlete.name, email=athlete.email, role=athlete.role,
                              created_at=athlete.created_at, relationship_since=link.created_at,
                              routine_count=routine_counts.get(athlete.id, 0), ) for link, athlete in rows]

    def list_trainers(self, athlete: User) -> list[LinkedTrainer]:
        ensure_role(athlete, Role.ATHLETE)

        return [LinkedTrainer(id=trainer.id, name=trainer.name, email=trainer.email, role=trainer.role,
                              created_at=trainer.created_at, relationship_since=link.created_at, )
                for link, trainer in self.repository.list_trainers(athlete.id)]

    def is_linked(self, trainer_id: int, athlete_id: int) -> bool:
        return self.repository.exists(trainer_id, athlete_id)
