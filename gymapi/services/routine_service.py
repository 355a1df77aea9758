"""
Routine service.

Ownership model
---------------

Every routine has two owners with different rights:

- the **subject** (``user_id``), the athlete the routine is for, may read it;
- the **author** (``created_by``), the user who wrote it, may update or delete it.

They are the same user for self-made routines. For a routine assigned by a
trainer the athlete can read but not edit it, and the trainer can edit but
not read it through the subject-scoped endpoints. Whenever the caller lacks
the required scope the routine is reported as not found, so its existence
does not leak.

A routine and its exercises are written together in one transaction.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from gymapi.core.exceptions import ForbiddenError, NotFoundError
from gymapi.db.repositories.routine import RoutineRepository
from gymapi.db.repositories.user import UserRepository
from gymapi.models.routine import Routine, RoutineExercise
from gymapi.models.user import Role, User
from gymapi.schemas.routine import (RoutineAssign, RoutineCreate, RoutineExerciseIn, RoutineExerciseResponse,
                                    RoutineResponse, RoutineUpdate, )
from gymapi.schemas.user import UserSummary
from gymapi.services.exercise_service import ExerciseService, entry_order
from gymapi.services.trainer_service import TrainerService, ensure_role

logger = logging.getLogger(__name__)


class RoutineService:
    """Service for routine business logic."""

    def __init__(self, session: Session):
        self.repository = RoutineRepository(session)
        self.users = UserRepository(session)
        self.exercises = ExerciseService(session)
        self.trainers = TrainerService(session)

    # ------------------------------------------------------------------
    # Subject-scoped reads
    # ------------------------------------------------------------------

    def list_for_user(self, user_id: int) -> list[RoutineResponse]:
        """All routines the user is the subject of, most recently updated first."""
        return self._to_responses(self.repository.list_by_user(user_id))

    def get(self, user_id: int, routine_id: int) -> RoutineResponse:
        """
        Raises:
            NotFoundError: Routine absent or not owned (as subject) by ``user_id``
        """
        routine = self.repository.get_for_subject(routine_id, user_id)
        if not routine:
            raise NotFoundError("Routine")
        return self._to_responses([routine])[0]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, user_id: int, data: RoutineCreate) -> RoutineResponse:
        """Create a routine for yourself (subject and author are the caller)."""
        routine = self._create(subject_id=user_id, author_id=user_id, data=data)
        logger.info("User %s created routine %s", user_id, routine.id)
        return self._to_responses([routine])[0]

    def assign(self, trainer: User, data: RoutineAssign) -> RoutineResponse:
        """
        Create a routine authored by ``trainer`` for one of their athletes.

        Raises:
            ForbiddenError: Caller is not a trainer, or has no link to the athlete
        """
        ensure_role(trainer, Role.TRAINER)
        if not self.trainers.is_linked(trainer.id, data.athlete_id):
            raise ForbiddenError("You can only assign routines to your athletes")

        routine = self._create(subject_id=data.athlete_id, author_id=trainer.id, data=data)
        logger.info("Trainer %s assigned routine %s to athlete %s", trainer.id, routine.id, data.athlete_id)
        return self._to_responses([routine])[0]

    def update(self, user_id: int, routine_id: int, data: RoutineUpdate) -> RoutineResponse:
        """
        Partially update a routine. Author only.

        ``title`` and ``description`` change only when present in the request.
        A present ``exercises`` key replaces the whole list (delete then insert).

        Raises:
            NotFoundError: Routine absent or not authored by ``user_id``
            ValidationError: An exercise id is not in the catalog
        """
        routine = self._get_authored(user_id, routine_id)
        fields = data.model_fields_set

        new_exercises: Optional[list[RoutineExercise]] = None
        if "exercises" in fields:
            new_exercises = self._build_exercises(data.exercises or [])

        if "title" in fields:
            routine.title = data.title
        if "description" in fields:
            routine.description = data.description
        routine.updated_at = datetime.datetime.utcnow()

        routine = self.repository.update_with_exercises(routine, new_exercises)
        return self._to_responses([routine])[0]

    def delete(self, user_id: int, routine_id: int) -> None:
        """
        Delete a routine with its exercises. Author only.

        Raises:
            NotFoundError: Routine absent or not authored by ``user_id``
        """
        routine = self._get_authored(user_id, routine_id)
        self.repository.delete(routine)
        logger.info("User %s deleted routine %s", user_id, routine_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_authored(self, user_id: int, routine_id: int) -> Routine:
        routine = self.repository.get_for_author(routine_id, user_id)
        if not routine:
            raise NotFoundError("Routine")
        return routine

    def _create(self, subject_id: int, author_id: int, data: RoutineCreate) -> Routine:
        exercises = self._build_exercises(data.exercises)
        routine = Routine(title=data.title, description=data.description, user_id=subject_id,
                          created_by=author_id, )
        return self.repository.create_with_exercises(routine, exercises)

    def _build_exercises(self, items: list[RoutineExerciseIn]) -> list[RoutineExercise]:
        """Validate catalog references and apply default ordering."""
        self.exercises.ensure_exist(item.exercise_id for item in items)
        return [RoutineExercise(exercise_id=item.exercise_id, sets=item.sets, reps=item.reps, weight=item.weight,
                                rest=item.rest, order=entry_order(position, item.order), )
                for position, item in enumerate(items)]

    def _to_responses(self, routines: list[Routine]) -> list[RoutineResponse]:
        grouped = self.repository.get_exercises_for_routines([r.id for r in routines])
        catalog = self.exercises.summaries(row.exercise_id for rows in grouped.values() for row in rows)
        creators = self.users.get_many([r.created_by for r in routines])

        responses = []
        for routine in routines:
            rows = grouped.get(routine.id, [])
            creator = creators.get(routine.created_by)
            responses.append(RoutineResponse(
                id=routine.id, title=routine.title, description=routine.description, user_id=routine.user_id,
                created_by=routine.created_by,
                creator=UserSummary.model_validate(creator) if creator else None,
                exercise_count=len(rows),
                exercises=[RoutineExerciseResponse(id=row.id, routine_id=row.routine_id, exercise_id=row.exercise_id,
                                                   exercise=catalog.get(row.exercise_id), sets=row.sets,
                                                   reps=row.reps, weight=row.weight, rest=row.rest,
                                                   order=row.order, ) for row in rows],
                created_at=routine.created_at, updated_at=routine.updated_at, ))
        return responses
