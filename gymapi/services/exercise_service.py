"""
Exercise catalog service.

Catalog browsing and creation, plus the existence gate used by routines
and workout sessions before they reference catalog entries.
"""

import logging
from typing import Iterable, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from gymapi.core.exceptions import ConflictError, NotFoundError, ValidationError
from gymapi.db.repositories.exercise import ExerciseRepository
from gymapi.models.exercise import Exercise
from gymapi.schemas.exercise import ExerciseCreate, ExerciseResponse, ExerciseSummary

logger = logging.getLogger(__name__)


def entry_order(position: int, order: Optional[int]) -> int:
    """Explicit ``order`` if given, else the 1-based position in the submitted list."""
    return order if order is not None else position + 1


class ExerciseService:
    """Service for exercise catalog business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = ExerciseRepository(session)

    def list_exercises(self, search: Optional[str] = None, skip: int = 0, limit: int = 100) -> list[ExerciseResponse]:
        return [ExerciseResponse.model_validate(e) for e in self.repository.list_all(search, skip, limit)]

    def get(self, exercise_id: int) -> ExerciseResponse:
        return ExerciseResponse.model_validate(self.get_model(exercise_id))

    def get_model(self, exercise_id: int) -> Exercise:
        exercise = self.repository.get_by_id(exercise_id)
        if not exercise:
            raise NotFoundError("Exercise")
        return exercise

    def create(self, data: ExerciseCreate) -> ExerciseResponse:
        """
        Add an exercise to the catalog.

        Raises:
            ConflictError: An exercise with the same name (any case) exists
        """
        if self.repository.get_by_name(data.name):
            raise ConflictError("An exercise with this name already exists")
        try:
            exercise = self.repository.create(Exercise(name=data.name, description=data.description))
        except IntegrityError:
            self.session.rollback()
            raise ConflictError("An exercise with this name already exists")
        logger.info("Created catalog exercise %s (%s)", exercise.id, exercise.name)
        return ExerciseResponse.model_validate(exercise)

    def ensure_exist(self, exercise_ids: Iterable[int]) -> None:
        """
        Raises:
            ValidationError: One or more ids are not in the catalog
        """
        missing = self.repository.missing_ids(list(exercise_ids))
        if missing:
            raise ValidationError("One or more exercises not found",
                                  details=[{"field": "exercise_id", "value": eid, "msg": "exercise not found"}
                                           for eid in missing])

    def summaries(self, exercise_ids: Iterable[int]) -> dict[int, ExerciseSummary]:
        found = self.repository.get_many(list(exercise_ids))
        return {eid: ExerciseSummary.model_validate(e) for eid, e in found.items()}
