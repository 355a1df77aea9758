"""
Exercise catalog repository.

Handles database operations for :class:`Exercise`.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from gymapi.models.exercise import Exercise


class ExerciseRepository:
    """Repository for Exercise database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, exercise: Exercise) -> Exercise:
        self.session.add(exercise)
        self.session.commit()
        self.session.refresh(exercise)
        return exercise

    def get_by_id(self, exercise_id: int) -> Optional[Exercise]:
        return self.session.get(Exercise, exercise_id)

    def get_by_name(self, name: str) -> Optional[Exercise]:
        """Case-insensitive name lookup."""
        statement = select(Exercise).where(func.lower(Exercise.name) == name.strip().lower())
        return self.session.exec(statement).first()

    def get_many(self, exercise_ids: list[int]) -> dict[int, Exercise]:
        """Fetch several exercises at once, keyed by id."""
        if not exercise_ids:
            return {}
        statement = select(Exercise).where(Exercise.id.in_(set(exercise_ids)))
        return {exercise.id: exercise for exercise in self.session.exec(statement).all()}

    def missing_ids(self, exercise_ids: list[int]) -> list[int]:
        """Return the ids from ``exercise_ids`` that are not in the catalog."""
        found = self.get_many(exercise_ids)
        return sorted({eid for eid in exercise_ids if eid not in found})

    def list_all(self, search: Optional[str] = None, skip: int = 0, limit: int = 100) -> list[Exercise]:
        statement = select(Exercise)
        if search:
            statement = statement.where(func.lower(Exercise.name).contains(search.lower()))
        statement = statement.order_by(Exercise.name).offset(skip).limit(limit)
        return list(self.session.exec(statement).all())
