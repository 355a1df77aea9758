"""Database repositories."""

from gymapi.db.repositories.user import UserRepository
from gymapi.db.repositories.trainer_athlete import TrainerAthleteRepository
from gymapi.db.repositories.user_metrics import UserMetricsRepository
from gymapi.db.repositories.exercise import ExerciseRepository
from gymapi.db.repositories.routine import RoutineRepository
from gymapi.db.repositories.workout_session import WorkoutSessionRepository

__all__ = [
    "UserRepository",
    "TrainerAthleteRepository",
    "UserMetricsRepository",
    "ExerciseRepository",
    "RoutineRepository",
    "WorkoutSessionRepository",
]
