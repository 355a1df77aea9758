"""Business logic services."""

from gymapi.services.user_service import UserService
from gymapi.services.trainer_service import TrainerService
from gymapi.services.exercise_service import ExerciseService
from gymapi.services.routine_service import RoutineService
from gymapi.services.metrics_service import MetricsService
from gymapi.services.workout_session_service import WorkoutSessionService

__all__ = [
    "UserService",
    "TrainerService",
    "ExerciseService",
    "RoutineService",
    "MetricsService",
    "WorkoutSessionService",
]
