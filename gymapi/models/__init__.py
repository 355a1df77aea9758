"""SQLModel database models."""

from gymapi.models.user import Role, User
from gymapi.models.trainer_athlete import TrainerAthlete
from gymapi.models.user_metrics import UserMetrics
from gymapi.models.exercise import Exercise
from gymapi.models.routine import Routine, RoutineExercise
from gymapi.models.workout_session import SessionExercise, WorkoutSession

__all__ = [
    "Role",
    "User",
    "TrainerAthlete",
    "UserMetrics",
    "Exercise",
    "Routine",
    "RoutineExercise",
    "WorkoutSession",
    "SessionExercise",
]
