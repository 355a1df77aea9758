"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from gymapi.models.user import User  # noqa: F401
from gymapi.models.trainer_athlete import TrainerAthlete  # noqa: F401
from gymapi.models.user_metrics import UserMetrics  # noqa: F401
from gymapi.models.exercise import Exercise  # noqa: F401
from gymapi.models.routine import Routine, RoutineExercise  # noqa: F401
from gymapi.models.workout_session import SessionExercise, WorkoutSession  # noqa: F401
