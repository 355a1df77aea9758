"""Derived statistics: exercise progress, workout and routine stats."""

from gymapi.stats.progress import compute_exercise_progress, compute_workout_stats
from gymapi.stats.routines import compute_routine_stats

__all__ = ["compute_exercise_progress", "compute_workout_stats", "compute_routine_stats"]
