"""
Routine statistics.

Counts over the routines a user is the subject of, including the ones
assigned by a trainer.
"""

from __future__ import annotations

import datetime
import math
from typing import Optional, Sequence

from sqlmodel import Session

from gymapi.db.repositories.routine import RoutineRepository
from gymapi.schemas.routine import RoutineStats

RECENT_WINDOW = datetime.timedelta(days=30)


def _round_half_up(value: float, digits: int = 1) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def summarize_routines(rows: Sequence[tuple[datetime.datetime, int]], now: datetime.datetime) -> RoutineStats:
    """Build stats from ``(created_at, exercise_count)`` pairs, one per routine."""
    total_routines = len(rows)
    total_exercises = sum(count for _, count in rows)
    threshold = now - RECENT_WINDOW
    recent = sum(1 for created_at, _ in rows if created_at >= threshold)
    average = _round_half_up(total_exercises / total_routines) if total_routines else 0.0

    return RoutineStats(total_routines=total_routines, total_exercises=total_exercises, recent_routines=recent,
                        average_exercises_per_routine=average, )


def compute_routine_stats(db: Session, user_id: int, now: Optional[datetime.datetime] = None) -> RoutineStats:
    ref_now = now or datetime.datetime.utcnow()
    return summarize_routines(RoutineRepository(db).exercise_counts_by_user(user_id), ref_now)
