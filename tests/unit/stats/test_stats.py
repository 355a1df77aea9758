"""Tests for exercise progress, workout and routine statistics.

The pure aggregation helpers are tested directly; the compute_* entry
points run against the in-memory database.
"""

import datetime

import pytest

from gymapi.core.exceptions import NotFoundError
from gymapi.models.routine import Routine
from gymapi.models.workout_session import SessionExercise
from gymapi.schemas.routine import RoutineCreate, RoutineExerciseIn
from gymapi.schemas.workout_session import SessionExerciseIn, WorkoutSessionCreate
from gymapi.services.routine_service import RoutineService
from gymapi.services.workout_session_service import WorkoutSessionService
from gymapi.stats.progress import (average_duration, compute_exercise_progress, compute_workout_stats,
                                   summarize_history, )
from gymapi.stats.routines import compute_routine_stats, summarize_routines

DAY = datetime.datetime(2026, 3, 1, 9, 0)


def _log(db, user_id, title, started_at, completed=True, duration=None, exercises=()):
    return WorkoutSessionService(db).create(user_id, WorkoutSessionCreate(
        title=title, started_at=started_at,
        completed_at=started_at + datetime.timedelta(hours=1) if completed else None,
        duration=duration, exercises=list(exercises)))


# ======================================================================
# Pure helpers
# ======================================================================


class TestSummarizeHistory:
    def test_empty_history(self):
        stats = summarize_history([])
        assert stats.total_sessions == 0
        assert stats.max_weight == 0
        assert stats.max_reps == 0
        assert stats.avg_weight == 0
        assert stats.avg_reps == 0

    def test_missing_weight_counts_as_zero(self):
        entries = [SessionExercise(session_id=1, exercise_id=1, sets=3, reps=10, weight=60),
                   SessionExercise(session_id=2, exercise_id=1, sets=3, reps=8, weight=90),
                   SessionExercise(session_id=3, exercise_id=1, sets=3, reps=12, weight=None)]
        stats = summarize_history(entries)
        assert stats.total_sessions == 3
        assert stats.max_weight == 90
        assert stats.max_reps == 12
        assert stats.avg_weight == pytest.approx(50.0)
        assert stats.avg_reps == pytest.approx(10.0)

    def test_average_duration(self):
        assert average_duration(4000, 2) == 2000
        assert average_duration(0, 0) == 0


class TestSummarizeRoutines:
    def test_no_routines(self):
        stats = summarize_routines([], DAY)
        assert stats.total_routines == 0
        assert stats.average_exercises_per_routine == 0.0

    def test_recent_window_and_rounding(self):
        rows = [(DAY - datetime.timedelta(days=1), 2),
                (DAY - datetime.timedelta(days=29), 1),
                (DAY - datetime.timedelta(days=31), 2)]
        stats = summarize_routines(rows, DAY)
        assert stats.total_routines == 3
        assert stats.total_exercises == 5
        assert stats.recent_routines == 2
        assert stats.average_exercises_per_routine == 1.7

    def test_half_rounds_up(self):
        stats = summarize_routines([(DAY, 1), (DAY, 2), (DAY, 2), (DAY, 2)], DAY)
        # 7 / 4 = 1.75
        assert stats.average_exercises_per_routine == 1.8


# ======================================================================
# Workout stats
# ======================================================================


class TestWorkoutStats:
    def test_counts_and_duration(self, db, athlete):
        _log(db, athlete.id, "a", DAY, duration=1800)
        _log(db, athlete.id, "b", DAY + datetime.timedelta(days=1), duration=2200)
        _log(db, athlete.id, "c", DAY + datetime.timedelta(days=2), completed=False, duration=999)

        stats = compute_workout_stats(db, athlete.id)
        assert stats.total_sessions == 3
        assert stats.completed_sessions == 2
        assert stats.in_progress_sessions == 1
        assert stats.total_duration == 4000
        assert stats.avg_duration == 2000

    def test_no_sessions(self, db, athlete):
        stats = compute_workout_stats(db, athlete.id)
        assert stats.total_sessions == 0
        assert stats.avg_duration == 0
        assert stats.most_used_exercises == []

    def test_date_range(self, db, athlete):
        _log(db, athlete.id, "a", DAY, duration=1800)
        _log(db, athlete.id, "b", DAY + datetime.timedelta(days=10), duration=2200)
        stats = compute_workout_stats(db, athlete.id, start=DAY + datetime.timedelta(days=5))
        assert stats.total_sessions == 1
        assert stats.total_duration == 2200

    def test_most_used_exercises(self, db, athlete, exercises):
        bench, squat, _ = exercises
        _log(db, athlete.id, "a", DAY, exercises=[SessionExerciseIn(exercise_id=bench.id, sets=3, reps=10),
                                                   SessionExerciseIn(exercise_id=squat.id, sets=3, reps=10)])
        _log(db, athlete.id, "b", DAY, exercises=[SessionExerciseIn(exercise_id=squat.id, sets=3, reps=10)])

        most_used = compute_workout_stats(db, athlete.id).most_used_exercises
        assert [(m.name, m.count) for m in most_used] == [("Squat", 2), ("Bench Press", 1)]

    def test_other_users_are_ignored(self, db, athlete, trainer):
        _log(db, trainer.id, "theirs", DAY, duration=1800)
        assert compute_workout_stats(db, athlete.id).total_sessions == 0


# ======================================================================
# Exercise progress
# ======================================================================


class TestExerciseProgress:
    def test_history_only_from_completed_sessions(self, db, athlete, exercises):
        bench = exercises[0]
        _log(db, athlete.id, "first", DAY, exercises=[SessionExerciseIn(exercise_id=bench.id, sets=3, reps=10,
                                                                         weight=60)])
        _log(db, athlete.id, "second", DAY + datetime.timedelta(days=2),
             exercises=[SessionExerciseIn(exercise_id=bench.id, sets=3, reps=8, weight=70)])
        _log(db, athlete.id, "open", DAY + datetime.timedelta(days=4), completed=False,
             exercises=[SessionExerciseIn(exercise_id=bench.id, sets=3, reps=5, weight=100)])

        progress = compute_exercise_progress(db, athlete.id, bench.id)
        assert progress.exercise.name == "Bench Press"
        assert [h.session.title for h in progress.history] == ["second", "first"]
        assert progress.stats.total_sessions == 2
        assert progress.stats.max_weight == 70
        assert progress.stats.avg_weight == pytest.approx(65.0)

    def test_limit_caps_history_before_stats(self, db, athlete, exercises):
        bench = exercises[0]
        for day, weight in enumerate([50, 60, 70]):
            _log(db, athlete.id, f"s{day}", DAY + datetime.timedelta(days=day),
                 exercises=[SessionExerciseIn(exercise_id=bench.id, sets=3, reps=10, weight=weight)])

        progress = compute_exercise_progress(db, athlete.id, bench.id, limit=2)
        assert progress.stats.total_sessions == 2
        assert progress.stats.avg_weight == pytest.approx(65.0)

    def test_unknown_exercise(self, db, athlete):
        with pytest.raises(NotFoundError):
            compute_exercise_progress(db, athlete.id, 424242)


# ======================================================================
# Routine stats
# ======================================================================


class TestRoutineStats:
    def test_counts_assigned_and_own_routines(self, db, athlete, exercises):
        service = RoutineService(db)
        service.create(athlete.id, RoutineCreate(title="A", exercises=[
            RoutineExerciseIn(exercise_id=exercises[0].id, sets=3, reps=10),
            RoutineExerciseIn(exercise_id=exercises[1].id, sets=3, reps=10)]))
        service.create(athlete.id, RoutineCreate(title="B"))
        old = service.create(athlete.id, RoutineCreate(title="C", exercises=[
            RoutineExerciseIn(exercise_id=exercises[2].id, sets=3, reps=10)]))

        routine = db.get(Routine, old.id)
        routine.created_at = datetime.datetime.utcnow() - datetime.timedelta(days=60)
        db.add(routine)
        db.commit()

        stats = compute_routine_stats(db, athlete.id)
        assert stats.total_routines == 3
        assert stats.total_exercises == 3
        assert stats.recent_routines == 2
        assert stats.average_exercises_per_routine == 1.0
