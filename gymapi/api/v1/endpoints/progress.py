"""
Progress endpoints.

Workout session logging, exercise progress history and workout statistics.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from gymapi.api.dependencies import get_current_user
from gymapi.db.session import get_db
from gymapi.models.user import User
from gymapi.schemas.progress import ExerciseProgressResponse, WorkoutStats
from gymapi.schemas.workout_session import WorkoutSessionCreate, WorkoutSessionResponse, WorkoutSessionUpdate
from gymapi.services.workout_session_service import WorkoutSessionService
from gymapi.stats.progress import compute_exercise_progress, compute_workout_stats

router = APIRouter()


def _naive_utc(value: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
    if value is not None and value.tzinfo is not None:
        return value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return value


@router.get("/sessions", summary="List your workout sessions.", response_model=list[WorkoutSessionResponse], )
def list_sessions(routine_id: Optional[int] = Query(None, ge=1, description="Only sessions of this routine"),
                  start_date: Optional[datetime.datetime] = Query(None, description="Started at or after"),
                  end_date: Optional[datetime.datetime] = Query(None, description="Started at or before"),
                  completed: Optional[bool] = Query(None, description="true: completed, false: in progress"),
                  limit: Optional[int] = Query(None, ge=1, le=500, description="Max records to return"),
                  offset: Optional[int] = Query(None, ge=0, description="Records to skip"),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return WorkoutSessionService(db).list_sessions(user.id, routine_id=routine_id, start=_naive_utc(start_date),
                                                   end=_naive_utc(end_date), completed=completed, limit=limit,
                                                   offset=offset, )


@router.post("/sessions", summary="Log a workout session.", response_model=WorkoutSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session(data: WorkoutSessionCreate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    return WorkoutSessionService(db).create(user.id, data)


@router.get("/sessions/{session_id}", summary="Get one of your sessions.", response_model=WorkoutSessionResponse, )
def get_session(session_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return WorkoutSessionService(db).get(user.id, session_id)


@router.put("/sessions/{session_id}", summary="Update one of your sessions.",
            response_model=WorkoutSessionResponse, )
def update_session(session_id: int, data: WorkoutSessionUpdate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    return WorkoutSessionService(db).update(user.id, session_id, data)


@router.delete("/sessions/{session_id}", summary="Delete one of your sessions.", )
def delete_session(session_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    WorkoutSessionService(db).delete(user.id, session_id)
    return {"message": "Session deleted successfully"}


@router.get("/exercises/{exercise_id}", summary="Progress history of one exercise.",
            response_model=ExerciseProgressResponse, )
def exercise_progress(exercise_id: int,
                      start_date: Optional[datetime.datetime] = Query(None, description="Started at or after"),
                      end_date: Optional[datetime.datetime] = Query(None, description="Started at or before"),
                      limit: Optional[int] = Query(None, ge=1, le=500, description="Max history entries"),
                      db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return compute_exercise_progress(db, user.id, exercise_id, _naive_utc(start_date), _naive_utc(end_date), limit)


@router.get("/stats", summary="Overall workout statistics.", response_model=WorkoutStats, )
def workout_stats(start_date: Optional[datetime.datetime] = Query(None, description="Started at or after"),
                  end_date: Optional[datetime.datetime] = Query(None, description="Started at or before"),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return compute_workout_stats(db, user.id, _naive_utc(start_date), _naive_utc(end_date))
