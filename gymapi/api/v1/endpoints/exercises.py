"""
Exercise catalog endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from gymapi.api.dependencies import get_current_user
from gymapi.db.session import get_db
from gymapi.models.user import User
from gymapi.schemas.exercise import ExerciseCreate, ExerciseResponse
from gymapi.services.exercise_service import ExerciseService

router = APIRouter()


@router.get("", summary="Browse the exercise catalog.", response_model=list[ExerciseResponse], )
def list_exercises(search: Optional[str] = Query(None, max_length=100, description="Name contains (any case)"),
                   skip: int = Query(0, ge=0, description="Records to skip"),
                   limit: int = Query(100, ge=1, le=500, description="Max records to return"),
                   db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ExerciseService(db).list_exercises(search, skip, limit)


@router.get("/{exercise_id}", summary="Get a catalog exercise.", response_model=ExerciseResponse, )
def get_exercise(exercise_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ExerciseService(db).get(exercise_id)


@router.post("", summary="Add an exercise to the catalog.", response_model=ExerciseResponse,
             status_code=status.HTTP_201_CREATED, )
def create_exercise(data: ExerciseCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ExerciseService(db).create(data)
