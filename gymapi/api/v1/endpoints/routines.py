"""
Routine endpoints.

Routine CRUD, trainer assignment and trainer/athlete management.
Fixed paths are declared before ``/{routine_id}``.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from gymapi.api.dependencies import get_current_user, require_role
from gymapi.db.session import get_db
from gymapi.models.user import Role, User
from gymapi.schemas.routine import RoutineAssign, RoutineCreate, RoutineResponse, RoutineStats, RoutineUpdate
from gymapi.schemas.trainer import AthleteLinkCreate, AthleteLinkResponse, LinkedAthlete, LinkedTrainer
from gymapi.services.routine_service import RoutineService
from gymapi.services.trainer_service import TrainerService
from gymapi.stats.routines import compute_routine_stats

router = APIRouter()


@router.get("", summary="List routines assigned to you or created by you for yourself.",
            response_model=list[RoutineResponse], )
def list_routines(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return RoutineService(db).list_for_user(user.id)


@router.post("", summary="Create a routine for yourself.", response_model=RoutineResponse,
             status_code=status.HTTP_201_CREATED, )
def create_routine(data: RoutineCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return RoutineService(db).create(user.id, data)


@router.get("/stats", summary="Routine statistics.", response_model=RoutineStats, )
def routine_stats(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return compute_routine_stats(db, user.id)


# ----------------------------------------------------------------------
# Trainer / athlete
# ----------------------------------------------------------------------


@router.post("/assign", summary="Assign a new routine to one of your athletes.", response_model=RoutineResponse,
             status_code=status.HTTP_201_CREATED, )
def assign_routine(data: RoutineAssign, db: Session = Depends(get_db),
                   trainer: User = Depends(require_role(Role.TRAINER)), ):
    return RoutineService(db).assign(trainer, data)


@router.get("/athletes", summary="List your athletes.", response_model=list[LinkedAthlete], )
def list_athletes(db: Session = Depends(get_db), trainer: User = Depends(require_role(Role.TRAINER)), ):
    return TrainerService(db).list_athletes(trainer)


@router.post("/athletes", summary="Add an athlete.", response_model=AthleteLinkResponse,
             status_code=status.HTTP_201_CREATED, )
def add_athlete(data: AthleteLinkCreate, db: Session = Depends(get_db),
                trainer: User = Depends(require_role(Role.TRAINER)), ):
    return TrainerService(db).add_athlete(trainer, data.athlete_id)


@router.delete("/athletes/{athlete_id}", summary="Remove an athlete.", )
def remove_athlete(athlete_id: int, db: Session = Depends(get_db),
                   trainer: User = Depends(require_role(Role.TRAINER)), ):
    TrainerService(db).remove_athlete(trainer, athlete_id)
    return {"message": "Athlete removed successfully"}


@router.get("/trainers", summary="List your trainers.", response_model=list[LinkedTrainer], )
def list_trainers(db: Session = Depends(get_db), athlete: User = Depends(require_role(Role.ATHLETE)), ):
    return TrainerService(db).list_trainers(athlete)


# ----------------------------------------------------------------------
# Single routine
# ----------------------------------------------------------------------


@router.get("/{routine_id}", summary="Get one of your routines.", response_model=RoutineResponse, )
def get_routine(routine_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return RoutineService(db).get(user.id, routine_id)


@router.put("/{routine_id}", summary="Update a routine you created.", response_model=RoutineResponse, )
def update_routine(routine_id: int, data: RoutineUpdate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    return RoutineService(db).update(user.id, routine_id, data)


@router.delete("/{routine_id}", summary="Delete a routine you created.", )
def delete_routine(routine_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    RoutineService(db).delete(user.id, routine_id)
    return {"message": "Routine deleted successfully"}
