"""
Body metrics endpoints.

One metrics record per user, upserted with PUT.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from gymapi.api.dependencies import get_current_user
from gymapi.db.session import get_db
from gymapi.models.user import User
from gymapi.schemas.metrics import UserMetricsResponse, UserMetricsUpdate
from gymapi.services.metrics_service import MetricsService

router = APIRouter()


@router.get("", summary="Get your body metrics (null if none recorded).",
            response_model=Optional[UserMetricsResponse], )
def get_metrics(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return MetricsService(db).get(user.id)


@router.put("", summary="Create or update your body metrics.", response_model=UserMetricsResponse, )
def upsert_metrics(data: UserMetricsUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    """Upsert: creates the record if it doesn't exist, changes only the given fields if it does."""
    metrics, _ = MetricsService(db).upsert(user.id, data)
    return metrics


@router.delete("", summary="Delete your body metrics.", )
def delete_metrics(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    MetricsService(db).delete(user.id)
    return {"message": "Metrics deleted successfully"}
