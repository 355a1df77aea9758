"""
Body metrics service.

Upsert keyed on the user: the first write creates the row with absent
fields left null, later writes change only the fields present in the request.
"""

import datetime
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from gymapi.core.exceptions import NotFoundError
from gymapi.db.repositories.user_metrics import UserMetricsRepository
from gymapi.models.user_metrics import UserMetrics
from gymapi.schemas.metrics import UserMetricsResponse, UserMetricsUpdate

logger = logging.getLogger(__name__)


class MetricsService:
    """Service for body metrics business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = UserMetricsRepository(session)

    def get(self, user_id: int) -> Optional[UserMetricsResponse]:
        metrics = self.repository.get_by_user(user_id)
        return UserMetricsResponse.model_validate(metrics) if metrics else None

    def upsert(self, user_id: int, data: UserMetricsUpdate) -> tuple[UserMetricsResponse, bool]:
        """Create or update the user's metrics.

        Returns:
            Tuple of (response, created) where created is True if new row.
        """
        changes = data.model_dump(exclude_unset=True)
        existing = self.repository.get_by_user(user_id)

        if not existing:
            try:
                metrics = self.repository.save(UserMetrics(user_id=user_id, **changes))
            except IntegrityError:
                # A concurrent request created the row first; apply ours on top of it
                self.session.rollback()
                existing = self.repository.get_by_user(user_id)
                if not existing:
                    raise
            else:
                logger.info("Created metrics for user %s", user_id)
                return UserMetricsResponse.model_validate(metrics), True

        for key, value in changes.items():
            setattr(existing, key, value)
        existing.updated_at = datetime.datetime.utcnow()
        return UserMetricsResponse.model_validate(self.repository.save(existing)), False

    def delete(self, user_id: int) -> None:
        """
        Raises:
            NotFoundError: The user has no metrics
        """
        metrics = self.repository.get_by_user(user_id)
        if not metrics:
            raise NotFoundError("Metrics", "You don't have any metrics to delete")
        self.repository.delete(metrics)
