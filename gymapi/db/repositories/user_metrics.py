"""
User metrics repository.

Handles database operations for :class:`UserMetrics`.
"""

from typing import Optional

from sqlmodel import Session, select

from gymapi.models.user_metrics import UserMetrics


class UserMetricsRepository:
    """Repository for UserMetrics database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user(self, user_id: int) -> Optional[UserMetrics]:
        statement = select(UserMetrics).where(UserMetrics.user_id == user_id)
        return self.session.exec(statement).first()

    def save(self, metrics: UserMetrics) -> UserMetrics:
        """Insert or update a metrics row."""
        self.session.add(metrics)
        self.session.commit()
        self.session.refresh(metrics)
        return metrics

    def delete(self, metrics: UserMetrics) -> None:
        self.session.delete(metrics)
        self.session.commit()
