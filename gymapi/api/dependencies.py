"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and role checks.
"""

from typing import Callable, Optional

from fastapi import Depends
from sqlmodel import Session

from gymapi.core.security import oauth2_scheme
from gymapi.db.session import get_db
from gymapi.models.user import Role, User
from gymapi.services.trainer_service import ensure_role
from gymapi.services.user_service import UserService


def get_current_user(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db), ) -> User:
    """Extract and validate the current user from the bearer token."""
    return UserService(db).resolve_token(token)


def require_role(role: Role) -> Callable[..., User]:
    """
    Dependency factory for role-gated endpoints.

    Usage:
        @router.post("/assign")
        def assign(user: User = Depends(require_role(Role.TRAINER))):
            ...
    """

    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        ensure_role(current_user, role)
        return current_user

    return role_checker
