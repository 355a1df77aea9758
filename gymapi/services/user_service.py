"""
User service.

Business logic for registration, authentication and profile management.
"""

import datetime
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from gymapi.core.exceptions import AuthenticationError, ConflictError, InvalidTokenError, ValidationError
from gymapi.core.password_policy import validate_password
from gymapi.core.security import create_access_token, decode_access_token, get_password_hash, verify_password
from gymapi.db.repositories.user import UserRepository
from gymapi.models.user import User
from gymapi.schemas.user import PasswordChange, UserCreate, UserLogin, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session
        self.repository = UserRepository(session)

    def register(self, user_data: UserCreate) -> tuple[User, str]:
        """
        Register a new user.

        Args:
            user_data: User registration data

        Returns:
            Tuple of (created user, access token)

        Raises:
            ConflictError: If email already exists
            ValidationError: If the password violates the policy
        """
        self._check_password_policy(user_data.password)

        if self.repository.exists_by_email(user_data.email):
            raise ConflictError("A user with this email already exists")

        user = User(email=user_data.email, hashed_password=get_password_hash(user_data.password),
                    name=user_data.name, role=user_data.role, )
        try:
            user = self.repository.create(user)
        except IntegrityError:
            # Lost a race with a concurrent registration of the same email
            self.session.rollback()
            raise ConflictError("A user with this email already exists")
        logger.info("Registered user %s with role %s", user.id, user.role.value)

        return user, self.issue_token(user)

    def authenticate(self, login_data: UserLogin) -> tuple[User, str]:
        """
        Authenticate user and return access token.

        Unknown email and wrong password produce the same error.

        Raises:
            AuthenticationError: If credentials are invalid
        """
        user = self.repository.get_by_email(login_data.email)

        if not user or not verify_password(login_data.password, user.hashed_password):
            logger.warning("Failed login attempt for %s", login_data.email)
            raise AuthenticationError("Invalid email or password")

        return user, self.issue_token(user)

    def resolve_token(self, token: Optional[str]) -> User:
        """
        Map a bearer token to its user.

        Raises:
            AuthenticationError: No token supplied, or its user no longer exists
            TokenExpiredError: Token expired
            InvalidTokenError: Token malformed or forged
        """
        if not token:
            raise AuthenticationError("No token provided. Please include a Bearer token in the Authorization header.")

        claims = decode_access_token(token)
        try:
            user_id = int(claims.get("sub"))
        except (TypeError, ValueError):
            raise InvalidTokenError("Invalid token payload")

        user = self.repository.get_by_id(user_id)
        if not user:
            raise AuthenticationError("User not found. Please login again.")
        return user

    def update_profile(self, user: User, data: UserUpdate) -> User:
        """
        Apply a partial profile update.

        Raises:
            ConflictError: If the new email belongs to another account
        """
        changes = data.model_dump(exclude_unset=True)

        new_email = changes.get("email")
        if new_email and new_email.lower() != user.email.lower():
            if self.repository.exists_by_email(new_email):
                raise ConflictError("This email is already in use by another account")

        for key, value in changes.items():
            setattr(user, key, value)
        user.updated_at = datetime.datetime.utcnow()
        try:
            return self.repository.update(user)
        except IntegrityError:
            self.session.rollback()
            raise ConflictError("This email is already in use by another account")

    def change_password(self, user: User, data: PasswordChange) -> None:
        """
        Replace the password after checking the current one.

        Raises:
            AuthenticationError: Current password is wrong
            ValidationError: New password violates the policy
        """
        if not verify_password(data.current_password, user.hashed_password):
            raise AuthenticationError("Current password is incorrect")

        self._check_password_policy(data.new_password)

        user.hashed_password = get_password_hash(data.new_password)
        user.updated_at = datetime.datetime.utcnow()
        self.repository.update(user)
        logger.info("User %s changed password", user.id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def issue_token(user: User) -> str:
        return create_access_token(data={"sub": str(user.id), "email": user.email, "role": user.role.value})

    @staticmethod
    def _check_password_policy(password: str) -> None:
        is_valid, errors = validate_password(password)
        if not is_valid:
            raise ValidationError("Password does not meet security requirements", details=errors)
