"""
Domain exceptions.

Raised by the service layer and translated to HTTP responses in
``gymapi.main``. Nothing in here knows about status codes.
"""

from typing import Any, Optional


class GymError(Exception):
    """Base class for all domain errors."""

    error_code: str = "ERROR"
    default_message: str = "Request failed"

    def __init__(self, message: Optional[str] = None, details: Optional[list[Any]] = None):
        self.message = message or self.default_message
        self.details = details or []
        super().__init__(self.message)


class ValidationError(GymError):
    """Malformed or out-of-range input, detected before touching storage."""

    error_code = "VALIDATION_ERROR"
    default_message = "Validation failed"


class AuthenticationError(GymError):
    """Missing or bad credentials."""

    error_code = "AUTHENTICATION_ERROR"
    default_message = "Authentication required"


class TokenExpiredError(AuthenticationError):
    """The bearer token was valid once but has expired. Client should log in again."""

    error_code = "TOKEN_EXPIRED"
    default_message = "Your session has expired. Please login again."


class InvalidTokenError(AuthenticationError):
    """The bearer token is malformed, tampered or signed for someone else."""

    error_code = "INVALID_TOKEN"
    default_message = "Invalid authentication token. Please login again."


class ForbiddenError(GymError):
    """Authenticated, but not allowed to perform the operation."""

    error_code = "FORBIDDEN"
    default_message = "Access denied"


class InvalidRoleError(GymError):
    """The referenced user does not have the role the operation requires."""

    error_code = "INVALID_ROLE"
    default_message = "The specified user does not have the required role"


class NotFoundError(GymError):
    """Resource absent, or outside the caller's scope (deliberately indistinguishable)."""

    error_code = "NOT_FOUND"
    default_message = "Resource not found"

    def __init__(self, resource: str = "Resource", message: Optional[str] = None):
        self.resource = resource
        super().__init__(message or f"{resource} not found")


class ConflictError(GymError):
    """Duplicate of a unique key (email, trainer-athlete link, exercise name)."""

    error_code = "CONFLICT"
    default_message = "Resource already exists"
