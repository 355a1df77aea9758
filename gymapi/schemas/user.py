"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from gymapi.models.user import Role


# Shared properties
class UserBase(BaseModel):
    """Base user schema with common fields."""
    email: EmailStr
    name: Optional[str] = Field(None, min_length=1, max_length=100)


# Request schemas
class UserCreate(UserBase):
    """Schema for user registration. Strength policy is checked by the service."""
    password: str = Field(..., min_length=1, description="Password (6-128 chars, upper, lower and digit)")
    role: Role = Field(Role.ATHLETE, description="ATHLETE (default) or TRAINER")


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserUpdate(BaseModel):
    """Schema for updating user profile. Only keys present in the body are applied."""
    email: Optional[EmailStr] = None
    name: Optional[str] = Field(None, min_length=1, max_length=100)

    class Config:
        str_strip_whitespace = True

    @field_validator("email")
    @classmethod
    def email_not_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("email cannot be null")
        return value


class PasswordChange(BaseModel):
    """Schema for changing the current user's password."""
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6)


# Response schemas
class UserSummary(BaseModel):
    """Public identity of a user, embedded in other resources."""
    id: int
    name: Optional[str] = None
    email: str
    role: Role

    class Config:
        from_attributes = True


class UserResponse(UserSummary):
    """Schema for user data in API responses (no sensitive data)."""
    created_at: datetime
    updated_at: datetime


# Token schemas
class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"


class AuthResponse(BaseModel):
    """Registration / login result."""
    user: UserResponse
    token: str
