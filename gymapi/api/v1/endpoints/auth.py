"""
Authentication endpoints.

Handles registration, login and the current user's profile.
"""

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Session

from gymapi.api.dependencies import get_current_user
from gymapi.core.exceptions import AuthenticationError
from gymapi.db.session import get_db
from gymapi.models.user import User
from gymapi.schemas.user import (AuthResponse, PasswordChange, Token, UserCreate, UserLogin, UserResponse,
                                 UserUpdate, )
from gymapi.services.user_service import UserService

router = APIRouter()


@router.post("/register",
             summary="User registration endpoint.",
             response_model=AuthResponse,
             status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """
    Register a new user and log them in.

    Raises:
        409: Email already registered
        400: Password does not meet the policy
    """
    user, token = UserService(db).register(user_data)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/login",
             summary="User login endpoint via JSON.",
             response_model=AuthResponse)
def login(login_data: UserLogin, db: Session = Depends(get_db)):
    user, token = UserService(db).authenticate(login_data)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/token",
             summary="User login endpoint via OAuth2 form (for Swagger UI).",
             response_model=Token)
def login_form(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """Use email as username."""
    try:
        login_data = UserLogin(email=form_data.username, password=form_data.password)
    except PydanticValidationError:
        raise AuthenticationError("Invalid email or password")
    _, token = UserService(db).authenticate(login_data)
    return Token(access_token=token)


@router.get("/profile",
            summary="Current user profile.",
            response_model=UserResponse)
def get_profile(user: User = Depends(get_current_user)):
    return user


@router.put("/profile",
            summary="Update name and/or email.",
            response_model=UserResponse)
def update_profile(data: UserUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return UserService(db).update_profile(user, data)


@router.put("/change-password",
            summary="Change the current user's password.")
def change_password(data: PasswordChange, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    UserService(db).change_password(user, data)
    return {"message": "Password changed successfully"}
