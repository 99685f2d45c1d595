# File: articles_api/api/v1/routes_auth.py

"""
Auth API routes: registration and login.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from articles_api.api.deps import get_app_settings, get_db
from articles_api.core.config import Settings
from articles_api.core.errors import Unauthorized
from articles_api.core.security import create_access_token
from articles_api.schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterResponse,
    UserCreate,
    UserResponse,
)
from articles_api.services.auth_service import authenticate_user, register_user

router = APIRouter()

# Shared by "unknown email" and "wrong password" so the response does not
# reveal which accounts exist.
INVALID_CREDENTIALS = "Invalid email or password"


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    """
    Create an account from username, email and password.

    The response carries the public user fields only, never the password.
    """
    user = register_user(db, payload)
    return RegisterResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse, summary="User login")
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Authenticate with email and password and return a bearer token.
    """
    user = authenticate_user(db, email=payload.email, password=payload.password)
    if user is None:
        raise Unauthorized(INVALID_CREDENTIALS)

    return LoginResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
        token=create_access_token(user.id, settings),
    )
