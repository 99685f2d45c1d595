# File: articles_api/api/deps.py

import logging
from collections.abc import Generator
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from articles_api.core.config import Settings
from articles_api.core.errors import Unauthorized
from articles_api.core.security import ExpiredToken, InvalidToken, decode_access_token


logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session from the
    application's own session factory.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_app_settings(request: Request) -> Settings:
    """The settings the application was created with."""
    return request.app.state.settings


def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> int:
    """
    Auth gate for protected routes.

    Verifies the bearer token and stores the subject id on
    ``request.state.user_id``. The user row is NOT re-read: a user deleted
    after the token was issued still passes here, and the write that follows
    answers 404.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Missing or malformed Authorization header")

    try:
        user_id = decode_access_token(credentials.credentials, settings)
    except ExpiredToken:
        logger.info("Rejected expired token on %s", request.url.path)
        raise Unauthorized("Token has expired")
    except InvalidToken:
        logger.info("Rejected invalid token on %s", request.url.path)
        raise Unauthorized("Invalid token")

    request.state.user_id = user_id
    return user_id
