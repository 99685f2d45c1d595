# File: articles_api/services/auth_service.py

"""
Authentication service.

  - registration: duplicate check, password hashing, insert
  - login: user lookup by email, password verification

Login failures never reveal whether the email exists: an unknown email and
a wrong password both come back as ``None``.
"""

import logging
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from articles_api.core.errors import Conflict, InternalError
from articles_api.core.security import hash_password, verify_password
from articles_api.models.user import User
from articles_api.schemas.user import UserCreate

logger = logging.getLogger(__name__)


def register_user(db: Session, payload: UserCreate) -> User:
    try:
        existing = db.scalars(
            select(User).where(
                or_(User.email == payload.email, User.username == payload.username)
            )
        ).first()
        if existing is not None:
            raise Conflict()

        user = User(
            username=payload.username,
            email=payload.email,
            password_hash=hash_password(payload.password),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError:
        # Lost a race against a concurrent registration; the unique index wins.
        db.rollback()
        raise Conflict()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Registration failed for username=%s", payload.username)
        raise InternalError("Failed to register user")

    logger.info("Registered user id=%s username=%s", user.id, user.username)
    return user


def authenticate_user(
    db: Session,
    *,
    email: str,
    password: str,
) -> Optional[User]:
    try:
        user = db.scalars(select(User).where(User.email == email)).first()
    except SQLAlchemyError:
        logger.exception("User lookup failed during login")
        raise InternalError("Failed to log in")

    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Failed login attempt for email=%s", email)
        return None
    return user
