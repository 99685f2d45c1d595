# File: articles_api/services/user_service.py

import logging
from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from articles_api.core.errors import Conflict, Forbidden, InternalError, NotFound
from articles_api.core.security import hash_password
from articles_api.models.user import User

logger = logging.getLogger(__name__)


def ensure_owner(target_user_id: int, caller_id: int, action: str) -> None:
    """
    A user may only mutate their own record.

    ``action`` is the verb used in the error message ("update", "delete").
    """
    if target_user_id != caller_id:
        logger.info("User %s tried to %s user %s", caller_id, action, target_user_id)
        raise Forbidden(f"You can only {action} your own account")


def list_users(db: Session) -> Sequence[User]:
    try:
        return db.scalars(select(User).order_by(User.id)).all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch users")
        raise InternalError("Failed to fetch users")


def update_user(db: Session, user_id: int, changes: dict[str, Any]) -> User:
    """
    Apply ``changes`` to the user row and return the updated user.

    PUT passes every field, PATCH only the ones present in the request body.
    A plain ``password`` key is hashed before it is stored.
    """
    values = dict(changes)
    if "password" in values:
        values["password_hash"] = hash_password(values.pop("password"))

    try:
        user = db.get(User, user_id)
        if user is None:
            raise NotFound("User not found")

        for field, value in values.items():
            setattr(user, field, value)
        db.commit()
        db.refresh(user)
    except IntegrityError:
        db.rollback()
        raise Conflict("Username or email already in use")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update user %s", user_id)
        raise InternalError("Failed to update user")

    logger.info("Updated user %s fields=%s", user_id, sorted(changes))
    return user


def delete_user(db: Session, user_id: int) -> None:
    try:
        user = db.get(User, user_id)
        if user is None:
            raise NotFound("User not found")
        db.delete(user)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete user %s", user_id)
        raise InternalError("Failed to delete user")

    logger.info("Deleted user %s", user_id)
