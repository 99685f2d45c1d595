# File: articles_api/core/security.py

"""
Security helpers for the Articles API.

Two pieces live here:
  - password hashing with bcrypt (salted, fixed work factor)
  - stateless JWT access tokens signed with ``settings.secret_key``

Tokens are self-contained: verifying one needs only the secret key, there is
no server-side store or revocation list. Rotating the key invalidates every
token issued before the rotation.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from articles_api.core.config import Settings

BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of the password.
_BCRYPT_MAX_BYTES = 72


class InvalidToken(Exception):
    """Bad signature, malformed token or missing/invalid subject."""


class ExpiredToken(InvalidToken):
    """Well-formed, correctly signed token past its ``exp``."""


def _password_bytes(plain: str) -> bytes:
    return plain.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(plain: str) -> str:
    if not plain:
        raise ValueError("Password must not be empty")
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(plain), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """
    Check ``plain`` against a stored bcrypt digest.

    A missing or malformed digest is treated as a non-match.
    """
    if not plain or not hashed:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(plain), hashed.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    subject_id: int,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode: dict[str, Any] = {
        "sub": str(subject_id),
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Settings) -> int:
    """
    Verify signature and expiry and return the subject user id.

    Raises ``ExpiredToken`` or ``InvalidToken``.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError as exc:
        raise ExpiredToken("Token has expired") from exc
    except JWTError as exc:
        raise InvalidToken("Token is invalid") from exc

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError) as exc:
        raise InvalidToken("Token subject is invalid") from exc
