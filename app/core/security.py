"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from pydantic import ValidationError

from app.core.config import settings
from app.schemas.auth import CurrentUser

# Claims every token must carry; decoding fails without them.
REQUIRED_CLAIMS = ["id", "username", "role", "iat", "exp"]


class InvalidTokenError(Exception):
    """Raised when a bearer token is malformed, tampered with, or expired."""

    def __init__(self, message: str = "Invalid or expired token", cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(claims: CurrentUser, now: datetime | None = None) -> str:
    """Create a JWT access token with id, username, role, iat and exp."""
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "id": claims.id,
        "username": claims.username,
        "role": claims.role,
        "iat": issued_at,
        "exp": expire,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (id, username, role, iat, exp).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": REQUIRED_CLAIMS},
    )


def verify_access_token(token: str) -> CurrentUser:
    """
    Verify a bearer token and return the identity it carries.

    Bad signature, malformed structure, missing claims and expiry all raise the
    same InvalidTokenError so callers cannot tell them apart.
    """
    try:
        payload = decode_access_token(token)
        return CurrentUser.model_validate(payload)
    except (jwt.PyJWTError, ValidationError) as e:
        raise InvalidTokenError(cause=e) from e
