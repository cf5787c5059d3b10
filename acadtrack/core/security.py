"""Password hashing and session token issuance/verification."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from acadtrack.core.config import settings

PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128


class TokenExpiredError(Exception):
    """Raised when a session token's exp claim is in the past."""


class TokenInvalidError(Exception):
    """Raised when a session token is malformed, tampered with, or lacks a usable subject."""


@dataclass(frozen=True)
class TokenIdentity:
    """Claims carried by a verified session token."""

    user_id: int
    email: str
    role: str
    expires_at: datetime


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    email: str,
    role: str,
    issued_at: datetime | None = None,
) -> str:
    """Create a signed JWT with sub (user id), email, role, iat and exp."""
    now = issued_at or datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "role": role,
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, email, role, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "sub"]},
    )


def verify_access_token(token: str) -> TokenIdentity:
    """
    Verify a session token and return its identity.

    Raises TokenExpiredError when exp has passed, TokenInvalidError for any other
    failure (bad signature, malformed token, missing or non-numeric subject).
    """
    try:
        payload = decode_access_token(token)
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError("Token has expired") from e
    except jwt.PyJWTError as e:
        raise TokenInvalidError("Token is invalid") from e

    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError) as e:
        raise TokenInvalidError("Token subject is invalid") from e

    return TokenIdentity(
        user_id=user_id,
        email=str(payload.get("email") or ""),
        role=str(payload.get("role") or ""),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
    )
