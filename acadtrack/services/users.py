"""Credential store: registration, login and user lookup."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from acadtrack.core.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationFailedError
from acadtrack.core.security import (
    PASSWORD_MIN_LEN,
    create_access_token,
    hash_password,
    verify_password,
)
from acadtrack.models.user import ROLE_ADMIN, ROLE_USER, User

if TYPE_CHECKING:
    from acadtrack.core.config import Settings

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password so accounts cannot be enumerated.
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


def normalize_email(email: str) -> str:
    """Trim and lower-case an email for storage and lookup."""
    return (email or "").strip().lower()


def _is_admin_code(admin_code: str | None, settings: "Settings") -> bool:
    if not admin_code or not admin_code.strip():
        return False
    return admin_code.strip() == settings.ADMIN_SECRET_CODE.get_secret_value()


def register_user(
    db: Session,
    settings: "Settings",
    *,
    firstname: str,
    lastname: str,
    email: str,
    password: str,
    admin_code: str | None = None,
) -> User:
    """
    Create a user account.

    Raises ValidationFailedError for blank fields or a short password and
    ConflictError when the (case-normalized) email is already registered.
    The role is 'admin' only when admin_code matches ADMIN_SECRET_CODE.
    """
    firstname = (firstname or "").strip()
    lastname = (lastname or "").strip()
    email = normalize_email(email)
    if not firstname or not lastname or not email or not password:
        raise ValidationFailedError("All fields are required")
    if len(password) < PASSWORD_MIN_LEN:
        raise ValidationFailedError(
            f"Password must be at least {PASSWORD_MIN_LEN} characters"
        )

    existing = db.query(User).filter(User.email == email).first()
    if existing is not None:
        raise ConflictError("Email already exists")

    role = ROLE_ADMIN if _is_admin_code(admin_code, settings) else ROLE_USER
    user = User(
        firstname=firstname,
        lastname=lastname,
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # a concurrent registration won the unique index on email
        db.rollback()
        logger.info("Registration lost race on email", extra={"reason": "duplicate_email"})
        raise ConflictError("Email already exists") from None
    db.refresh(user)
    logger.info("User registered", extra={"user_id": user.id, "role": role})
    return user


def authenticate_user(db: Session, email: str, password: str) -> tuple[str, User]:
    """
    Check credentials and issue a session token.

    Returns (token, user). Raises ValidationFailedError for blank input and
    UnauthorizedError (one message for both cases) for an unknown email or a
    wrong password.
    """
    email = normalize_email(email)
    if not email or not password:
        raise ValidationFailedError("Email and password are required")

    user = db.query(User).filter(User.email == email).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Login failed", extra={"reason": "invalid_credentials"})
        raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

    token = create_access_token(user_id=user.id, email=user.email, role=user.role)
    logger.info("Login succeeded", extra={"user_id": user.id})
    return token, user


def list_users(db: Session) -> list[User]:
    """All users, newest first. Callers must restrict this to admins."""
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def get_user(db: Session, user_id: int) -> User:
    """Return the user with user_id or raise NotFoundError."""
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user
