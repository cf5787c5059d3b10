"""Register/login endpoints and auth dependencies (get_current_user, require_roles, require_admin)."""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from acadtrack.core.config import get_settings
from acadtrack.core.database import get_db
from acadtrack.core.security import TokenExpiredError, TokenInvalidError, verify_access_token
from acadtrack.models.user import ROLE_ADMIN, User
from acadtrack.schemas.auth import (
    CurrentUser,
    LoginData,
    LoginRequest,
    RegisterRequest,
    UserSummary,
    UsersListData,
)
from acadtrack.schemas.envelope import Envelope
from acadtrack.services import users as user_store

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


def _unauthenticated(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the current user.

    The user row is re-read on every request, so deleted accounts are rejected
    and the role reflects the database rather than the token.
    """
    if credentials is None:
        raise _unauthenticated("Not authorized, token missing")
    try:
        identity = verify_access_token(credentials.credentials)
    except TokenExpiredError:
        raise _unauthenticated("Not authorized, token expired")
    except TokenInvalidError:
        raise _unauthenticated("Not authorized, invalid token")

    user = db.get(User, identity.user_id)
    if user is None:
        raise _unauthenticated("User not found")
    return CurrentUser(id=user.id, email=user.email, role=user.role)


def require_roles(*roles: str) -> Callable[..., CurrentUser]:
    """Build a dependency that lets through only users whose role is in roles. Raises 403 otherwise."""
    allowed = frozenset(roles)

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if current_user.role not in allowed:
            logger.warning(
                "Forbidden",
                extra={"user_id": current_user.id, "role": current_user.role},
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=(
                    f"Access denied. Required role: {' or '.join(sorted(allowed))}. "
                    f"Your role: {current_user.role}"
                ),
            )
        return current_user

    return dependency


require_admin = require_roles(ROLE_ADMIN)


@router.post(
    "/register",
    response_model=Envelope[UserSummary],
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> Envelope[UserSummary]:
    """Create an account. Supplying the admin registration code creates an admin."""
    user = user_store.register_user(
        db,
        get_settings(),
        firstname=body.firstname,
        lastname=body.lastname,
        email=body.email,
        password=body.password,
        admin_code=body.admin_code,
    )
    if user.role == ROLE_ADMIN:
        message = "User registered successfully. Admin account created!"
    else:
        message = "User registered successfully. Please log in."
    return Envelope[UserSummary](message=message, data=UserSummary.model_validate(user))


@router.post("/login", response_model=Envelope[LoginData])
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> Envelope[LoginData]:
    """
    Authenticate with email and password; returns a JWT and the user summary.
    Include the token in the Authorization header as: Bearer <token>
    """
    token, user = user_store.authenticate_user(db, body.email, body.password)
    return Envelope[LoginData](
        message="Login successful",
        data=LoginData(token=token, user=UserSummary.model_validate(user)),
    )


@router.get("/users/all", response_model=Envelope[UsersListData])
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Envelope[UsersListData]:
    """List all users, newest first (admin only)."""
    users = [UserSummary.model_validate(u) for u in user_store.list_users(db)]
    return Envelope[UsersListData](
        message="Users retrieved successfully",
        data=UsersListData(count=len(users), users=users),
    )


@router.get("/profile", response_model=Envelope[UserSummary])
def get_profile(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> Envelope[UserSummary]:
    """Return the authenticated user's own profile."""
    user = user_store.get_user(db, current_user.id)
    return Envelope[UserSummary](
        message="Profile retrieved successfully",
        data=UserSummary.model_validate(user),
    )
