"""Pydantic request/response schemas."""

from acadtrack.schemas.activity import (
    ActivityCreate,
    ActivityDeleted,
    ActivityOut,
    ActivityOwner,
    ActivityStatus,
    ActivityUpdate,
)
from acadtrack.schemas.auth import (
    CurrentUser,
    LoginData,
    LoginRequest,
    RegisterRequest,
    UserSummary,
    UsersListData,
)
from acadtrack.schemas.envelope import Envelope, ErrorEnvelope
from acadtrack.schemas.health import HealthResponse

__all__ = [
    "ActivityCreate",
    "ActivityDeleted",
    "ActivityOut",
    "ActivityOwner",
    "ActivityStatus",
    "ActivityUpdate",
    "CurrentUser",
    "Envelope",
    "ErrorEnvelope",
    "HealthResponse",
    "LoginData",
    "LoginRequest",
    "RegisterRequest",
    "UserSummary",
    "UsersListData",
]
