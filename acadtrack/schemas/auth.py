"""Request/response schemas for auth endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from acadtrack.core.security import PASSWORD_MAX_LEN

Role = Literal["user", "admin"]


class RegisterRequest(BaseModel):
    """Registration form. Blank values and password length are checked by the credential store."""

    model_config = ConfigDict(populate_by_name=True)

    firstname: str = Field(..., max_length=255)
    lastname: str = Field(..., max_length=255)
    email: str = Field(..., max_length=320)
    password: str = Field(..., max_length=PASSWORD_MAX_LEN)
    admin_code: str | None = Field(
        default=None,
        alias="adminCode",
        max_length=255,
        description="Registration code that grants the admin role.",
    )


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., max_length=320)
    password: str = Field(..., max_length=PASSWORD_MAX_LEN)


class UserSummary(BaseModel):
    """Public view of a user. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    firstname: str
    lastname: str
    email: str
    role: Role
    created_at: datetime | None = None


class CurrentUser(BaseModel):
    """Authenticated user resolved from the bearer token, with the role read from the database."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: Role


class LoginData(BaseModel):
    """Payload of a successful login."""

    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'.")
    user: UserSummary


class UsersListData(BaseModel):
    """Payload of GET /auth/users/all (admin only)."""

    count: int
    users: list[UserSummary]
