"""Pydantic schemas for activity create/update requests and responses."""

from datetime import date as Date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ActivityStatus = Literal["Pending", "In Progress", "Completed"]

DEFAULT_STATUS: ActivityStatus = "Pending"


class ActivityCreate(BaseModel):
    """Body for creating an activity. user_id assigns the activity to another user."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(..., max_length=255)
    course: str = Field(..., max_length=255)
    date: Date
    description: str = Field(default="", max_length=5000)
    status: ActivityStatus = DEFAULT_STATUS
    grades: str = Field(default="", max_length=64)
    user_id: int | None = Field(default=None, alias="userId")


class ActivityUpdate(BaseModel):
    """Partial update: only fields present in the request body are applied."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, max_length=255)
    course: str | None = Field(default=None, max_length=255)
    date: Date | None = None
    description: str | None = Field(default=None, max_length=5000)
    status: ActivityStatus | None = None
    grades: str | None = Field(default=None, max_length=64)


class ActivityOwner(BaseModel):
    """Owner details joined into activity responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    firstname: str
    lastname: str
    email: str


class ActivityOut(BaseModel):
    """Activity as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    owner: ActivityOwner | None = None
    title: str
    description: str
    course: str
    date: Date
    status: ActivityStatus
    grades: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ActivityDeleted(BaseModel):
    """Acknowledgement payload for DELETE."""

    id: int
