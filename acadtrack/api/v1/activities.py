"""Activity endpoints: any authenticated user can read; only admins can create, update or delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from acadtrack.api.v1.auth import get_current_user, require_admin
from acadtrack.core.database import get_db
from acadtrack.schemas.activity import ActivityCreate, ActivityDeleted, ActivityOut, ActivityUpdate
from acadtrack.schemas.auth import CurrentUser
from acadtrack.schemas.envelope import Envelope
from acadtrack.services import activities as activity_store

router = APIRouter()


@router.get("", response_model=Envelope[list[ActivityOut]])
def list_activities(
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> Envelope[list[ActivityOut]]:
    """All activities, shared across users, latest due date first."""
    activities = [ActivityOut.model_validate(a) for a in activity_store.list_activities(db)]
    return Envelope[list[ActivityOut]](
        message="Activities retrieved successfully",
        data=activities,
    )


@router.post("", response_model=Envelope[ActivityOut], status_code=status.HTTP_201_CREATED)
@router.post("/create", response_model=Envelope[ActivityOut], status_code=status.HTTP_201_CREATED)
def create_activity(
    body: ActivityCreate,
    admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Envelope[ActivityOut]:
    """
    Create an activity (admin only).

    Set userId to assign it to another user; otherwise the admin owns it.
    A non-admin gets 403 even for a schema-invalid body, but a body that is
    not JSON at all is rejected with 400 before the role check runs.
    """
    activity = activity_store.create_activity(db, admin.id, body)
    return Envelope[ActivityOut](
        message="Activity created",
        data=ActivityOut.model_validate(activity),
    )


@router.get("/{activity_id}", response_model=Envelope[ActivityOut])
def get_activity(
    activity_id: int,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> Envelope[ActivityOut]:
    activity = activity_store.get_activity(db, activity_id)
    return Envelope[ActivityOut](
        message="Activity retrieved successfully",
        data=ActivityOut.model_validate(activity),
    )


@router.put("/{activity_id}", response_model=Envelope[ActivityOut])
def update_activity(
    activity_id: int,
    body: ActivityUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Envelope[ActivityOut]:
    """Partially update an activity (admin only). Omitted fields keep their values."""
    activity = activity_store.update_activity(db, activity_id, body)
    return Envelope[ActivityOut](
        message="Activity updated",
        data=ActivityOut.model_validate(activity),
    )


@router.delete("/{activity_id}", response_model=Envelope[ActivityDeleted])
def delete_activity(
    activity_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Envelope[ActivityDeleted]:
    """Delete an activity (admin only). Deleting a missing id returns 404."""
    activity_store.delete_activity(db, activity_id)
    return Envelope[ActivityDeleted](
        message="Activity deleted",
        data=ActivityDeleted(id=activity_id),
    )
