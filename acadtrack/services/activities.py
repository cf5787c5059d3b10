"""Activity store: CRUD over activities. Role checks happen in the API layer before these run."""

import logging

from sqlalchemy.orm import Session, joinedload

from acadtrack.core.errors import NotFoundError, ValidationFailedError
from acadtrack.models import Activity, User
from acadtrack.schemas.activity import DEFAULT_STATUS, ActivityCreate, ActivityUpdate

logger = logging.getLogger(__name__)

# Fields that may never be blank on a persisted activity.
REQUIRED_TEXT_FIELDS = ("title", "course")
TRIMMED_FIELDS = ("title", "course", "description", "grades")


def _clean(value: str | None) -> str:
    return (value or "").strip()


def create_activity(db: Session, acting_user_id: int, data: ActivityCreate) -> Activity:
    """
    Persist a new activity.

    The owner is data.user_id when given, otherwise the acting admin. String
    fields are trimmed; title and course must be non-blank after trimming.
    """
    title = _clean(data.title)
    course = _clean(data.course)
    if not title or not course or data.date is None:
        raise ValidationFailedError("Title, course and date are required")

    owner_id = data.user_id if data.user_id is not None else acting_user_id
    if db.get(User, owner_id) is None:
        raise ValidationFailedError(f"User {owner_id} does not exist")

    activity = Activity(
        user_id=owner_id,
        title=title,
        course=course,
        date=data.date,
        description=_clean(data.description),
        status=data.status or DEFAULT_STATUS,
        grades=_clean(data.grades),
    )
    db.add(activity)
    db.commit()
    db.refresh(activity)
    logger.info(
        "Activity created",
        extra={"activity_id": activity.id, "owner_id": owner_id, "created_by": acting_user_id},
    )
    return activity


def list_activities(db: Session) -> list[Activity]:
    """Every activity, with its owner joined in, latest due date first."""
    return (
        db.query(Activity)
        .options(joinedload(Activity.owner))
        .order_by(Activity.date.desc(), Activity.created_at.desc(), Activity.id.desc())
        .all()
    )


def get_activity(db: Session, activity_id: int) -> Activity:
    """Return one activity or raise NotFoundError."""
    activity = (
        db.query(Activity)
        .options(joinedload(Activity.owner))
        .filter(Activity.id == activity_id)
        .first()
    )
    if activity is None:
        raise NotFoundError("Activity not found")
    return activity


def update_activity(db: Session, activity_id: int, changes: ActivityUpdate) -> Activity:
    """
    Apply a partial update. Only fields present in the request are written.

    Raises NotFoundError for an unknown id and ValidationFailedError when a
    required field is cleared.
    """
    activity = get_activity(db, activity_id)
    updates = changes.model_dump(exclude_unset=True)

    for field in TRIMMED_FIELDS:
        if field in updates:
            updates[field] = _clean(updates[field])
    for field in REQUIRED_TEXT_FIELDS:
        if field in updates and not updates[field]:
            raise ValidationFailedError(f"{field.capitalize()} cannot be empty")
    if "date" in updates and updates["date"] is None:
        raise ValidationFailedError("Date cannot be empty")
    if "status" in updates and updates["status"] is None:
        del updates["status"]

    for field, value in updates.items():
        setattr(activity, field, value)
    db.commit()
    db.refresh(activity)
    logger.info(
        "Activity updated",
        extra={"activity_id": activity.id, "fields": ",".join(sorted(updates))},
    )
    return activity


def delete_activity(db: Session, activity_id: int) -> None:
    """Delete one activity; raises NotFoundError if it does not exist (including a second delete)."""
    activity = db.get(Activity, activity_id)
    if activity is None:
        raise NotFoundError("Activity not found")
    db.delete(activity)
    db.commit()
    logger.info("Activity deleted", extra={"activity_id": activity_id})
