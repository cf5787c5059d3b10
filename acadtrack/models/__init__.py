"""SQLAlchemy ORM models."""

from acadtrack.models.activity import Activity
from acadtrack.models.base import Base
from acadtrack.models.user import User

__all__ = ["Activity", "Base", "User"]
