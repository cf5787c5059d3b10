"""Core app configuration and database."""

from acadtrack.core.config import get_settings, settings
from acadtrack.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
