"""Client-side service layer: HTTP wrapper, persisted session, auth state and notifications."""

from acadtrack.client.api import ApiClient, ApiFailure, ApiResult, ApiSuccess
from acadtrack.client.config import ClientSettings, get_client_settings
from acadtrack.client.context import AuthContext
from acadtrack.client.notifications import Notification, Notifier
from acadtrack.client.session import SessionStore

__all__ = [
    "ApiClient",
    "ApiFailure",
    "ApiResult",
    "ApiSuccess",
    "AuthContext",
    "ClientSettings",
    "Notification",
    "Notifier",
    "SessionStore",
    "get_client_settings",
]
