"""Process-wide login state mirrored from the persisted session."""

import logging
from collections.abc import Callable
from typing import Any

from acadtrack.client.api import ApiResult
from acadtrack.client.session import SessionStore

logger = logging.getLogger(__name__)

Listener = Callable[["AuthContext"], None]


class AuthContext:
    """
    Holds {token, user} for the running client and notifies subscribers on change.

    Call initialize() once at startup: with hydrate=True a complete persisted
    session (token and user) is restored, anything else resets to logged out.
    login() and logout() are the only mutators. There is no token refresh; an
    expired token shows up as a 401 on the next protected call.
    """

    def __init__(self, session: SessionStore, hydrate: bool = True) -> None:
        self._session = session
        self._hydrate = hydrate
        self._token: str | None = None
        self._user: dict[str, Any] | None = None
        self._loading = True
        self._listeners: list[Listener] = []

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def user(self) -> dict[str, Any] | None:
        return self._user

    @property
    def logged_in(self) -> bool:
        return self._token is not None and self._user is not None

    @property
    def loading(self) -> bool:
        """True until initialize() has run."""
        return self._loading

    @property
    def is_admin(self) -> bool:
        return self._user is not None and self._user.get("role") == "admin"

    def initialize(self) -> None:
        token = self._session.get_token() if self._hydrate else None
        user = self._session.get_user() if self._hydrate else None
        if token and user:
            self._token, self._user = token, user
        else:
            self._token, self._user = None, None
            self._session.clear()
        self._loading = False
        logger.debug("Auth context initialized", extra={"logged_in": self.logged_in})
        self._notify()

    def login(self, token: str, user: dict[str, Any]) -> None:
        """Record an already-authenticated session. Makes no network call."""
        if not token:
            raise ValueError("token must be non-empty")
        self._session.save(token, user)
        self._token, self._user = token, dict(user)
        self._notify()

    def login_with(self, result: ApiResult) -> bool:
        """Apply a login ApiResult; returns False (state untouched) when it is a failure."""
        if not result.success or not isinstance(result.data, dict):
            return False
        token = result.data.get("token")
        user = result.data.get("user")
        if not token or not isinstance(user, dict):
            return False
        self.login(token, user)
        return True

    def logout(self) -> None:
        self._session.clear()
        self._token, self._user = None, None
        self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register listener for state changes; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
