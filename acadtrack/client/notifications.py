"""Transient user-facing notices (success, error, info, warning) that expire after a duration."""

import itertools
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, get_args

from acadtrack.client.api import ApiResult

NotificationKind = Literal["success", "error", "info", "warning"]

NOTIFICATION_KINDS: frozenset[str] = frozenset(get_args(NotificationKind))
DEFAULT_DURATION_SEC = 3.0


@dataclass(frozen=True)
class Notification:
    id: int
    message: str
    kind: NotificationKind
    # None means the notice stays until removed
    expires_at: float | None


class Notifier:
    """
    Queue of notices. Expired notices are dropped lazily when active() is read.

    clock is injectable for tests; it must be monotonic.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._ids = itertools.count(1)
        self._items: dict[int, Notification] = {}

    def show(
        self,
        message: str,
        kind: NotificationKind = "info",
        duration: float = DEFAULT_DURATION_SEC,
    ) -> int:
        """Add a notice; duration 0 keeps it until remove() is called. Returns its id."""
        if kind not in NOTIFICATION_KINDS:
            raise ValueError(f"kind must be one of {sorted(NOTIFICATION_KINDS)}, got {kind!r}")
        if duration < 0:
            raise ValueError("duration must be >= 0")
        notification = Notification(
            id=next(self._ids),
            message=message,
            kind=kind,
            expires_at=self._clock() + duration if duration > 0 else None,
        )
        self._items[notification.id] = notification
        return notification.id

    def success(self, message: str, duration: float = DEFAULT_DURATION_SEC) -> int:
        return self.show(message, "success", duration)

    def error(self, message: str, duration: float = DEFAULT_DURATION_SEC) -> int:
        return self.show(message, "error", duration)

    def info(self, message: str, duration: float = DEFAULT_DURATION_SEC) -> int:
        return self.show(message, "info", duration)

    def warning(self, message: str, duration: float = DEFAULT_DURATION_SEC) -> int:
        return self.show(message, "warning", duration)

    def remove(self, notification_id: int) -> None:
        self._items.pop(notification_id, None)

    def active(self) -> list[Notification]:
        """Unexpired notices, oldest first."""
        now = self._clock()
        expired = [
            nid for nid, n in self._items.items() if n.expires_at is not None and n.expires_at <= now
        ]
        for nid in expired:
            del self._items[nid]
        return list(self._items.values())

    def notify_result(self, result: ApiResult, success_message: str | None = None) -> ApiResult:
        """Show an error notice for a failed result, or success_message for a successful one."""
        if not result.success:
            self.error(result.error)
        elif success_message:
            self.success(success_message)
        return result
