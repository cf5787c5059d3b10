"""
File-backed client session: the token and user summary kept between runs.

The file is a cache of what the server said at login; it is never trusted for
authorization, which the server re-checks on every request.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"


class SessionStore:
    """Persist {token, user} as JSON at path, always with 0600 permissions."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get_token(self) -> str | None:
        token = self._read().get(TOKEN_KEY)
        return token if isinstance(token, str) and token else None

    def get_user(self) -> dict[str, Any] | None:
        user = self._read().get(USER_KEY)
        return user if isinstance(user, dict) else None

    def save(self, token: str, user: dict[str, Any]) -> None:
        """Write token and user, replacing any previous session.

        The data goes to a 0600 temp file in the same directory which is then
        renamed over path, so the token is never readable by other users.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({TOKEN_KEY: token, USER_KEY: user}, f, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
        logger.debug("Session saved to %s", self.path)

    def clear(self) -> None:
        """Remove the persisted session; a missing file is fine."""
        self.path.unlink(missing_ok=True)
        logger.debug("Session cleared at %s", self.path)
