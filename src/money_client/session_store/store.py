"""
Session store implementations.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    """What the API client needs from session storage."""

    def get_access_token(self) -> str | None: ...

    def clear(self) -> None: ...

    def flush(self) -> None: ...


@dataclass
class Identity:
    """Authenticated identity as returned by POST /identity/auth."""

    access_token: str
    user: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api_response(cls, data: dict) -> "Identity":
        """Create from the `result` of the auth response."""
        user = {k: v for k, v in data.items() if k != "accessToken"}
        return cls(access_token=data.get("accessToken", ""), user=user)

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the wire shape."""
        return {**self.user, "accessToken": self.access_token}


class MemorySessionStore:
    """Session store kept in process memory only."""

    def __init__(self, identity: Identity | None = None):
        self.identity = identity
        self.flush_count = 0

    def get_access_token(self) -> str | None:
        if self.identity is None:
            return None
        return self.identity.access_token or None

    def clear(self) -> None:
        self.identity = None

    def flush(self) -> None:
        self.flush_count += 1


class FileSessionStore(MemorySessionStore):
    """
    Session store persisted as a JSON file.

    The file holds either the identity object or `null`. Changes to
    `identity` stay in memory until `flush()` writes them out.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(identity=self._load())

    def _load(self) -> Identity | None:
        if not self.path.exists():
            return None

        raw = self.path.read_text(encoding="utf-8").strip()
        if not raw:
            return None

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return None

        if not isinstance(data, dict) or not data:
            return None
        return Identity.from_api_response(data)

    def flush(self) -> None:
        """Write the current identity (or null) to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = self.identity.to_dict() if self.identity else None
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        super().flush()
        logger.debug(f"Session flushed to {self.path}")
