"""
Session models: the logged-in user and the token that authenticates them.
"""

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class User:
    """
    Profile of the logged-in staff member. Display only.

    Attributes:
        name: Display name.
        email: Login email.
        extra: Any further fields the backend returned, kept verbatim.
    """

    name: str = ""
    email: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary."""
        return {**self.extra, "name": self.name, "email": self.email}

    @classmethod
    def from_dict(cls, data: dict | None) -> "User | None":
        """Deserialize from the backend's user payload."""
        if not data:
            return None
        extra = {k: v for k, v in data.items() if k not in {"name", "email"}}
        return cls(
            name=data.get("name") or "",
            email=data.get("email") or "",
            extra=extra,
        )

    def to_json(self) -> str:
        """Serialize for the browser's localStorage."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str | None) -> "User | None":
        """Deserialize a stored user; unreadable values count as no user."""
        if not text:
            return None
        try:
            data = json.loads(text)
        except ValueError:
            return None
        return cls.from_dict(data) if isinstance(data, dict) else None


@dataclass(frozen=True, slots=True)
class Session:
    """Snapshot of the stored credentials."""

    token: str | None = None
    user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)
