"""
Key/value storage backends for session state.

The authoritative copy of a browser's session lives in that browser's
localStorage; the server keeps a per-client working copy in a
MemoryStorage, refreshed from the browser before every page load and
screen action.
"""

from typing import Any, Protocol


class Storage(Protocol):
    """Minimal key/value contract shared by all storage backends."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStorage:
    """Dictionary-backed storage that lives as long as its owner."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
