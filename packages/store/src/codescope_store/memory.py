"""In-process storage — used when persistence is disabled (`storage: memory`).

Everything is kept in a dict and lost when the process exits. Using a
MemoryStorage rather than None lets HistoryStore and Preferences always go
through the same code path.
"""

from __future__ import annotations

from codescope_store.base import BaseStorage


class MemoryStorage(BaseStorage):
    """Dict-backed storage with zero configuration."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
