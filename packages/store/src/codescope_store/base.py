"""Abstract key-value storage interface.

HistoryStore and Preferences depend on BaseStorage, not on a concrete
backend, so backends (files, SQLite, memory) are swappable without touching
either of them. Values are opaque strings; callers own the serialization.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class StorageError(OSError):
    """A backend could not open or decode its stored data."""


class BaseStorage(ABC):
    """Durable string-to-string storage, one value per named entry."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the entry does not exist.

        Raises StorageError when the entry exists but cannot be read.
        """

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Create or replace an entry. Must be durable when it returns."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete an entry. Removing a missing entry is not an error."""

    def close(self) -> None:
        """Release any resources held by the storage (connections, file handles).

        Subclasses that need cleanup override this.
        Default is a no-op so callers can always call close() safely.
        """
