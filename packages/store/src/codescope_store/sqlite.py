"""SQLiteStorage — single-file key-value storage.

Useful when the history should live next to a project (or on a path shared
between CI jobs) rather than in the per-user directory. Each entry is one row
of the ``kv`` table; a write replaces the whole value.
"""

from __future__ import annotations

import logging
import sqlite3

from codescope_store.base import BaseStorage, StorageError

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
    key     TEXT PRIMARY KEY,
    value   TEXT NOT NULL
);
"""


class SQLiteStorage(BaseStorage):
    """Stores entries in a local SQLite database file.

    The database file path defaults to `.codescope.db` in the current working
    directory. Configure via .codescope.yml: `storage_path: /path/to/codescope.db`.
    """

    def __init__(self, db_path: str = ".codescope.db"):
        try:
            self._conn = sqlite3.connect(db_path)
        except sqlite3.DatabaseError as e:
            raise StorageError(f"Cannot open {db_path}: {e}") from e
        try:
            self._conn.executescript(_SCHEMA)
            self._conn.commit()
        except sqlite3.DatabaseError as e:
            self._conn.close()
            raise StorageError(f"Cannot open {db_path} as a SQLite database: {e}") from e
        logger.debug("Opened SQLite storage at %s", db_path)

    def get_item(self, key: str) -> str | None:
        try:
            row = self._conn.execute("SELECT value FROM kv WHERE key=?", (key,)).fetchone()
        except sqlite3.DatabaseError as e:
            raise StorageError(f"Cannot read {key!r}: {e}") from e
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        self._conn.execute(
            "INSERT INTO kv (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value=excluded.value",
            (key, value),
        )
        self._conn.commit()

    def remove_item(self, key: str) -> None:
        self._conn.execute("DELETE FROM kv WHERE key=?", (key,))
        self._conn.commit()

    def close(self) -> None:
        self._conn.close()
