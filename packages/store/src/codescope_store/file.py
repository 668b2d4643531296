"""FileStorage — the default per-user storage.

Every entry is a plain file named after its key inside one directory
(``~/.codescope`` unless configured otherwise). Writes go to a temporary file
in the same directory and are then moved over the old one, so a crash never
leaves a half-written history behind.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path

from codescope_store.base import BaseStorage, StorageError

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY = Path.home() / ".codescope"

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileStorage(BaseStorage):
    """Stores each entry in ``<directory>/<key>``.

    The directory is created lazily on the first write so that read-only
    commands (history, dashboard) never create it.
    """

    def __init__(self, directory: str | Path = DEFAULT_DIRECTORY):
        self._dir = Path(directory).expanduser()

    @property
    def directory(self) -> Path:
        return self._dir

    def _path(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._dir / key

    def get_item(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise StorageError(f"{path} is not valid UTF-8: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        self._dir.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d bytes to %s", len(value), path)

    def remove_item(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
