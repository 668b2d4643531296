"""Persisted user preferences: display language and colour theme.

Both live in the same storage as the review history, one entry each. A
missing or unrecognised value reads back as the default; only writes validate.
"""

from __future__ import annotations

import logging

from codescope_store.base import BaseStorage

logger = logging.getLogger(__name__)

LANGUAGE_KEY = "language"
THEME_KEY = "theme"

LANGUAGES = ("en", "zh-tw")
THEMES = ("light", "dark", "system")

DEFAULT_LANGUAGE = "en"
DEFAULT_THEME = "system"


class Preferences:
    def __init__(self, storage: BaseStorage):
        self._storage = storage

    def _read(self, key: str, allowed: tuple[str, ...], default: str) -> str:
        try:
            value = self._storage.get_item(key)
        except OSError as e:
            logger.warning("Could not read preference %r: %s", key, e)
            return default
        if value is None:
            return default
        value = value.strip()
        if value not in allowed:
            logger.warning("Ignoring unknown %s preference %r, using %r", key, value, default)
            return default
        return value

    def _write(self, key: str, value: str, allowed: tuple[str, ...]) -> None:
        if value not in allowed:
            raise ValueError(f"Unknown {key} {value!r}. Choose one of: {', '.join(allowed)}")
        self._storage.set_item(key, value)

    @property
    def language(self) -> str:
        return self._read(LANGUAGE_KEY, LANGUAGES, DEFAULT_LANGUAGE)

    @language.setter
    def language(self, value: str) -> None:
        self._write(LANGUAGE_KEY, value, LANGUAGES)

    @property
    def theme(self) -> str:
        return self._read(THEME_KEY, THEMES, DEFAULT_THEME)

    @theme.setter
    def theme(self, value: str) -> None:
        self._write(THEME_KEY, value, THEMES)
