"""HistoryStore — append-only, newest-first review history.

Data format: a single storage entry named `codeReviewHistory` holding a JSON
array of review objects, newest first. Every append rewrites the whole array
(write-through); there is no delta format, compaction or size cap, since the
history only grows when a user runs a review.
"""

from __future__ import annotations

import json
import logging
import random
import time
from datetime import datetime, timezone
from typing import Callable

from codescope_store.base import BaseStorage
from codescope_store.models import ReviewDraft, ReviewRecord, record_from_dict, record_to_dict

logger = logging.getLogger(__name__)

HISTORY_KEY = "codeReviewHistory"

Listener = Callable[[list[ReviewRecord]], None]


def _new_id() -> str:
    # Time alone collides when two reviews land in the same microsecond.
    return f"{datetime.now(timezone.utc).isoformat()}{random.random()}"


class HistoryStore:
    """In-memory review history mirrored to a storage entry.

    The snapshot is read once at construction. After that the in-memory list
    is authoritative and every mutation is persisted before append() returns.
    The store has a single owner per process; concurrent writers are not
    coordinated and the last snapshot written wins.
    """

    def __init__(self, storage: BaseStorage, key: str = HISTORY_KEY):
        self._storage = storage
        self._key = key
        self._listeners: list[Listener] = []
        self._reviews: list[ReviewRecord] = self.load()

    @property
    def reviews(self) -> list[ReviewRecord]:
        """Current history, newest first. Returns a copy."""
        return list(self._reviews)

    def load(self) -> list[ReviewRecord]:
        """Read the persisted history, or [] if it is missing or corrupt.

        Never raises: an unreadable history must not block startup. The
        corrupt entry is left in place and is overwritten by the next append.
        """
        try:
            raw = self._storage.get_item(self._key)
        except OSError as e:
            logger.warning("Could not read review history (%s): %s", type(e).__name__, e)
            return []
        if raw is None:
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            records = [record_from_dict(d) for d in data]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Failed to parse review history, starting empty: %s", e)
            return []

        seen: set[str] = set()
        unique = []
        for record in records:
            if record.id in seen:
                logger.warning("Dropping duplicate review id %s from history", record.id)
                continue
            seen.add(record.id)
            unique.append(record)
        return unique

    def append(self, draft: ReviewDraft) -> ReviewRecord:
        """Stamp a draft with a fresh id and timestamp, prepend it and persist."""
        existing = {r.id for r in self._reviews}
        review_id = _new_id()
        while review_id in existing:
            review_id = _new_id()

        record = ReviewRecord(
            id=review_id,
            timestamp=int(time.time() * 1000),
            language=draft.language,
            code=draft.code,
            report=draft.report,
            issues=tuple(draft.issues),
        )
        reviews = [record, *self._reviews]
        self._persist(reviews)
        self._reviews = reviews
        self._notify()
        return record

    def get(self, review_id: str) -> ReviewRecord | None:
        for record in self._reviews:
            if record.id == review_id:
                return record
        return None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` with the new snapshot after every persisted mutation.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _persist(self, reviews: list[ReviewRecord]) -> None:
        payload = json.dumps([record_to_dict(r) for r in reviews], ensure_ascii=False)
        self._storage.set_item(self._key, payload)
        logger.debug("Persisted %d review(s) to %s", len(reviews), self._key)

    def _notify(self) -> None:
        snapshot = self.reviews
        for listener in list(self._listeners):
            listener(snapshot)

