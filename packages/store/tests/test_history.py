"""Tests for HistoryStore."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest

from codescope_store.file import FileStorage
from codescope_store.history import HISTORY_KEY, HistoryStore
from codescope_store.memory import MemoryStorage
from codescope_store.models import IssueRecord, ReviewDraft, record_to_dict


def _make_draft(language="python", n_issues=1, severity="Critical"):
    return ReviewDraft(
        language=language,
        code="query = 'SELECT * FROM t WHERE id=' + user_id",
        report="## Review\nSQL injection.",
        issues=tuple(
            IssueRecord(
                severity=severity,
                category="Security",
                line_number=i + 1,
                description="Unsanitized input in SQL",
                suggestion="Use bound parameters.",
            )
            for i in range(n_issues)
        ),
    )


class TestAppend:
    def test_append_assigns_id_and_timestamp(self):
        store = HistoryStore(MemoryStorage())
        record = store.append(_make_draft())
        assert record.id
        assert isinstance(record.timestamp, int)
        assert record.timestamp > 1_600_000_000_000  # epoch millis, not seconds
        assert record.language == "python"
        assert len(record.issues) == 1

    def test_newest_first(self):
        store = HistoryStore(MemoryStorage())
        first = store.append(_make_draft(language="go"))
        second = store.append(_make_draft(language="rust"))
        assert [r.id for r in store.reviews] == [second.id, first.id]

    def test_n_appends_give_n_unique_entries(self):
        store = HistoryStore(MemoryStorage())
        ids = [store.append(_make_draft()).id for _ in range(50)]
        reviews = store.reviews
        assert len(reviews) == 50
        assert len({r.id for r in reviews}) == 50
        assert [r.id for r in reviews] == list(reversed(ids))

    def test_id_collision_is_regenerated(self, mocker):
        mocker.patch("codescope_store.history._new_id", side_effect=["same", "same", "other"])
        store = HistoryStore(MemoryStorage())
        assert store.append(_make_draft()).id == "same"
        assert store.append(_make_draft()).id == "other"

    def test_write_through(self):
        storage = MemoryStorage()
        store = HistoryStore(storage)
        record = store.append(_make_draft())

        persisted = json.loads(storage.get_item(HISTORY_KEY))
        assert persisted == [record_to_dict(record)]

    def test_persisted_layout(self):
        storage = MemoryStorage()
        HistoryStore(storage).append(_make_draft())
        entry = json.loads(storage.get_item(HISTORY_KEY))[0]
        assert set(entry) == {"id", "timestamp", "language", "code", "report", "issues"}
        assert set(entry["issues"][0]) == {"severity", "category", "lineNumber", "description", "suggestion"}

    def test_failed_write_leaves_history_unchanged(self):
        storage = MagicMock()
        storage.get_item.return_value = None
        storage.set_item.side_effect = OSError("disk full")
        store = HistoryStore(storage)

        with pytest.raises(OSError):
            store.append(_make_draft())
        assert store.reviews == []

    def test_reviews_returns_a_copy(self):
        store = HistoryStore(MemoryStorage())
        store.append(_make_draft())
        store.reviews.clear()
        assert len(store.reviews) == 1


class TestLoad:
    def test_missing_entry_gives_empty_history(self):
        assert HistoryStore(MemoryStorage()).reviews == []

    def test_round_trip(self, tmp_path):
        store = HistoryStore(FileStorage(tmp_path))
        store.append(_make_draft(language="java", n_issues=3, severity="Medium"))
        store.append(_make_draft(language="php", n_issues=0))
        before = store.reviews

        reloaded = HistoryStore(FileStorage(tmp_path)).reviews

        assert reloaded == before
        assert [r.id for r in reloaded] == [r.id for r in before]
        assert reloaded[1].issues == before[1].issues

    @pytest.mark.parametrize(
        "raw",
        [
            "{not json",
            '{"id": "x"}',
            '"just a string"',
            '[{"timestamp": 1}]',
            '[{"id": "a", "timestamp": "yesterday"}]',
            '[{"id": "a", "timestamp": 1, "issues": [{"severity": "Blocker"}]}]',
            "[1, 2, 3]",
            '[{"id": "a", "timestamp": 1, "issues": [{"severity": "High", "category": 5}]}]',
            '[{"id": "a", "timestamp": 1, "issues": [{"severity": "High", "lineNumber": "7"}]}]',
            '[{"id": "a", "timestamp": 1, "issues": [{"severity": "High", "lineNumber": -1}]}]',
            '[{"id": "a", "timestamp": 1, "issues": [{"severity": "High", "lineNumber": true}]}]',
            '[{"id": "a", "timestamp": 1, "issues": [{"severity": "Low", "suggestion": ["x"]}]}]',
            '[{"id": "a", "timestamp": 1, "issues": ["Critical"]}]',
            '[{"id": "a", "timestamp": 1, "issues": {"severity": "Low"}}]',
            '[{"id": "a", "timestamp": 1, "language": 42}]',
            '[{"id": "a", "timestamp": 1, "report": {"text": "x"}}]',
            '[{"id": "a", "timestamp": 100000000000000000000}]',
            '[{"id": "a", "timestamp": -5}]',
        ],
    )
    def test_corrupt_entry_gives_empty_history(self, raw, caplog):
        storage = MemoryStorage({HISTORY_KEY: raw})
        with caplog.at_level("WARNING"):
            store = HistoryStore(storage)
        assert store.reviews == []
        assert "review history" in caplog.text

    def test_corrupt_entry_is_replaced_on_next_append(self):
        storage = MemoryStorage({HISTORY_KEY: "{not json"})
        store = HistoryStore(storage)
        store.append(_make_draft())
        assert len(json.loads(storage.get_item(HISTORY_KEY))) == 1

    def test_invalid_utf8_file_gives_empty_history(self, tmp_path, caplog):
        (tmp_path / HISTORY_KEY).write_bytes(b"\xff\xfe[not utf8")
        with caplog.at_level("WARNING"):
            store = HistoryStore(FileStorage(tmp_path))
        assert store.reviews == []
        assert "review history" in caplog.text

    def test_integral_float_line_number_accepted(self):
        entry = {"id": "a", "timestamp": 1, "issues": [{"severity": "Low", "lineNumber": 4.0}]}
        store = HistoryStore(MemoryStorage({HISTORY_KEY: json.dumps([entry])}))
        assert store.reviews[0].issues[0].line_number == 4

    def test_missing_optional_fields_default_to_empty(self):
        store = HistoryStore(MemoryStorage({HISTORY_KEY: '[{"id": "a", "timestamp": 1}]'}))
        record = store.reviews[0]
        assert (record.language, record.code, record.report, record.issues) == ("", "", "", ())

    def test_unreadable_storage_gives_empty_history(self):
        storage = MagicMock()
        storage.get_item.side_effect = PermissionError("denied")
        assert HistoryStore(storage).reviews == []

    def test_duplicate_ids_keep_first(self):
        entry = {"id": "dup", "timestamp": 1, "language": "go", "code": "", "report": "new", "issues": []}
        older = {**entry, "report": "old"}
        store = HistoryStore(MemoryStorage({HISTORY_KEY: json.dumps([entry, older])}))
        assert len(store.reviews) == 1
        assert store.reviews[0].report == "new"


class TestGet:
    def test_get_existing(self):
        store = HistoryStore(MemoryStorage())
        record = store.append(_make_draft())
        assert store.get(record.id) == record

    def test_get_missing(self):
        assert HistoryStore(MemoryStorage()).get("nope") is None


class TestSubscribe:
    def test_listener_receives_snapshot_after_append(self):
        storage = MemoryStorage()
        store = HistoryStore(storage)
        seen = []

        def listener(snapshot):
            # The snapshot is already durable when listeners run.
            seen.append((len(snapshot), storage.get_item(HISTORY_KEY) is not None))

        store.subscribe(listener)
        store.append(_make_draft())
        store.append(_make_draft())
        assert seen == [(1, True), (2, True)]

    def test_unsubscribe(self):
        store = HistoryStore(MemoryStorage())
        listener = MagicMock()
        unsubscribe = store.subscribe(listener)
        unsubscribe()
        unsubscribe()  # idempotent
        store.append(_make_draft())
        listener.assert_not_called()

    def test_listener_not_called_when_write_fails(self):
        storage = MagicMock()
        storage.get_item.return_value = None
        storage.set_item.side_effect = OSError("disk full")
        store = HistoryStore(storage)
        listener = MagicMock()
        store.subscribe(listener)

        with pytest.raises(OSError):
            store.append(_make_draft())
        listener.assert_not_called()
