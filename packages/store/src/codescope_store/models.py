"""Review history data models.

Decoupled from codescope_core so the store layer can be used independently
and codescope_core has no knowledge of persistence concerns.
"""

from __future__ import annotations

from dataclasses import dataclass, field

SEVERITIES = ("Critical", "High", "Medium", "Low", "Info")

# 9999-12-30T00:00:00Z in epoch millis; later values cannot be shown as a local date.
MAX_TIMESTAMP = 253402128000000


@dataclass(frozen=True)
class IssueRecord:
    """A single flagged problem persisted as part of a review."""

    severity: str  # one of SEVERITIES
    category: str
    line_number: int  # 0 = not applicable
    description: str
    suggestion: str


@dataclass(frozen=True)
class ReviewDraft:
    """A completed analysis that has not been assigned an id yet.

    The CLI maps an AnalysisResult to a ReviewDraft; HistoryStore.append()
    turns it into a ReviewRecord.
    """

    language: str
    code: str
    report: str
    issues: tuple[IssueRecord, ...] = ()


@dataclass(frozen=True)
class ReviewRecord:
    """One archived review. Never mutated once created."""

    id: str
    timestamp: int  # epoch milliseconds
    language: str
    code: str
    report: str
    issues: tuple[IssueRecord, ...] = field(default_factory=tuple)


def issue_to_dict(issue: IssueRecord) -> dict:
    return {
        "severity": issue.severity,
        "category": issue.category,
        "lineNumber": issue.line_number,
        "description": issue.description,
        "suggestion": issue.suggestion,
    }


def record_to_dict(record: ReviewRecord) -> dict:
    return {
        "id": record.id,
        "timestamp": record.timestamp,
        "language": record.language,
        "code": record.code,
        "report": record.report,
        "issues": [issue_to_dict(i) for i in record.issues],
    }


def _string(d: dict, key: str) -> str:
    value = d.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def _line_number(value) -> int:
    if value is None:
        return 0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"invalid lineNumber: {value!r}")
    return value


def issue_from_dict(d: dict) -> IssueRecord:
    if not isinstance(d, dict):
        raise ValueError(f"issue must be an object, got {type(d).__name__}")
    severity = d.get("severity")
    if severity not in SEVERITIES:
        raise ValueError(f"invalid severity: {severity!r}")
    return IssueRecord(
        severity=severity,
        category=_string(d, "category"),
        line_number=_line_number(d.get("lineNumber")),
        description=_string(d, "description"),
        suggestion=_string(d, "suggestion"),
    )


def record_from_dict(d: dict) -> ReviewRecord:
    """Rebuild a ReviewRecord from its persisted form.

    Raises ValueError (or KeyError/TypeError) when the entry is not a review;
    HistoryStore treats any of those as a corrupt snapshot.
    """
    review_id = d["id"]
    timestamp = d["timestamp"]
    if not isinstance(review_id, str) or not review_id:
        raise ValueError(f"invalid review id: {review_id!r}")
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise ValueError(f"invalid timestamp: {timestamp!r}")
    if not 0 <= timestamp <= MAX_TIMESTAMP:
        raise ValueError(f"timestamp out of range: {timestamp!r}")

    issues = d.get("issues")
    if issues is None:
        issues = []
    if not isinstance(issues, list):
        raise ValueError(f"'issues' must be an array, got {type(issues).__name__}")

    return ReviewRecord(
        id=review_id,
        timestamp=timestamp,
        language=_string(d, "language"),
        code=_string(d, "code"),
        report=_string(d, "report"),
        issues=tuple(issue_from_dict(i) for i in issues),
    )
