"""Scores derived from a review's issue list.

Pure functions over anything with `severity` and `category` attributes, so
they work on both AnalysisResult issues and stored IssueRecords.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from codescope_core.prompt import SEVERITIES

SEVERITY_PENALTY = {"Critical": 10, "High": 5, "Medium": 2, "Low": 1, "Info": 0}
PERFORMANCE_PENALTY = 10
TREND_LENGTH = 10


def _category_contains(issue, needle: str) -> bool:
    return needle in (issue.category or "").lower()


def quality_score(issues: Iterable) -> int:
    return max(0, 100 - sum(SEVERITY_PENALTY.get(i.severity, 0) for i in issues))


def performance_score(issues: Iterable) -> int:
    hits = sum(1 for i in issues if _category_contains(i, "performance"))
    return max(0, 100 - PERFORMANCE_PENALTY * hits)


def vulnerability_count(issues: Iterable) -> int:
    return sum(1 for i in issues if _category_contains(i, "security"))


def severity_distribution(issues: Iterable) -> dict[str, int]:
    """Issue count per severity, in severity order (Critical first)."""
    counts = {s: 0 for s in SEVERITIES}
    for issue in issues:
        if issue.severity in counts:
            counts[issue.severity] += 1
    return counts


def quality_trend(reviews: Sequence, limit: int = TREND_LENGTH) -> list[tuple[str, int]]:
    """Quality score of the last `limit` reviews, oldest first.

    `reviews` is newest first, as the history store returns it. Points are
    labelled v1..vN in chronological order.
    """
    window = list(reversed(reviews))[-limit:] if limit > 0 else []
    return [(f"v{n}", quality_score(r.issues)) for n, r in enumerate(window, start=1)]
