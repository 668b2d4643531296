"""Analysis result types returned by the providers.

Decoupled from codescope_store so codescope_core has no dependency on the
store layer. The CLI converts an AnalysisResult to a ReviewDraft before
persisting.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReviewIssue:
    severity: str  # Critical | High | Medium | Low | Info
    category: str
    line_number: int  # 0 = not applicable
    description: str
    suggestion: str


@dataclass(frozen=True)
class AnalysisResult:
    report: str
    issues: list[ReviewIssue] = field(default_factory=list)
