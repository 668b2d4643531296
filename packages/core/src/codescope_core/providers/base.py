"""Base analyzer implementing the Template Method pattern.

All providers share the same analysis algorithm:
    analyze() → build_prompt()
              → _call_api()       ← only this differs per provider
              → _parse()

Subclasses implement three things only:
  - __init__: validate and store the SDK client
  - _call_api: make one raw API call and return the text response
  - _is_auth_error: recognise the SDK's "bad API key" failure

Everything else (prompt construction, JSON parsing, shape validation and the
mapping of failures to user-facing errors) lives here. One request per
analysis, no retry.
"""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod

from codescope_core.errors import AnalysisError, InvalidCredentialsError, MalformedResponseError, TransportError
from codescope_core.i18n import Language, translate
from codescope_core.models import AnalysisResult, ReviewIssue
from codescope_core.prompt import REVIEW_SCHEMA, SEVERITIES, build_prompt

logger = logging.getLogger(__name__)

_TEMPERATURE = 0.3
_MAX_TOKENS = 8192


class _ShapeError(ValueError):
    """The payload is valid JSON but not a review."""


class BaseAnalyzer(ABC):
    MODEL: str = ""
    TEMPERATURE: float = _TEMPERATURE
    MAX_TOKENS: int = _MAX_TOKENS

    def __init__(self, model: str | None = None):
        self.model = model or self.MODEL

    # ------------------------------------------------------------------ #
    # Public interface                                                     #
    # ------------------------------------------------------------------ #

    def analyze(self, code: str, source_language: str, display_language: str | Language) -> AnalysisResult:
        """Review `code` and return the report and issue list.

        Raises an AnalysisError subclass whose message is already translated
        to `display_language`. An empty model answer is not an error: it
        yields a fallback report and no issues.
        """
        display_language = Language.parse(display_language)
        prompt = build_prompt(source_language, code, display_language)

        try:
            raw = self._call_api(prompt, REVIEW_SCHEMA)
        except AnalysisError:
            raise
        except Exception as e:
            logger.error("%s API call failed (%s): %s", self.__class__.__name__, type(e).__name__, e)
            if self._is_auth_error(e):
                raise InvalidCredentialsError(display_language, detail=str(e)) from e
            raise TransportError(display_language, detail=str(e)) from e

        if not raw or not raw.strip():
            logger.warning("%s returned an empty response", self.__class__.__name__)
            return AnalysisResult(report=translate("emptyReportFallback", display_language), issues=[])

        try:
            return self._parse(raw)
        except (json.JSONDecodeError, _ShapeError) as e:
            logger.error("%s: could not parse response (%s): %s", self.__class__.__name__, e, raw[:200])
            raise MalformedResponseError(display_language, detail=str(e)) from e

    # ------------------------------------------------------------------ #
    # Abstract — implement in each provider                               #
    # ------------------------------------------------------------------ #

    @abstractmethod
    def _call_api(self, prompt: str, schema: dict) -> str | None:
        """Make a single API call constrained to `schema` and return the raw text.

        It should raise on failure; analyze() maps the exception to an
        AnalysisError. Returning None or "" means the model said nothing.
        """

    def _is_auth_error(self, error: Exception) -> bool:
        """Return True if `error` means the endpoint rejected the credentials."""
        return "api key not valid" in str(error).lower()

    # ------------------------------------------------------------------ #
    # Shared implementations                                               #
    # ------------------------------------------------------------------ #

    def _parse(self, raw: str) -> AnalysisResult:
        """Parse and validate the model's JSON answer.

        Missing `report`/`issues` degrade to "" and []; anything that cannot
        be read as a review raises json.JSONDecodeError or _ShapeError.
        """
        # Strip only an outer ```json ... ``` fence, never backticks inside values.
        cleaned = re.sub(r"^```(?:json)?\s*", "", raw.strip())
        cleaned = re.sub(r"\s*```$", "", cleaned.strip())
        payload = json.loads(cleaned)

        if not isinstance(payload, dict):
            raise _ShapeError(f"expected a JSON object, got {type(payload).__name__}")

        report = payload.get("report")
        if report is None:
            report = ""
        if not isinstance(report, str):
            raise _ShapeError("'report' must be a string")

        items = payload.get("issues")
        if items is None:
            items = []
        if not isinstance(items, list):
            raise _ShapeError("'issues' must be an array")

        return AnalysisResult(report=report, issues=[self._parse_issue(item) for item in items])

    @staticmethod
    def _parse_issue(item) -> ReviewIssue:
        if not isinstance(item, dict):
            raise _ShapeError("each issue must be an object")

        severity = item.get("severity")
        if severity not in SEVERITIES:
            raise _ShapeError(f"unknown severity {severity!r}")

        line_number = item.get("lineNumber", 0)
        if line_number is None:
            line_number = 0
        if isinstance(line_number, float) and line_number.is_integer():
            line_number = int(line_number)
        if isinstance(line_number, bool) or not isinstance(line_number, int) or line_number < 0:
            raise _ShapeError(f"invalid lineNumber {line_number!r}")

        fields = {}
        for name in ("category", "description", "suggestion"):
            value = item.get(name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise _ShapeError(f"'{name}' must be a string")
            fields[name] = value

        return ReviewIssue(severity=severity, line_number=line_number, **fields)
