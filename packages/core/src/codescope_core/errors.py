"""Analysis failures surfaced to the user.

Each error carries a message already translated to the display language, so
the CLI can print str(error) without knowing which failure occurred.
"""

from __future__ import annotations

from codescope_core.i18n import Language, translate


class AnalysisError(Exception):
    category = "transport"
    message_key = "errorTransport"

    def __init__(self, display_language: str | Language = Language.EN, detail: str | None = None):
        self.display_language = Language.parse(display_language)
        self.message = translate(self.message_key, self.display_language)
        # Untranslated provider detail, for logs only.
        self.detail = detail
        super().__init__(self.message)


class MalformedResponseError(AnalysisError):
    """The model returned something that is not a review in JSON."""

    category = "malformed_response"
    message_key = "errorMalformedResponse"


class InvalidCredentialsError(AnalysisError):
    """The endpoint rejected the API key."""

    category = "invalid_credentials"
    message_key = "errorInvalidCredentials"


class TransportError(AnalysisError):
    """Any other network or service failure."""
