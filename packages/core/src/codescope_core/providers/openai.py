from __future__ import annotations

try:
    from openai import AuthenticationError as _AuthenticationError
    from openai import OpenAI as _OpenAI
except ImportError:
    _OpenAI = None  # type: ignore[assignment,misc]
    _AuthenticationError = None  # type: ignore[assignment,misc]

from codescope_core.providers.base import BaseAnalyzer


class OpenAIAnalyzer(BaseAnalyzer):
    MODEL = "gpt-4o"
    # Lower than Gemini's 0.3 to lean toward more deterministic output.
    TEMPERATURE = 0.2

    def __init__(self, api_key: str, model: str | None = None):
        if _OpenAI is None:
            raise ImportError(
                "The 'openai' package is required for this provider. "
                "Install it with: pip install 'codescope[openai]'"
            )
        super().__init__(model)
        self.client = _OpenAI(api_key=api_key)

    def _call_api(self, prompt: str, schema: dict) -> str | None:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.TEMPERATURE,
            max_tokens=self.MAX_TOKENS,
            response_format={
                "type": "json_schema",
                "json_schema": {"name": "code_review", "schema": schema, "strict": True},
            },
        )
        return response.choices[0].message.content

    def _is_auth_error(self, error: Exception) -> bool:
        if _AuthenticationError is not None and isinstance(error, _AuthenticationError):
            return True
        return super()._is_auth_error(error)
