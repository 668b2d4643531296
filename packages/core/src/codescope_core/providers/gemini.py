from __future__ import annotations

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from codescope_core.providers.base import BaseAnalyzer


class GeminiAnalyzer(BaseAnalyzer):
    MODEL = "gemini-2.5-flash"
    TEMPERATURE = 0.3

    def __init__(self, api_key: str, model: str | None = None):
        super().__init__(model)
        self.client = genai.Client(api_key=api_key)

    def _call_api(self, prompt: str, schema: dict) -> str | None:
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=genai_types.GenerateContentConfig(
                temperature=self.TEMPERATURE,
                max_output_tokens=self.MAX_TOKENS,
                response_mime_type="application/json",
                response_schema=self._response_schema(schema),
            ),
        )
        return response.text

    def _is_auth_error(self, error: Exception) -> bool:
        # An invalid key comes back as 400 INVALID_ARGUMENT "API key not valid",
        # a revoked or unauthorised one as 401/403.
        if isinstance(error, genai_errors.ClientError) and error.code in (401, 403):
            return True
        return super()._is_auth_error(error)

    @classmethod
    def _response_schema(cls, schema: dict) -> dict:
        """Translate a JSON schema to Gemini's OpenAPI subset.

        Gemini wants upper-case type names and has no additionalProperties.
        """
        converted = {}
        for key, value in schema.items():
            if key == "additionalProperties":
                continue
            if key == "type":
                converted[key] = value.upper()
            elif key == "properties":
                converted[key] = {name: cls._response_schema(sub) for name, sub in value.items()}
            elif key == "items":
                converted[key] = cls._response_schema(value)
            else:
                converted[key] = value
        return converted
