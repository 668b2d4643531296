from __future__ import annotations

import json

from codescope_core.providers.base import BaseAnalyzer

_TOOL_NAME = "submit_review"


class AnthropicAnalyzer(BaseAnalyzer):
    MODEL = "claude-sonnet-4-20250514"
    TEMPERATURE = 0.3

    def __init__(self, api_key: str, model: str | None = None):
        try:
            from anthropic import Anthropic
        except ImportError:
            raise ImportError(
                "The 'anthropic' package is required for this provider. "
                "Install it with: pip install 'codescope[anthropic]'"
            )
        super().__init__(model)
        self.client = Anthropic(api_key=api_key)

    def _call_api(self, prompt: str, schema: dict) -> str | None:
        # Imported inside the method because the anthropic package is optional;
        # __init__ already validated it is installed before we reach here.
        from anthropic.types import TextBlock, ToolUseBlock

        # Structured output is a forced call to a tool whose input is the review.
        response = self.client.messages.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            tools=[
                {
                    "name": _TOOL_NAME,
                    "description": "Submit the finished code review.",
                    "input_schema": schema,
                }
            ],
            tool_choice={"type": "tool", "name": _TOOL_NAME},
            temperature=self.TEMPERATURE,
            max_tokens=self.MAX_TOKENS,
        )
        for block in response.content:
            if isinstance(block, ToolUseBlock) and block.name == _TOOL_NAME:
                return json.dumps(block.input)
        text_blocks = [block.text for block in response.content if isinstance(block, TextBlock)]
        return "".join(text_blocks).strip()

    def _is_auth_error(self, error: Exception) -> bool:
        from anthropic import AuthenticationError

        if isinstance(error, AuthenticationError):
            return True
        return super()._is_auth_error(error)
