"""Prompt and response schema for a single code review request."""

from __future__ import annotations

from codescope_core.i18n import Language, translate

SEVERITIES = ("Critical", "High", "Medium", "Low", "Info")

# Standard JSON schema. Providers translate it to their own dialect where
# needed (see GeminiAnalyzer._response_schema).
REVIEW_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "report": {
            "type": "string",
            "description": "A comprehensive and constructive code review report in Markdown format.",
        },
        "issues": {
            "type": "array",
            "description": "A list of identified issues.",
            "items": {
                "type": "object",
                "properties": {
                    "severity": {
                        "type": "string",
                        "enum": list(SEVERITIES),
                        "description": "The severity of the issue.",
                    },
                    "category": {
                        "type": "string",
                        "description": "The category of the issue (e.g., 'Security', 'Performance', 'Best Practices').",
                    },
                    "lineNumber": {
                        "type": "integer",
                        "description": "The line number where the issue occurs. Use 0 if not applicable.",
                    },
                    "description": {
                        "type": "string",
                        "description": "A concise description of the issue.",
                    },
                    "suggestion": {
                        "type": "string",
                        "description": "A concrete suggestion or code example to fix the issue.",
                    },
                },
                "required": ["severity", "category", "lineNumber", "description", "suggestion"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["report", "issues"],
    "additionalProperties": False,
}


def is_blank(code: str | None) -> bool:
    """True when there is nothing worth sending to the model."""
    return not (code or "").strip()


def build_prompt(source_language: str, code: str, display_language: str | Language) -> str:
    """Build the review prompt for `code`, written in `source_language`.

    The code is embedded verbatim; the caller guarantees it is not blank.
    """
    lang_instruction = translate("responseLanguageInstruction", display_language)
    return f"""
You are a world-class senior software engineer acting as an automated code reviewer.
Your task is to provide a comprehensive and constructive review of the following {source_language} code.

Please analyze the code for clarity, best practices, potential bugs, performance, and security vulnerabilities.
Generate a detailed report in Markdown format and also provide a structured list of all identified issues.
If no issues are found, the 'issues' array should be empty, and the report should be a brief, positive confirmation.

{lang_instruction}

Code to review:
```{source_language}
{code}
```
"""
