"""Core review orchestration."""

from __future__ import annotations

import logging

from codescope_core.i18n import Language
from codescope_core.models import AnalysisResult
from codescope_core.prompt import is_blank
from codescope_core.providers.base import BaseAnalyzer

logger = logging.getLogger(__name__)


def get_analyzer(config: dict) -> BaseAnalyzer:
    provider = config["provider"]
    model = config.get("model")
    if provider == "gemini":
        from codescope_core.providers.gemini import GeminiAnalyzer

        return GeminiAnalyzer(api_key=config["gemini_api_key"], model=model)
    if provider == "openai":
        from codescope_core.providers.openai import OpenAIAnalyzer

        return OpenAIAnalyzer(api_key=config["openai_api_key"], model=model)
    if provider == "anthropic":
        from codescope_core.providers.anthropic import AnthropicAnalyzer

        return AnthropicAnalyzer(api_key=config["anthropic_api_key"], model=model)
    raise ValueError(f"Unknown model provider: {provider!r}. Choose 'gemini', 'openai' or 'anthropic'.")


def run_review(
    code: str,
    source_language: str,
    display_language: str | Language,
    analyzer: BaseAnalyzer,
) -> AnalysisResult | None:
    """Analyze `code`, or return None without calling the model if it is blank.

    AnalysisError from the analyzer propagates unchanged; nothing here
    touches history, so a failed review leaves no trace.
    """
    if is_blank(code):
        logger.debug("Skipping review: no code submitted")
        return None

    logger.info("Reviewing %d line(s) of %s with %s", code.count("\n") + 1, source_language, analyzer.model)
    result = analyzer.analyze(code, source_language, display_language)
    logger.info("Review finished with %d issue(s)", len(result.issues))
    return result
