"""review command — send code to the AI reviewer and archive the result."""

from __future__ import annotations

import click

from codescope_core.config import PROVIDERS, api_key_env_var
from codescope_core.errors import AnalysisError
from codescope_core.i18n import translate
from codescope_core.models import AnalysisResult
from codescope_core.prompt import is_blank
from codescope_core.reviewer import get_analyzer, run_review
from codescope_core.samples import SAMPLES, SOURCE_LANGUAGES
from codescope_store.models import IssueRecord, ReviewDraft
from codescope_store.preferences import LANGUAGES

from codescope_cli.render import render_issues, render_report


def _result_to_draft(result: AnalysisResult, source_language: str, code: str) -> ReviewDraft:
    """Map an AnalysisResult returned by run_review() to a ReviewDraft for the store.

    The CLI layer owns this mapping: codescope_core has no store knowledge and
    codescope_store has no core knowledge. The CLI bridges the two.
    """
    return ReviewDraft(
        language=source_language,
        code=code,
        report=result.report,
        issues=tuple(
            IssueRecord(
                severity=i.severity,
                category=i.category,
                line_number=i.line_number,
                description=i.description,
                suggestion=i.suggestion,
            )
            for i in result.issues
        ),
    )


def _read_code(source, sample: bool, source_language: str) -> str:
    if sample:
        return SAMPLES[source_language]
    stream = source if source is not None else click.get_text_stream("stdin")
    # Nothing piped in: treat as empty input rather than waiting on the terminal.
    if source is None and stream.isatty():
        return ""
    try:
        return stream.read()
    except UnicodeDecodeError as e:
        raise click.UsageError(f"Cannot read {getattr(stream, 'name', 'input')} as UTF-8 text: {e}")


@click.command("review")
@click.argument("source", type=click.File("r", encoding="utf-8"), required=False)
@click.option(
    "--language",
    "-l",
    "source_language",
    type=click.Choice(SOURCE_LANGUAGES),
    default=None,
    help="Language of the submitted code. Defaults to source_language in the config file.",
)
@click.option(
    "--display-language",
    type=click.Choice(LANGUAGES),
    default=None,
    help="Language of the report. Defaults to the saved setting.",
)
@click.option("--sample", is_flag=True, help="Review the built-in sample snippet for --language.")
@click.option("--provider", type=click.Choice(PROVIDERS), default=None, help="AI provider. Overrides config file.")
@click.option("--model", default=None, help="Model name. Overrides the provider default.")
@click.pass_context
def review_cmd(
    ctx,
    source,
    source_language: str | None,
    display_language: str | None,
    sample: bool,
    provider: str | None,
    model: str | None,
):
    """Review SOURCE (a file, or - for stdin) with an AI model.

    The markdown report and every issue found are printed and the review is
    added to the local history. Failed reviews are never recorded.

    \b
    Required environment variables (one, for the selected provider):
      GEMINI_API_KEY       --provider gemini (default)
      OPENAI_API_KEY       --provider openai
      ANTHROPIC_API_KEY    --provider anthropic
    """
    console = ctx.obj["console"]
    history = ctx.obj["history"]
    config = dict(ctx.obj["config"])
    for key, value in {"provider": provider, "model": model}.items():
        if value is not None:
            config[key] = value

    lang = display_language or ctx.obj["preferences"].language
    source_language = source_language or config.get("source_language") or "typescript"
    if source_language not in SOURCE_LANGUAGES:
        raise click.UsageError(f"Unsupported source_language {source_language!r} in config.")

    code = _read_code(source, sample, source_language)
    if is_blank(code):
        console.print(f"[yellow]{translate('emptyCode', lang)}[/yellow]")
        ctx.exit(1)

    provider = config["provider"]
    if provider not in PROVIDERS:
        raise click.UsageError(f"Unknown provider {provider!r}. Choose one of: {', '.join(PROVIDERS)}.")
    if not config.get(f"{provider}_api_key"):
        raise click.UsageError(f"{api_key_env_var(provider)} environment variable is not set.")

    try:
        analyzer = get_analyzer(config)
    except ImportError as e:
        raise click.UsageError(str(e))

    try:
        with console.status(translate("loading", lang)):
            result = run_review(code, source_language, lang, analyzer)
    except AnalysisError as e:
        console.print(e.message, style="severity.critical", markup=False)
        ctx.exit(1)

    render_report(console, result.report, lang, model=analyzer.model)
    render_issues(console, result.issues, lang)

    record = history.append(_result_to_draft(result, source_language, code))
    console.print(f"\n[muted]{translate('reviewSaved', lang, id=record.id)}[/muted]")

