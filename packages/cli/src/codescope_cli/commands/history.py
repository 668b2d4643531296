"""history and show commands — browse archived reviews."""

from __future__ import annotations

import click
from rich.syntax import Syntax

from codescope_core.i18n import translate

from codescope_cli.render import format_timestamp, render_issues, render_report, reviews_table


@click.command("history")
@click.option(
    "--limit", type=click.IntRange(min=0), default=5, show_default=True, help="Maximum number of reviews to show."
)
@click.pass_context
def history_cmd(ctx, limit: int):
    """List past reviews, most recent first."""
    console = ctx.obj["console"]
    lang = ctx.obj["preferences"].language

    reviews = ctx.obj["history"].reviews
    if not reviews:
        console.print(f"[yellow]{translate('noReviewsMessage', lang)}[/yellow]")
        return

    console.print(reviews_table(reviews[:limit], lang, title=translate("recentReviews", lang)))


@click.command("show")
@click.argument("review_id")
@click.option("--code", "show_code", is_flag=True, help="Also print the code that was reviewed.")
@click.pass_context
def show_cmd(ctx, review_id: str, show_code: bool):
    """Print the full report and issues of one review (see `codescope history` for ids)."""
    console = ctx.obj["console"]
    lang = ctx.obj["preferences"].language

    record = ctx.obj["history"].get(review_id)
    if record is None:
        raise click.UsageError(translate("reviewNotFound", lang, id=review_id))

    console.print(f"[muted]{format_timestamp(record.timestamp)} · {record.language}[/muted]")
    if show_code:
        console.print(Syntax(record.code, record.language, line_numbers=True))
    render_report(console, record.report, lang)
    render_issues(console, record.issues, lang)
