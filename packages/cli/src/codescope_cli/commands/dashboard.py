"""dashboard command — scores and trends across the review history."""

from __future__ import annotations

import click
from rich.columns import Columns
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from codescope_core import metrics
from codescope_core.i18n import translate

from codescope_cli.render import reviews_table, severity_style

_BAR = "█"
_BAR_WIDTH = 30
_RECENT = 5


def _stat_card(title: str, value: str, style: str) -> Panel:
    return Panel(Text(value, style=f"bold {style}", justify="center"), title=title, width=24)


def _bar(value: int, scale: int, style: str) -> Text:
    width = round(value / scale * _BAR_WIDTH) if scale else 0
    return Text(_BAR * width, style=style)


@click.command("dashboard")
@click.pass_context
def dashboard_cmd(ctx):
    """Show statistics for the latest review and the quality trend.

    Cards summarise the most recent review (quality score, issue count,
    security findings, performance score); below them are the severity
    distribution, the quality score of the last ten reviews and the five most
    recent reviews.
    """
    console = ctx.obj["console"]
    lang = ctx.obj["preferences"].language
    reviews = ctx.obj["history"].reviews

    console.print(f"\n[heading]{translate('dashboardTitle', lang)}[/heading]")
    if not reviews:
        console.print(translate("noReviewsMessage", lang))
        return

    latest = reviews[0]
    issues = latest.issues

    # --- Stat cards ---
    console.print(
        Columns(
            [
                _stat_card(translate("codeQualityScore", lang), f"{metrics.quality_score(issues)}%", "green"),
                _stat_card(translate("issuesFound", lang), str(len(issues)), "yellow"),
                _stat_card(translate("vulnerabilities", lang), str(metrics.vulnerability_count(issues)), "red"),
                _stat_card(translate("performanceScore", lang), f"{metrics.performance_score(issues)}%", "blue"),
            ]
        )
    )

    # --- Severity distribution ---
    # Info findings are not charted.
    distribution = {s: n for s, n in metrics.severity_distribution(issues).items() if s != "Info"}
    top = max(distribution.values())
    sev_table = Table(title=translate("issueDistribution", lang), show_header=False, box=None)
    sev_table.add_column("Severity")
    sev_table.add_column("Count", justify="right")
    sev_table.add_column("Bar")
    for severity, count in distribution.items():
        style = severity_style(severity)
        sev_table.add_row(Text(translate(severity.lower(), lang), style=style), str(count), _bar(count, top, style))
    console.print(sev_table)

    # --- Quality trend ---
    trend_table = Table(title=translate("qualityTrend", lang), show_header=False, box=None)
    trend_table.add_column("Version")
    trend_table.add_column("Score", justify="right")
    trend_table.add_column("Bar")
    for label, score in metrics.quality_trend(reviews):
        trend_table.add_row(label, str(score), _bar(score, 100, "green"))
    console.print(trend_table)

    # --- Recent reviews ---
    console.print(reviews_table(reviews[:_RECENT], lang, title=translate("recentReviews", lang)))
