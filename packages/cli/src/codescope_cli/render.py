"""Terminal rendering shared by the commands: themed console, reports, issue cards."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from rich.console import Console, Group
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from codescope_core.i18n import translate

_PALETTES = {
    "dark": {
        "severity.critical": "bold bright_red",
        "severity.high": "dark_orange",
        "severity.medium": "yellow",
        "severity.low": "bright_blue",
        "severity.info": "grey62",
        "heading": "bold cyan",
        "muted": "grey50",
    },
    "light": {
        "severity.critical": "bold red3",
        "severity.high": "dark_orange3",
        "severity.medium": "gold3",
        "severity.low": "blue3",
        "severity.info": "grey42",
        "heading": "bold dark_cyan",
        "muted": "grey39",
    },
    # "system" keeps to the 16 ANSI colours so the terminal's own scheme applies.
    "system": {
        "severity.critical": "bold red",
        "severity.high": "magenta",
        "severity.medium": "yellow",
        "severity.low": "blue",
        "severity.info": "default",
        "heading": "bold cyan",
        "muted": "dim",
    },
}


def make_console(theme: str = "system", **kwargs) -> Console:
    palette = _PALETTES.get(theme, _PALETTES["system"])
    return Console(theme=Theme(palette), **kwargs)


def severity_style(severity: str) -> str:
    return f"severity.{severity.lower()}"


def format_timestamp(millis: int) -> str:
    return datetime.fromtimestamp(millis / 1000).strftime("%Y-%m-%d %H:%M:%S")


def render_report(console: Console, report: str, lang: str, model: str | None = None) -> None:
    console.print(f"\n[heading]{translate('analysisResults', lang)}[/heading]")
    if model:
        console.print(f"[muted]{translate('feedbackBy', lang, model=model)}[/muted]")
    if not report.strip():
        console.print(Panel(translate("noIssues", lang), border_style="green"))
        return
    console.print(Panel(Markdown(report), padding=(1, 2)))


def issue_card(issue, lang: str) -> Panel:
    """One bordered card per issue; `issue` is an AnalysisResult issue or an IssueRecord."""
    style = severity_style(issue.severity)
    header = Text.assemble((f"[{translate(issue.severity.lower(), lang)}]", style), "  ")
    header.append(f"{translate('category', lang)}: {issue.category}")

    body = [
        header,
        Text(""),
        Text(translate("description", lang), style="bold"),
        Text(issue.description),
        Text(""),
        Text(translate("suggestion", lang), style="bold"),
        Panel(Text(issue.suggestion), border_style="muted"),
    ]
    subtitle = f"{translate('lineNumber', lang)}: {issue.line_number}" if issue.line_number > 0 else None
    return Panel(Group(*body), border_style=style, subtitle=subtitle, subtitle_align="right")


def render_issues(console: Console, issues: Iterable, lang: str) -> None:
    issues = list(issues)
    if not issues:
        return
    console.print(f"\n[heading]{translate('detectedIssues', lang)} ({len(issues)})[/heading]")
    for issue in issues:
        console.print(issue_card(issue, lang))


def reviews_table(reviews: Iterable, lang: str, title: str | None = None) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column(translate("date", lang), width=20)
    table.add_column(translate("language", lang))
    table.add_column(translate("issues", lang), justify="right")
    table.add_column(translate("reviewId", lang), style="muted", overflow="fold")
    for r in reviews:
        table.add_row(format_timestamp(r.timestamp), r.language, str(len(r.issues)), r.id)
    return table
