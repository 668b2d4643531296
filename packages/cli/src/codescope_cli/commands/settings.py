"""settings command — persisted display language and theme."""

from __future__ import annotations

import click

from codescope_core.i18n import translate
from codescope_store.preferences import LANGUAGES, THEMES


@click.command("settings")
@click.option("--language", type=click.Choice(LANGUAGES), default=None, help="Display language for reports and output.")
@click.option("--theme", type=click.Choice(THEMES), default=None, help="Console colour theme.")
@click.pass_context
def settings_cmd(ctx, language: str | None, theme: str | None):
    """Show the current settings, or change them with --language / --theme."""
    console = ctx.obj["console"]
    preferences = ctx.obj["preferences"]

    if language is not None:
        preferences.language = language
    if theme is not None:
        preferences.theme = theme

    lang = preferences.language
    if language is not None or theme is not None:
        console.print(f"[green]{translate('settingsSaved', lang)}[/green]")

    console.print(f"[heading]{translate('settingsTitle', lang)}[/heading]")
    console.print(f"  {translate('displayLanguage', lang)}: {lang}")
    console.print(f"  {translate('theme', lang)}: {preferences.theme}")
