"""CLI entry point for codescope.

Commands:
  review     — send code to the AI reviewer and archive the verdict
  history    — list past reviews
  show       — print one archived review
  dashboard  — scores, severity distribution and quality trend
  settings   — show or change the display language and theme
"""

from __future__ import annotations

import logging

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler

from codescope_cli.commands.dashboard import dashboard_cmd
from codescope_cli.commands.history import history_cmd, show_cmd
from codescope_cli.commands.review import review_cmd
from codescope_cli.commands.settings import settings_cmd
from codescope_cli.render import make_console

console = Console()


def _build_storage(config: dict):
    """Instantiate the configured storage backend from .codescope.yml settings.

    Storage selection:
      storage: file   → FileStorage   (storage_path or ~/.codescope)
      storage: sqlite → SQLiteStorage (storage_path or .codescope.db)
      storage: memory → MemoryStorage (nothing survives the process)

    This factory lives in cli.py so neither codescope_core nor codescope_store
    know about the CLI config format.
    """
    from codescope_store.file import FileStorage

    storage_type = config.get("storage", "file")
    path = config.get("storage_path")

    if storage_type == "sqlite":
        from codescope_store.base import StorageError
        from codescope_store.sqlite import SQLiteStorage

        try:
            return SQLiteStorage(db_path=path or ".codescope.db")
        except StorageError as e:
            raise click.UsageError(f"{e}. Fix or remove the file, or change storage_path in the config.")

    if storage_type == "memory":
        from codescope_store.memory import MemoryStorage

        return MemoryStorage()

    if storage_type != "file":
        console.print(f"[yellow]Unknown storage {storage_type!r}. Falling back to file storage.[/yellow]")
    return FileStorage(path) if path else FileStorage()


@click.group()
@click.version_option(package_name="codescope", prog_name="codescope")
@click.option(
    "--config",
    "config_path",
    default=".codescope.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="CODESCOPE_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """AI-powered code review with a local history dashboard."""
    from codescope_core.config import load_config
    from codescope_store.history import HistoryStore
    from codescope_store.preferences import Preferences

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )

    ctx.ensure_object(dict)

    try:
        config = load_config(config_path)
    except (ValueError, OSError, yaml.YAMLError) as e:
        raise click.UsageError(f"Could not load {config_path}: {e}")

    storage = _build_storage(config)
    ctx.call_on_close(storage.close)

    preferences = Preferences(storage)
    ctx.obj["config"] = config
    ctx.obj["storage"] = storage
    ctx.obj["preferences"] = preferences
    ctx.obj["history"] = HistoryStore(storage)
    ctx.obj["console"] = make_console(preferences.theme)


main.add_command(review_cmd)
main.add_command(history_cmd)
main.add_command(show_cmd)
main.add_command(dashboard_cmd)
main.add_command(settings_cmd)
