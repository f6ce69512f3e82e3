"""Helpers shared by the CLI commands."""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

console = Console()

# Display colors rich does not know by name
RICH_COLOR_NAMES = {
    "orange": "orange3",
}


def get_settings(ctx: click.Context):
    """Settings loaded once per invocation."""
    from winsandlosses.config import load_config

    obj = ctx.ensure_object(dict)
    if "settings" not in obj:
        obj["settings"] = load_config()
    return obj["settings"]


def get_store(ctx: click.Context):
    """The SQLite store named by ``--db`` or the config file."""
    from winsandlosses.storage import SQLiteStore

    obj = ctx.ensure_object(dict)
    if "store" not in obj:
        db_path: Optional[Path] = obj.get("db_path") or get_settings(ctx).storage.db_path
        obj["store"] = SQLiteStore(db_path)
    return obj["store"]


def get_engine(ctx: click.Context):
    """Journal engine bound to the active profile."""
    from winsandlosses.engine import open_journal

    settings = get_settings(ctx)
    return open_journal(get_store(ctx), week_policy=settings.journal.week_policy)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def error_panel(message: str, error: Exception) -> Panel:
    return Panel(
        f"[red]{message}[/red]\n\n{str(error)}",
        title="[bold red]Error[/bold red]",
        border_style="red",
    )


def style_for(entry_type) -> str:
    """Rich style for an entry type, taken from its display metadata."""
    from winsandlosses.models import display_for

    color = display_for(entry_type).color
    return RICH_COLOR_NAMES.get(color, color)


def format_percentage(fraction: float) -> str:
    """Whole-number percentage, truncated, e.g. ``33%``."""
    return f"{int(fraction * 100)}%"


def short_id(entry_id) -> str:
    return str(entry_id)[:8]
