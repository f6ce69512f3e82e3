"""Main CLI entry point for Wins & Losses.

This module provides the main click group and lazy loading
of the command modules.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

console = Console()


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when one of their commands
    is actually invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        # Commands are looked up by their click name, not the function name
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if isinstance(attr, click.Command) and attr.name == cmd_name:
                self.add_command(attr)
                return attr

        raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")


LAZY_SUBCOMMANDS = {
    # Entries
    "add": "winsandlosses.cli.entries",
    "delete": "winsandlosses.cli.entries",
    "list": "winsandlosses.cli.entries",
    "today": "winsandlosses.cli.entries",
    "day": "winsandlosses.cli.entries",
    "week": "winsandlosses.cli.entries",
    # Analytics
    "stats": "winsandlosses.cli.stats",
    # Profiles
    "profile": "winsandlosses.cli.profile",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="winsandlosses")
@click.option(
    "--db", "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="SQLite database to use instead of the configured one.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, db_path: Optional[Path], verbose: bool) -> None:
    """Wins & Losses - journal your wins, losses and opportunities for growth.

    Log short entries, browse them by type, and track your streak
    and weekly activity. Each profile keeps its own journal.

    \b
    Quick Start:
      winsandlosses profile create Alex     # Create and select a profile
      winsandlosses add win "Shipped it"    # Log a win
      winsandlosses stats                   # Streaks and breakdown
    """
    from winsandlosses.cli.common import configure_logging, get_settings

    ctx.ensure_object(dict)
    ctx.obj["db_path"] = db_path

    settings = get_settings(ctx)
    configure_logging("DEBUG" if verbose else settings.logging.level)


@cli.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
def init(force: bool) -> None:
    """Create a template configuration file."""
    from winsandlosses.config import config_path, create_template_config

    path = config_path()
    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {path}[/yellow] (use --force to overwrite)")
        return

    try:
        written = create_template_config(path)
    except OSError as e:
        console.print(Panel(
            f"[red]Failed to write config:[/red]\n\n{str(e)}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    console.print(f"[green]✓ Wrote config to {written}[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
