"""Profile management commands for Wins & Losses CLI.

Handles profile create, list, switch and delete. Each profile keeps
its own journal.
"""

from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from winsandlosses.cli.common import error_panel, get_store

console = Console()


def _get_profile_store(ctx: click.Context):
    from winsandlosses.engine import ProfileStore

    return ProfileStore(get_store(ctx))


@click.group("profile")
def profile() -> None:
    """Manage local profiles.

    \b
    Examples:
      winsandlosses profile create Alex --emoji 🚀
      winsandlosses profile list
      winsandlosses profile switch Alex
    """
    pass


@profile.command("create")
@click.argument("name")
@click.option("--emoji", default="🙂", help="Avatar emoji for the profile.")
@click.option("--pin", default=None, help="Optional PIN for the lock screen (stored in plain text).")
@click.pass_context
def create_profile(ctx: click.Context, name: str, emoji: str, pin: Optional[str]) -> None:
    """Create a profile named NAME."""
    if not name.strip():
        console.print("[red]Profile name cannot be empty.[/red]")
        raise SystemExit(1)

    try:
        profiles = _get_profile_store(ctx)
        if profiles.find_profile(name) is not None:
            console.print(f"[yellow]Profile '{name}' already exists[/yellow]")
            return

        created = profiles.create_profile(name, emoji=emoji, pin=pin)
        active = profiles.active_profile_id() == created.id
        console.print(
            f"[green]✓ Created profile {created.emoji} {created.name}[/green]"
            + (" [dim](active)[/dim]" if active else "")
        )
    except Exception as e:
        console.print(error_panel("Failed to create profile:", e))
        raise SystemExit(1)


@profile.command("list")
@click.pass_context
def list_profiles(ctx: click.Context) -> None:
    """Show all profiles."""
    try:
        profiles = _get_profile_store(ctx)
        all_profiles = profiles.list_profiles()

        if not all_profiles:
            console.print(Panel(
                "[dim]No profiles found. Use 'winsandlosses profile create NAME' to create one.[/dim]",
                title="[bold]Profiles[/bold]",
                border_style="dim",
            ))
            return

        active_id = profiles.active_profile_id()
        table = Table(
            title="Profiles",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("", width=2)
        table.add_column("Name", style="bold")
        table.add_column("ID", style="dim")
        table.add_column("Locked", justify="center")

        for p in all_profiles:
            table.add_row(
                "[green]●[/green]" if p.id == active_id else "",
                f"{p.emoji} {p.name}",
                str(p.id)[:8],
                "🔒" if p.pin else "",
            )
        console.print(table)
    except Exception as e:
        console.print(error_panel("Failed to list profiles:", e))
        raise SystemExit(1)


@profile.command("switch")
@click.argument("name")
@click.option("--pin", default=None, help="PIN of a locked profile.")
@click.pass_context
def switch_profile(ctx: click.Context, name: str, pin: Optional[str]) -> None:
    """Make NAME the active profile."""
    try:
        profiles = _get_profile_store(ctx)
        target = profiles.find_profile(name)
        if target is None:
            console.print(f"[yellow]No profile matches '{name}'[/yellow]")
            return

        if target.pin is not None and pin is None:
            pin = click.prompt("PIN", hide_input=True)
        if not profiles.verify_pin(target.id, pin):
            console.print("[red]Incorrect PIN.[/red]")
            raise SystemExit(1)

        profiles.set_active(target.id)
        console.print(f"[green]✓ Switched to {target.emoji} {target.name}[/green]")
    except click.exceptions.Abort:
        raise
    except Exception as e:
        console.print(error_panel("Failed to switch profile:", e))
        raise SystemExit(1)


@profile.command("delete")
@click.argument("name")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_context
def delete_profile(ctx: click.Context, name: str, yes: bool) -> None:
    """Delete profile NAME and all of its entries."""
    try:
        profiles = _get_profile_store(ctx)
        target = profiles.find_profile(name)
        if target is None:
            console.print(f"[yellow]No profile matches '{name}'[/yellow]")
            return

        if not yes:
            click.confirm(
                f"Delete {target.name} and all of its entries?", abort=True
            )

        profiles.delete_profile(target.id)
        console.print(f"[green]✓ Deleted profile {target.name}[/green]")
    except click.exceptions.Abort:
        raise
    except Exception as e:
        console.print(error_panel("Failed to delete profile:", e))
        raise SystemExit(1)
