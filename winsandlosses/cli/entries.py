"""Entry commands for Wins & Losses CLI.

Handles logging new entries, deleting them, and browsing the journal
by type, by day and by week.
"""

from datetime import date
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from winsandlosses.cli.common import error_panel, get_engine, short_id, style_for
from winsandlosses.models import EntryType, JournalEntry

console = Console()


class EntryTypeParam(click.ParamType):
    """Accepts win, loss or ofg (or the stored names Wins, Losses, OFGs)."""

    name = "type"

    def convert(self, value, param, ctx):
        if isinstance(value, EntryType):
            return value
        try:
            return EntryType.parse(value)
        except ValueError:
            self.fail(f"{value!r} is not one of win, loss, ofg", param, ctx)


ENTRY_TYPE = EntryTypeParam()


def resolve_entry(entries, prefix: str) -> Optional[JournalEntry]:
    """Find the single entry whose id starts with ``prefix``.

    Args:
        entries: Entries to search.
        prefix: Full id or id prefix, case-insensitive.

    Returns:
        The matching entry, or None if no entry or several entries match.
    """
    needle = prefix.strip().lower()
    if not needle:
        return None
    matches = [e for e in entries if str(e.id).startswith(needle)]
    return matches[0] if len(matches) == 1 else None


def _entries_table(title: str, entries: list[JournalEntry]) -> Table:
    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("ID", style="dim")
    table.add_column("Date/Time", style="dim")
    table.add_column("Type", justify="center")
    table.add_column("Entry")

    for entry in entries:
        style = style_for(entry.type)
        table.add_row(
            short_id(entry.id),
            entry.date.strftime("%Y-%m-%d %H:%M"),
            f"[{style}]{entry.type.value}[/{style}]",
            entry.content,
        )
    return table


def _print_entries(title: str, entries: list[JournalEntry], empty_message: str) -> None:
    if not entries:
        console.print(Panel(
            f"[dim]{empty_message}[/dim]",
            title=f"[bold]{title}[/bold]",
            border_style="dim",
        ))
        return
    console.print(_entries_table(title, entries))
    console.print(f"\n[dim]Total: {len(entries)} entries[/dim]")


def _warn_if_no_profile(engine) -> None:
    if engine.active_profile_id is None:
        console.print(
            "[yellow]No active profile - this entry will not be saved.[/yellow]\n"
            "[dim]Create one with 'winsandlosses profile create NAME'.[/dim]"
        )


@click.command("add")
@click.argument("entry_type", type=ENTRY_TYPE)
@click.argument("content")
@click.pass_context
def add(ctx: click.Context, entry_type: EntryType, content: str) -> None:
    """Log a new entry.

    ENTRY_TYPE is win, loss or ofg. CONTENT is the entry text.

    \b
    Examples:
      winsandlosses add win "Finished the report early"
      winsandlosses add ofg "Ask for feedback sooner"
    """
    content = content.strip()
    if not content:
        console.print("[red]Entry text cannot be empty.[/red]")
        raise SystemExit(1)

    try:
        engine = get_engine(ctx)
        _warn_if_no_profile(engine)

        entry = JournalEntry(type=entry_type, content=content)
        engine.add_entry(entry)

        style = style_for(entry_type)
        console.print(
            f"[green]✓ Logged[/green] [{style}]{entry_type.value}[/{style}] "
            f"[dim]({short_id(entry.id)})[/dim]"
        )
    except Exception as e:
        console.print(error_panel("Failed to add entry:", e))
        raise SystemExit(1)


@click.command("delete")
@click.argument("entry_id")
@click.pass_context
def delete(ctx: click.Context, entry_id: str) -> None:
    """Delete an entry.

    ENTRY_ID is the entry id or a unique prefix of it, as shown by 'list'.
    """
    try:
        engine = get_engine(ctx)
        entry = resolve_entry(engine.entries, entry_id)
        if entry is None:
            console.print(f"[yellow]No single entry matches '{entry_id}'[/yellow]")
            return

        engine.delete_entry(entry.id)
        console.print(f"[green]✓ Deleted {short_id(entry.id)}[/green]")
    except Exception as e:
        console.print(error_panel("Failed to delete entry:", e))
        raise SystemExit(1)


@click.command("list")
@click.option(
    "--type", "entry_type",
    type=ENTRY_TYPE,
    default=None,
    help="Only show entries of this type (win, loss, ofg).",
)
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Show at most this many entries.",
)
@click.pass_context
def list_entries(ctx: click.Context, entry_type: Optional[EntryType], limit: Optional[int]) -> None:
    """Show journal entries, newest first.

    \b
    Examples:
      winsandlosses list              # All entries
      winsandlosses list --type win   # Only wins
      winsandlosses list --limit 5    # Five newest entries
    """
    try:
        engine = get_engine(ctx)
        entries = engine.filtered_entries(entry_type)
        if limit is not None:
            entries = entries[:limit]

        title = f"Journal: {entry_type.value}" if entry_type else "Journal"
        _print_entries(title, entries, "No entries yet")
    except Exception as e:
        console.print(error_panel("Failed to list entries:", e))
        raise SystemExit(1)


@click.command("today")
@click.pass_context
def today(ctx: click.Context) -> None:
    """Show today's entries."""
    try:
        engine = get_engine(ctx)
        _print_entries("Today", engine.entries_today(), "Nothing logged today")
    except Exception as e:
        console.print(error_panel("Failed to load entries:", e))
        raise SystemExit(1)


@click.command("day")
@click.argument("day", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.pass_context
def day(ctx: click.Context, day) -> None:
    """Show entries logged on DAY (YYYY-MM-DD)."""
    target: date = day.date()
    try:
        engine = get_engine(ctx)
        _print_entries(
            target.strftime("%A %Y-%m-%d"),
            engine.entries_for_day(target),
            "Nothing logged on this day",
        )
    except Exception as e:
        console.print(error_panel("Failed to load entries:", e))
        raise SystemExit(1)


@click.command("week")
@click.pass_context
def week(ctx: click.Context) -> None:
    """Show this week's entries and per-type totals."""
    try:
        engine = get_engine(ctx)
        days = engine.week_days()
        title = f"Week {days[0]:%b %d} - {days[-1]:%b %d}"
        _print_entries(title, engine.entries_this_week(), "Nothing logged this week")

        counts = engine.weekly_type_counts()
        summary = "  ".join(
            f"[{style_for(t)}]{t.value}: {counts[t]}[/{style_for(t)}]" for t in EntryType
        )
        console.print(summary)
    except Exception as e:
        console.print(error_panel("Failed to load entries:", e))
        raise SystemExit(1)
