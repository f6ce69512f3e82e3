"""Analytics command for Wins & Losses CLI.

Shows the overview cards, the entry breakdown and weekly activity.
"""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from winsandlosses.cli.common import (
    error_panel,
    format_percentage,
    get_engine,
    get_settings,
    style_for,
)
from winsandlosses.engine.dates import weekday_label
from winsandlosses.models import EntryType, display_for

console = Console()

# Dots drawn per day in the activity chart
MAX_DOTS = 5


def build_overview(engine) -> dict:
    """Collect the overview figures for a journal.

    Args:
        engine: Journal engine to summarize.

    Returns:
        Dictionary with totals, streaks, weekly count and best day.
    """
    return {
        "total_entries": engine.total_entries(),
        "current_streak": engine.current_streak(),
        "longest_streak": engine.longest_streak(),
        "this_week": len(engine.entries_this_week()),
        "best_day": engine.best_weekday(),
    }


def activity_dots(entries) -> str:
    """Colored dots for up to MAX_DOTS entries of a day."""
    if not entries:
        return "[grey50]○[/grey50]"
    return " ".join(f"[{style_for(e.type)}]●[/{style_for(e.type)}]" for e in entries[:MAX_DOTS])


@click.command("stats")
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Show streaks, entry breakdown and weekly activity."""
    try:
        engine = get_engine(ctx)
        overview = build_overview(engine)

        streak = overview["current_streak"]
        console.print(Panel(
            f"[bold]Total Entries:[/bold]  {overview['total_entries']}\n"
            f"[bold]Current Streak:[/bold] [orange3]{streak} day{'s' if streak != 1 else ''}[/orange3]\n"
            f"[bold]Longest Streak:[/bold] {overview['longest_streak']}\n"
            f"[bold]This Week:[/bold]      {overview['this_week']}\n"
            f"[bold]Best Day:[/bold]       {overview['best_day']}",
            title="[bold]Overview[/bold]",
            border_style="cyan",
        ))

        breakdown_table = Table(
            title="Entry Breakdown",
            show_header=True,
            header_style="bold cyan",
        )
        breakdown_table.add_column("Type")
        breakdown_table.add_column("Count", justify="right")
        breakdown_table.add_column("Share", justify="right")
        breakdown_table.add_column("About", style="dim")

        breakdown = engine.entry_breakdown()
        for entry_type in EntryType:
            row = breakdown[entry_type]
            style = style_for(entry_type)
            breakdown_table.add_row(
                f"[{style}]{entry_type.value}[/{style}]",
                str(row.count),
                format_percentage(row.percentage),
                display_for(entry_type).subtitle,
            )
        console.print(breakdown_table)

        activity_table = Table(
            title="Weekly Activity",
            show_header=False,
        )
        activity_table.add_column("Day", width=4)
        activity_table.add_column("Entries")
        activity_table.add_column("Count", justify="right", style="dim")

        for activity in engine.weekly_activity():
            activity_table.add_row(
                weekday_label(activity.day),
                activity_dots(activity.entries),
                str(activity.count),
            )
        console.print(activity_table)

        recent = engine.recent_entries(get_settings(ctx).journal.recent_limit)
        if recent:
            console.print("\n[bold]Recent Entries[/bold]")
            for entry in recent:
                style = style_for(entry.type)
                console.print(
                    f"  [{style}]●[/{style}] {entry.content} "
                    f"[dim]{entry.date:%b %d %H:%M}[/dim]"
                )
    except Exception as e:
        console.print(error_panel("Failed to compute stats:", e))
        raise SystemExit(1)
