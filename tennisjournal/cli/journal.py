"""Journal commands for the tennis match journal CLI.

Handles recording, viewing and deleting matches, and the
win/loss summary.
"""

from typing import NoReturn

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tennisjournal.db.store import JournalStore, JournalStoreError
from tennisjournal.models import (
    InvalidIndexError,
    MatchDetails,
    MatchStats,
    TennisMatch,
    TennisMatchJournal,
)

console = Console()


def _fail(message: str) -> NoReturn:
    """Print an error panel and exit with status 1."""
    console.print(Panel(
        f"[red]{escape(message)}[/red]",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def _get_store(ctx: click.Context) -> JournalStore:
    """Get the journal store for the selected file."""
    return JournalStore(ctx.obj["journal_path"])


def _load_journal(store: JournalStore) -> TennisMatchJournal:
    """Read the journal, exiting on a corrupt file."""
    try:
        return store.read()
    except JournalStoreError as e:
        _fail(f"Failed to load journal:\n\n{e}")


def _match_at_position(journal: TennisMatchJournal, position: int) -> TennisMatch:
    """Return the match at a 1-based position, exiting if there is none."""
    try:
        return journal.get_match_at(position - 1)
    except InvalidIndexError:
        _fail(f"No match #{position}. The journal has {journal.journal_length()} matches.")


@click.command()
@click.option("--opponent", required=True, help="Opponent name.")
@click.option("--won/--lost", "is_won", required=True, help="Match outcome.")
@click.option("--surface", required=True, help="Court surface (hard, clay, grass...).")
@click.option("--duration", type=int, required=True, help="Duration in minutes.")
@click.option("--date", "match_date", required=True, help="Date played, e.g. 2024-05-01.")
@click.option("--score", required=True, help="Final score, e.g. '6-4 6-3'.")
@click.option("--aces", type=int, default=0, show_default=True)
@click.option("--double-faults", type=int, default=0, show_default=True)
@click.option("--winners", type=int, default=0, show_default=True)
@click.option("--unforced-errors", type=int, default=0, show_default=True)
@click.pass_context
def add(
    ctx: click.Context,
    opponent: str,
    is_won: bool,
    surface: str,
    duration: int,
    match_date: str,
    score: str,
    aces: int,
    double_faults: int,
    winners: int,
    unforced_errors: int,
) -> None:
    """Record a match in the journal.

    \b
    Examples:
      tennisjournal add --opponent Nadal --lost --surface clay \\
          --duration 95 --date 2024-05-01 --score "3-6 4-6" --aces 2
    """
    try:
        match = TennisMatch(
            details=MatchDetails(
                opponent=opponent,
                is_won=is_won,
                surface=surface,
                duration=duration,
                date=match_date,
            ),
            stats=MatchStats(
                score=score,
                aces=aces,
                double_faults=double_faults,
                winners=winners,
                unforced_errors=unforced_errors,
            ),
        )
    except ValidationError as e:
        _fail(f"Invalid match:\n\n{e}")

    store = _get_store(ctx)
    journal = _load_journal(store)

    if journal.contains_match(match):
        console.print(f"[yellow]This match against {escape(opponent)} is already in the journal[/yellow]")
        return

    journal.add_match(match)
    store.write(journal)
    console.print(f"[green]✓ Added match #{journal.journal_length()} against {escape(opponent)}[/green]")


@click.command()
@click.argument("position", type=int)
@click.pass_context
def delete(ctx: click.Context, position: int) -> None:
    """Delete a match from the journal.

    POSITION is the match number shown by 'tennisjournal view --table'.
    """
    store = _get_store(ctx)
    journal = _load_journal(store)
    match = _match_at_position(journal, position)

    journal.delete_match(match)
    store.write(journal)
    console.print(f"[green]✓ Deleted match #{position} against {escape(match.opponent)}[/green]")


@click.command()
@click.option("--table", "as_table", is_flag=True, help="Show a one-line-per-match table.")
@click.pass_context
def view(ctx: click.Context, as_table: bool) -> None:
    """Display every match in the journal.

    \b
    Examples:
      tennisjournal view          # Details and stats per match
      tennisjournal view --table  # Compact table
    """
    journal = _load_journal(_get_store(ctx))

    if not as_table or journal.journal_length() == 0:
        click.echo(journal.view_journal())
        return

    table = Table(
        title="Match Journal",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("#", justify="right", style="dim")
    table.add_column("Date", style="dim")
    table.add_column("Opponent", style="bold")
    table.add_column("Result", justify="center")
    table.add_column("Surface")
    table.add_column("Score")
    table.add_column("Min", justify="right")

    for position, match in enumerate(journal, start=1):
        result = "[green]WIN[/green]" if match.is_won else "[red]LOSS[/red]"
        table.add_row(
            str(position),
            escape(match.date),
            escape(match.opponent),
            result,
            escape(match.surface.upper()),
            escape(match.score),
            str(match.duration),
        )

    console.print(table)


@click.command()
@click.argument("position", type=int)
@click.pass_context
def show(ctx: click.Context, position: int) -> None:
    """Display a single match.

    POSITION is the match number, starting at 1.
    """
    journal = _load_journal(_get_store(ctx))
    match = _match_at_position(journal, position)

    result = "[green]WIN[/green]" if match.is_won else "[red]LOSS[/red]"
    console.print(Panel(
        f"Opponent: [bold]{escape(match.opponent)}[/bold]\n"
        f"Outcome: {result}\n"
        f"Surface: {escape(match.surface.upper())}\n"
        f"Duration: {match.duration} minutes\n"
        f"Date: {escape(match.date)}\n\n"
        f"Score: {escape(match.score)}\n"
        f"Aces: {match.aces}\n"
        f"Double Faults: {match.double_faults}\n"
        f"Winners: {match.winners}\n"
        f"Unforced Errors: {match.unforced_errors}",
        title=f"[bold]Match #{position}[/bold]",
        border_style="cyan",
    ))


@click.command()
@click.pass_context
def ratio(ctx: click.Context) -> None:
    """Display the win/loss ratio as 'wins : losses'."""
    journal = _load_journal(_get_store(ctx))

    click.echo(journal.view_win_loss_ratio())

    wins, losses = journal.win_loss_counts()
    played = wins + losses
    if played > 0:
        console.print(f"[dim]Won {wins / played * 100:.1f}% of {played} matches[/dim]")


@click.command()
@click.pass_context
def count(ctx: click.Context) -> None:
    """Display the number of matches in the journal."""
    journal = _load_journal(_get_store(ctx))
    click.echo(str(journal.journal_length()))
