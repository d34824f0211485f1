"""UI helpers for CLI interaction.

Presentation of setlists, breakdowns and rankings with Rich, kept apart from
the scoring logic.
"""

from collections.abc import Callable
import functools
import json
from typing import Any, ParamSpec, TypeVar

from rich.console import Console
from rich.table import Table
import typer

from phishpicks.application.use_cases import ScoreShowPredictionsResult
from phishpicks.config import get_logger
from phishpicks.domain.entities import SET_KEYS, ProcessedSetlist, ScoringBreakdown
from phishpicks.domain.errors import InvalidInputError
from phishpicks.domain.rules import POINT_VALUES, RULE_DESCRIPTIONS
from phishpicks.domain.scoring import LeaderboardEntry

console = Console()
logger = get_logger(__name__)

SET_TITLES = {"set1": "Set 1", "set2": "Set 2", "encore": "Encore"}

P = ParamSpec("P")
R = TypeVar("R")


def command_error_handler(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    Invalid input is reported without a traceback; anything else is logged
    with its traceback. Both exit with code 1.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        operation = func.__name__.replace("_", " ")

        with logger.contextualize(operation=operation):
            try:
                logger.debug(f"Executing {operation}")
                return func(*args, **kwargs)

            except (typer.Exit, typer.Abort, typer.BadParameter):
                raise

            except InvalidInputError as e:
                logger.error(f"Invalid input during {operation}: {e}")
                console.print(f"\n[bold red]✗ Invalid input:[/bold red] {e}")
                raise typer.Exit(code=1) from e

            except Exception as e:
                logger.exception(f"Error during {operation}")
                console.print(f"\n[bold red]✗ Error during {operation}:[/bold red] {e}")
                raise typer.Exit(code=1) from e

    return wrapper


def emit_json(data: Any) -> None:
    """Write plain JSON to stdout so output can be piped."""
    typer.echo(json.dumps(data, indent=2))


def display_setlist(setlist: ProcessedSetlist) -> None:
    for set_key in SET_KEYS:
        entries = setlist.get_set(set_key)
        table = Table(title=SET_TITLES[set_key], show_header=True)
        table.add_column("#", style="dim", justify="right")
        table.add_column("Song", style="green")
        for entry in entries:
            table.add_row(str(entry.position), entry.name)
        if not entries:
            table.add_row("-", "[dim]no songs[/dim]")
        console.print(table)


def display_breakdown(breakdown: ScoringBreakdown) -> None:
    """Show the category summary followed by the per-song explanation."""
    console.print(f"\n[bold blue]Total score: {breakdown.total_score}[/bold blue]")

    summary = Table(show_header=True, box=None, padding=(0, 2))
    summary.add_column("Category", style="cyan")
    summary.add_column("Count", justify="right")
    summary.add_column("Points", style="green bold", justify="right")
    for category, tally in breakdown.categories.items():
        summary.add_row(category.value, str(tally.count), str(tally.points))
    console.print(summary)

    if not breakdown.details:
        console.print("[dim]No songs predicted[/dim]")
        return

    details = Table(title="Song Details")
    details.add_column("Song", style="green")
    details.add_column("Predicted", style="cyan")
    details.add_column("Actual", style="yellow")
    details.add_column("Pts", justify="right")
    details.add_column("Reason")
    for d in details_rows(breakdown):
        details.add_row(*d)
    console.print(details)


def details_rows(breakdown: ScoringBreakdown) -> list[tuple[str, ...]]:
    rows = []
    for d in breakdown.details:
        actual = (
            f"{SET_TITLES[d.actual_set]} #{d.actual_position}" if d.actual_set else "-"
        )
        rows.append((
            d.song_name,
            f"{SET_TITLES[d.predicted_set]} #{d.predicted_position}",
            actual,
            str(d.points),
            d.reason,
        ))
    return rows


def display_show_results(
    result: ScoreShowPredictionsResult, leaderboard: list[LeaderboardEntry]
) -> None:
    console.print(f"\n[bold blue]Show {result.show_id}[/bold blue]")

    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column(style="cyan")
    summary.add_column(style="green bold")
    summary.add_row("Processed", str(result.processed))
    summary.add_row("Scored", str(len(result.scored)))
    summary.add_row("Changed", str(result.updated))
    summary.add_row("Errors", str(len(result.errors)))
    console.print(summary)

    console.print(_leaderboard_table("Leaderboard", leaderboard))

    for error in result.errors:
        console.print(f"[yellow]⚠ {error}[/yellow]")


def display_tour_results(
    results: list[ScoreShowPredictionsResult], leaderboard: list[LeaderboardEntry]
) -> None:
    console.print(f"\n[bold blue]Tour of {len(results)} shows[/bold blue]")

    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column(style="cyan")
    summary.add_column(style="green bold", justify="right")
    for result in results:
        summary.add_row(result.show_id, f"{len(result.scored)} scored")
    console.print(summary)

    console.print(_leaderboard_table("Tour Leaderboard", leaderboard, with_shows=True))

    for result in results:
        for error in result.errors:
            console.print(f"[yellow]⚠ {result.show_id}: {error}[/yellow]")


def _leaderboard_table(
    title: str, leaderboard: list[LeaderboardEntry], with_shows: bool = False
) -> Table:
    table = Table(title=title)
    table.add_column("Rank", justify="right")
    table.add_column("User", style="cyan")
    table.add_column("Score", style="green bold", justify="right")
    if with_shows:
        table.add_column("Shows", justify="right")
    for entry in leaderboard:
        row = [str(entry.rank), entry.user_name or str(entry.user_id), str(entry.score)]
        if with_shows:
            row.append(str(entry.shows_participated))
        table.add_row(*row)
    return table


def display_rules() -> None:
    table = Table(title="Scoring Rules")
    table.add_column("Category", style="cyan")
    table.add_column("Points", style="green bold", justify="right")
    table.add_column("When")
    for category, description in RULE_DESCRIPTIONS.items():
        table.add_row(category.value, str(POINT_VALUES[category]), description)
    table.add_row("-", "0", "Song not played")
    console.print(table)
