"""phishpicks CLI - Main application entry point and app structure."""

from pathlib import Path
from typing import Annotated

from rich.console import Console
import typer

from phishpicks import __version__
from phishpicks.application.services import show_leaderboard, tour_leaderboard
from phishpicks.application.use_cases import (
    ScoreShowPredictionsCommand,
    ScoreShowPredictionsResult,
    ScoreShowPredictionsUseCase,
)
from phishpicks.config import (
    get_logger,
    log_startup_info,
    settings,
    setup_loguru_logger,
)
from phishpicks.domain.entities import ProcessedSetlist
from phishpicks.domain.errors import InvalidInputError
from phishpicks.domain.scoring import score_prediction
from phishpicks.infrastructure.cli.ui import (
    command_error_handler,
    display_breakdown,
    display_rules,
    display_setlist,
    display_show_results,
    display_tour_results,
    emit_json,
)
from phishpicks.infrastructure.payloads import (
    normalize_raw_setlist,
    parse_actual_setlist,
    parse_prediction,
    parse_stored_predictions,
    read_json_file,
)

console = Console(width=100)
logger = get_logger(__name__)

app = typer.Typer(
    help=f"🐟 phishpicks v{__version__} - Score Phish setlist predictions",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
)

ExistingFile = Annotated[
    Path,
    typer.Argument(exists=True, dir_okay=False, readable=True),
]
FormatOption = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Output format (table, json)"),
]
RawOption = Annotated[
    bool,
    typer.Option("--raw", help="Setlist file holds raw Phish.net rows (1-based)"),
]
LimitOption = Annotated[
    int | None,
    typer.Option("--limit", "-l", min=1, help="Leaderboard rows to show"),
]

PREDICTIONS_FILENAME = "predictions.json"
SETLIST_FILENAME = "setlist.json"


def _output_format(output_format: str | None) -> str:
    chosen = output_format or settings.output.default_format
    if chosen not in ("table", "json"):
        raise typer.BadParameter(f"Unknown format {chosen!r}, use table or json")
    return chosen


def _load_actual(setlist_file: Path, raw: bool) -> ProcessedSetlist:
    data = read_json_file(setlist_file)
    return normalize_raw_setlist(data) if raw else parse_actual_setlist(data)


def _score_show(
    predictions_file: Path, setlist_file: Path, show_id: str, raw: bool
) -> ScoreShowPredictionsResult:
    predictions = parse_stored_predictions(read_json_file(predictions_file))
    command = ScoreShowPredictionsCommand(
        show_id=show_id,
        actual_setlist=_load_actual(setlist_file, raw),
        predictions=predictions,
    )
    return ScoreShowPredictionsUseCase().execute(command)


@app.callback()
def init_cli(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
) -> None:
    """Initialize phishpicks CLI."""
    setup_loguru_logger(verbose)
    log_startup_info()


@app.command(name="version", rich_help_panel="⚙️ System")
def version_command() -> None:
    """Show version information."""
    console.print(f"[bold bright_blue]🐟 phishpicks[/bold bright_blue] [dim]v{__version__}[/dim]")


@app.command(name="rules", rich_help_panel="⚙️ System")
def rules_command() -> None:
    """Show the point table used for scoring."""
    display_rules()


@app.command(name="normalize", rich_help_panel="🎸 Setlists")
@command_error_handler
def normalize_command(
    raw_file: ExistingFile,
    output_format: FormatOption = None,
) -> None:
    """Normalize a raw Phish.net setlist into set1, set2 and encore."""
    fmt = _output_format(output_format)
    setlist = normalize_raw_setlist(read_json_file(raw_file))
    logger.info(f"Normalized {setlist.song_count} songs from {raw_file}")

    if fmt == "json":
        emit_json(setlist.as_dict())
    else:
        display_setlist(setlist)


@app.command(name="score", rich_help_panel="🏆 Scoring")
@command_error_handler
def score_command(
    prediction_file: ExistingFile,
    setlist_file: ExistingFile,
    raw: RawOption = False,
    output_format: FormatOption = None,
) -> None:
    """Score one prediction against the actual setlist."""
    fmt = _output_format(output_format)
    data = read_json_file(prediction_file)
    # Accept either a bare setlist or a stored record wrapping one
    if isinstance(data, dict) and "setlist" in data:
        data = data["setlist"]
    prediction = parse_prediction(data)
    actual = _load_actual(setlist_file, raw)

    breakdown = score_prediction(prediction, actual)
    logger.info(f"Scored {len(breakdown.details)} picks: {breakdown.total_score} points")

    if fmt == "json":
        emit_json(breakdown.as_dict())
    else:
        display_breakdown(breakdown)


@app.command(name="score-show", rich_help_panel="🏆 Scoring")
@command_error_handler
def score_show_command(
    predictions_file: ExistingFile,
    setlist_file: ExistingFile,
    show_id: Annotated[
        str | None,
        typer.Option("--show-id", "-s", help="Show identifier (defaults to file name)"),
    ] = None,
    raw: RawOption = False,
    limit: LimitOption = None,
    output_format: FormatOption = None,
) -> None:
    """Score every stored prediction for a show and rank the results."""
    fmt = _output_format(output_format)
    result = _score_show(predictions_file, setlist_file, show_id or setlist_file.stem, raw)

    if fmt == "json":
        emit_json(result.as_dict())
        return

    display_show_results(result, show_leaderboard(result, limit))


@app.command(name="tour", rich_help_panel="🏆 Scoring")
@command_error_handler
def tour_command(
    show_dirs: Annotated[
        list[Path],
        typer.Argument(
            exists=True,
            file_okay=False,
            help=f"One directory per show holding {PREDICTIONS_FILENAME} and {SETLIST_FILENAME}",
        ),
    ],
    raw: RawOption = False,
    limit: LimitOption = None,
    output_format: FormatOption = None,
) -> None:
    """Score several shows and rank users by their total across the tour."""
    fmt = _output_format(output_format)

    results = []
    for show_dir in show_dirs:
        predictions_file = show_dir / PREDICTIONS_FILENAME
        setlist_file = show_dir / SETLIST_FILENAME
        for required in (predictions_file, setlist_file):
            if not required.is_file():
                raise InvalidInputError(f"{required} not found")
        results.append(_score_show(predictions_file, setlist_file, show_dir.name, raw))

    leaderboard = tour_leaderboard(results, limit)
    logger.info(f"Tour of {len(results)} shows: {len(leaderboard)} users ranked")

    if fmt == "json":
        emit_json({
            "shows": [result.show_id for result in results],
            "leaderboard": [entry.as_dict() for entry in leaderboard],
        })
        return

    display_tour_results(results, leaderboard)


def main() -> int:
    """Application entry point."""
    try:
        return app() or 0
    except Exception:
        logger.exception("Unhandled exception")
        return 1
