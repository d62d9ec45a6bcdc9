"""Main entry point for the GeoQuiz terminal trainer."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from geoquiz import __version__
from geoquiz.core.models import GameMode, GameSession, Point, PointLocation, Question
from geoquiz.core.question_generator import generate_questions
from geoquiz.core.session_manager import (
    QuestionGenerator,
    SessionController,
    create_session_controller,
)
from geoquiz.core.settings import Settings, get_settings, setup_logging
from geoquiz.core.statistics import StatisticsAggregator
from geoquiz.core.user_settings import UserSettingsStore
from geoquiz.infrastructure.persistence import KeyValueStore

console = Console()
logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}


@click.command()
@click.option(
    "--mode",
    type=click.Choice([mode.value for mode in GameMode]),
    default=GameMode.REGIONS.value,
    help="Game mode to play",
)
@click.option(
    "--stats",
    is_flag=True,
    help="Display statistics and exit",
)
@click.option(
    "--export-stats",
    is_flag=True,
    help="Export statistics to a JSON file and exit",
)
@click.option(
    "--reset",
    is_flag=True,
    help="Reset all statistics",
)
@click.option(
    "--timer/--no-timer",
    default=None,
    help="Turn the answer timer on or off and save the choice",
)
@click.option(
    "--timer-duration",
    type=click.IntRange(1, 300),
    default=None,
    help="Seconds per question when the timer is on",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="geoquiz")
def main(
    mode: str,
    stats: bool,
    export_stats: bool,
    reset: bool,
    timer: bool | None,
    timer_duration: int | None,
    verbose: bool,
) -> None:
    """GeoQuiz - find German states, neighbors, cities and rivers on the map.

    Answer region questions with the region key (for example DE-BY) and
    city questions with map coordinates as x,y. Type q to stop a session.
    """
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_file)

    try:
        store = KeyValueStore(settings.database_path)
        aggregator = StatisticsAggregator(store)
        user_settings = UserSettingsStore(store)

        if reset:
            _handle_reset(aggregator)
            return

        if timer is not None or timer_duration is not None:
            _update_settings(user_settings, timer, timer_duration)
            return

        if stats:
            _display_stats(aggregator, user_settings)
            return

        if export_stats:
            _export_stats(aggregator)
            return

        controller = create_session_controller(
            question_generator=_build_question_generator(settings),
            tolerance=settings.proximity_tolerance,
        )
        _play_session(controller, aggregator, GameMode(mode))

    except KeyboardInterrupt:
        console.print("\n[yellow]Session interrupted. Goodbye![/yellow]")
        sys.exit(0)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


def _build_question_generator(settings: Settings) -> QuestionGenerator:
    """Apply configured sample sizes to the sampled modes."""
    sample_sizes = {
        GameMode.REGIONS: settings.regions_sample_size,
        GameMode.PLACES: settings.places_sample_size,
    }

    def generator(mode: GameMode) -> list[Question]:
        return generate_questions(mode, sample_size=sample_sizes.get(mode))

    return generator


def _handle_reset(aggregator: StatisticsAggregator) -> None:
    """Handle statistics reset with confirmation."""
    console.print("[yellow]This will reset ALL your statistics![/yellow]")
    if click.confirm("Are you sure you want to continue?"):
        aggregator.reset()
        if aggregator.save():
            console.print("[green]✅ Statistics reset successfully![/green]")
        else:
            console.print("[red]Could not save the reset statistics.[/red]")
    else:
        console.print("[blue]Reset cancelled.[/blue]")


def _display_stats(
    aggregator: StatisticsAggregator, user_settings: UserSettingsStore
) -> None:
    """Display statistics per mode, the weakest locations and timer settings."""
    stats = aggregator.statistics

    console.print("\n[bold blue]📊 Statistics[/bold blue]")
    console.print(f"Sessions played: {stats.total_sessions}")

    table = Table(title="By mode")
    table.add_column("Mode")
    table.add_column("Sessions", justify="right")
    table.add_column("Questions", justify="right")
    table.add_column("Correct", justify="right")
    table.add_column("Success", justify="right")
    table.add_column("Best", justify="right")
    for mode, mode_stats in stats.by_mode.items():
        table.add_row(
            mode.value,
            str(mode_stats.sessions_played),
            str(mode_stats.total_questions),
            str(mode_stats.correct_answers),
            f"{mode_stats.success_rate:.1f}%",
            str(mode_stats.best_score),
        )
    console.print(table)

    if stats.weak_areas:
        console.print("\n[bold]Practice these:[/bold]")
        for area in stats.weak_areas:
            console.print(f"  • {area.location_name} ({area.success_rate:.0f}%)")

    preferences = user_settings.get()
    if preferences.timer_enabled:
        console.print(f"\nTimer: on ({preferences.timer_duration}s per question)")
    else:
        console.print("\nTimer: off")


def _update_settings(
    user_settings: UserSettingsStore,
    timer: bool | None,
    timer_duration: int | None,
) -> None:
    """Apply timer options and persist them."""
    if timer is not None:
        user_settings.set_timer_enabled(timer)
    if timer_duration is not None:
        user_settings.set_timer_duration(timer_duration)

    if user_settings.save():
        console.print("[green]✅ Settings saved.[/green]")
    else:
        console.print("[red]Could not save settings.[/red]")


def _export_stats(aggregator: StatisticsAggregator) -> None:
    """Export statistics to a timestamped JSON file."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    export_file = Path(f"geoquiz_stats_{timestamp}.json")

    with open(export_file, "w", encoding="utf-8") as f:
        data = aggregator.statistics.model_dump(mode="json")
        json.dump(data, f, indent=2, ensure_ascii=False)

    console.print(f"[green]✅ Statistics exported to {export_file}[/green]")


def _parse_point(text: str) -> Point | None:
    """Parse ``x,y`` into a point."""
    parts = text.split(",")
    if len(parts) != 2:
        return None
    try:
        return Point(x=float(parts[0]), y=float(parts[1]))
    except ValueError:
        return None


def _prompt_location(question: Question) -> tuple[str | None, Point | None] | None:
    """Ask for a map answer. Returns None when the user quits."""
    location = question.location
    if isinstance(location, PointLocation):
        raw = click.prompt(
            f"📍 Where is {location.name}? (x,y)", default="", show_default=False
        )
        if raw.strip().lower() in QUIT_COMMANDS:
            return None
        point = _parse_point(raw)
        if point is None and raw.strip():
            console.print("[yellow]Expected coordinates like 450,500[/yellow]")
        return None, point

    raw = click.prompt(
        f"🗺️  Where is {location.name}? (region key)", default="", show_default=False
    )
    if raw.strip().lower() in QUIT_COMMANDS:
        return None
    return raw.strip() or None, None


def _play_session(
    controller: SessionController,
    aggregator: StatisticsAggregator,
    mode: GameMode,
) -> GameSession | None:
    """Run one interactive session and record it."""
    session = controller.start_new_session(mode)
    if session.total_questions == 0:
        console.print("[yellow]No questions available for this mode.[/yellow]")
        return session

    console.print(
        f"\n[bold blue]🎯 {mode.value}[/bold blue] - {session.total_questions} questions\n"
    )

    number = 0
    while controller.current_question is not None:
        question = controller.current_question
        number += 1
        console.print(f"[dim]Question {number}/{session.total_questions}[/dim]")

        answer = _prompt_location(question)
        if answer is None:
            break
        region_key, point = answer

        correct = controller.submit_location_answer(region_key, point)
        location = question.location
        if correct:
            console.print("[green]✅ Correct![/green]")
        else:
            console.print(f"[red]❌ Wrong - that was not {location.name}.[/red]")

        if controller.state.awaiting_capital_input:
            capital = click.prompt(
                f"🏛️  Capital of {location.name}?", default="", show_default=False
            )
            if controller.submit_capital_answer(capital):
                console.print("[green]✅ Correct capital![/green]")
            else:
                console.print(f"[red]❌ The capital is {location.capital}.[/red]")

    ended = controller.end_session()
    if ended is None:
        return None

    aggregator.record_session(ended)
    if not aggregator.save():
        console.print("[yellow]Statistics could not be saved.[/yellow]")

    console.print(
        f"\n[bold]Final score: {ended.score}[/bold] "
        f"({ended.correct_answers} correct answers in {len(ended.answers)} questions)"
    )
    return ended


if __name__ == "__main__":
    main()
