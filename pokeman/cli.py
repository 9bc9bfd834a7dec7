"""ABOUTME: CLI entry point for pokeman commands.
ABOUTME: Provides types, moveset, and chart commands via Typer."""

from pathlib import Path

import typer
from rich.console import Console

from pokeman.analysis import (
    analyze_against_type,
    build_team,
    count_strengths,
    count_weaknesses,
    select_moveset,
    suitability_frame,
    top_ranked,
)
from pokeman.config import load_data_config
from pokeman.core import DataLoadError, ElementalType, PokemanError, TypePair, score_defensive_typing
from pokeman.ingestion import PokemanDatabase, load_database
from pokeman.logs import init_logging
from pokeman.reports import (
    render_moveset,
    render_ranking,
    render_suitability_matrix,
    render_team,
    render_type_analysis,
    render_typing_summary,
)
from pokeman.settings import settings

app = typer.Typer(
    name="pokeman",
    help="Type matchup and moveset analysis for a creature team.",
    no_args_is_help=True,
)

console = Console()

CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Data config file (defaults to configs/data.yml)")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Show detailed output")


def _load(config_path: Path | None, verbose: bool) -> PokemanDatabase:
    """Set up logging and load the data set, exiting on failure."""
    if settings.logging_config_path.exists():
        init_logging(settings.logging_config_path, level="DEBUG" if verbose else None)

    def log(msg: str) -> None:
        if verbose:
            console.print(f"[blue]{msg}[/]")

    try:
        data_config = load_data_config(config_path)
        return load_database(data_config, verbose_callback=log)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from None
    except ValueError as e:
        console.print(f"[red]Invalid data config:[/] {e}")
        raise typer.Exit(1) from None
    except DataLoadError as e:
        console.print(f"[red]Couldn't load database:[/] {e}")
        raise typer.Exit(1) from None


@app.command()
def types(
    type_names: list[str] | None = typer.Argument(None, help="Types to analyze the team against"),
    top: int = typer.Option(settings.RANK_COUNT, "--top", "-n", help="Number of types listed per ranking"),
    matrix: bool = typer.Option(False, "--matrix", "-m", help="Show the full member x type suitability table"),
    config: Path | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Rank the team's weaknesses and strengths across all types."""
    database = _load(config, verbose)
    chart = database.chart

    render_team(console, database.team)

    team, failures = build_team(database.team)
    if failures:
        console.print(f"[yellow]Warning:[/] {failures} team members could not be analyzed")

    render_ranking(console, "Weaknesses", top_ranked(count_weaknesses(chart, team), top))
    render_ranking(console, "Strengths", top_ranked(count_strengths(chart, team), top))

    if matrix:
        render_suitability_matrix(console, suitability_frame(chart, team))

    for name in type_names or []:
        elemental_type = ElementalType.from_name(name)
        if elemental_type is None:
            console.print(f"[red]Error:[/] '{name}' was not recognized as a type")
            break
        render_type_analysis(console, analyze_against_type(chart, team, elemental_type))


@app.command()
def moveset(
    limit: int = typer.Option(
        settings.SLOT_CANDIDATE_LIMIT, "--limit", "-l", help="Maximum candidates listed per slot"
    ),
    config: Path | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Suggest four-slot movesets for each team member."""
    database = _load(config, verbose)
    team, _ = build_team(database.team)

    console.print("[bold]--[ Find moves for each team member ]--[/]")
    for creature in team:
        slots = select_moveset(database.chart, creature, database.moves, limit=limit)
        if not slots:
            console.print(f"[yellow]Warning:[/] no moveset for {creature.nickname}; see log for the missing move")
        render_moveset(console, creature, slots, database.moves)


@app.command()
def chart(
    first: str = typer.Argument(..., help="Primary type"),
    second: str | None = typer.Argument(None, help="Secondary type"),
    config: Path | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show the defensive profile of a mono or dual typing."""
    parsed = [ElementalType.from_name(name) for name in (first, second) if name is not None]
    for name, elemental_type in zip((first, second), parsed, strict=False):
        if elemental_type is None:
            console.print(f"[red]Error:[/] '{name}' was not recognized as a type")
            raise typer.Exit(1)

    database = _load(config, verbose)
    typing = TypePair(*parsed)  # type: ignore[arg-type]

    try:
        scores = score_defensive_typing(database.chart, typing)
    except PokemanError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from None

    render_typing_summary(console, str(typing), scores)


if __name__ == "__main__":
    app()
