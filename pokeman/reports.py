"""ABOUTME: Console rendering of team, type, and moveset analysis results.
ABOUTME: Provides render_* helpers that print rich tables and markup to a Console."""

from collections.abc import Mapping, Sequence
from typing import Any

import polars as pl
from rich.console import Console
from rich.table import Table

from pokeman.analysis.moveset_selector import MoveSlot, describe_move
from pokeman.analysis.team_suitability import Suitability
from pokeman.core.enums import ElementalType
from pokeman.core.models import Creature, Move

_SUITABILITY_STYLES = {
    Suitability.SEVERELY_WEAK: "bold red",
    Suitability.WEAK: "red",
    Suitability.NEUTRAL: "white",
    Suitability.DECENT: "green",
    Suitability.STRONG: "bold green",
}


def render_team(console: Console, team: Sequence[Creature]) -> None:
    """Print one line per team member."""
    console.print("[bold]--[ Team ]--[/]")
    for member in team:
        console.print(str(member), markup=False)
    console.print()


def render_ranking(console: Console, title: str, ranked: Sequence[tuple[ElementalType, int]]) -> None:
    """Print a ranked list of types with their member counts.

    Args:
        console: Console to print to.
        title: Heading such as "Weaknesses".
        ranked: (type, count) pairs, highest first.
    """
    console.print(f"[bold]-- {title}:[/]")
    if not ranked:
        console.print("  [dim]none[/]")
    for elemental_type, count in ranked:
        console.print(f"  {elemental_type.label} {count}")
    console.print()


def render_type_analysis(console: Console, analysis: Mapping[str, Any]) -> None:
    """Print the team's matchup against one type.

    Args:
        console: Console to print to.
        analysis: Result of analyze_against_type.
    """
    console.print(f"[bold]Analysis of {analysis['type'].label}:[/]")
    console.print("Weaknesses:")
    for weakness in analysis["weaknesses"]:
        console.print(f"  {weakness.label}")

    console.print("Team:")
    for member in analysis["members"]:
        style = _SUITABILITY_STYLES[member["suitability"]]
        console.print(f"  {member['nickname']}  {member['species']}  [{style}]{member['description']}[/]")

    console.print(f"Recommended: {analysis['recommended']}")
    console.print(f"Nullified: {analysis['nullified']}")
    console.print()


def render_suitability_matrix(console: Console, frame: pl.DataFrame) -> None:
    """Print the member x type suitability matrix as a table."""
    table = Table(title="Suitability by type")
    for column in frame.columns:
        table.add_column(column[:3] if column not in ("nickname", "species", "typing") else column)

    for row in frame.iter_rows(named=True):
        cells: list[str] = []
        for column in frame.columns:
            value = row[column]
            if isinstance(value, int):
                style = _SUITABILITY_STYLES[Suitability(value)]
                cells.append(f"[{style}]{value:+d}[/]")
            else:
                cells.append(str(value))
        table.add_row(*cells)

    console.print(table)


def render_moveset(console: Console, creature: Creature, slots: Sequence[MoveSlot], moves: Mapping[str, Move]) -> None:
    """Print the four slot picks of one creature.

    An empty `slots` means selection failed; nothing but the header is printed.
    """
    console.print(f"{creature}:", markup=False)
    for index, slot in enumerate(slots, start=1):
        console.print(f"  ({index}) {slot.display_label}:")
        for move_name in slot.moves:
            console.print(f"      {describe_move(move_name, moves)}", markup=False)
    console.print()


def render_typing_summary(console: Console, typing_label: str, scores: Mapping[str, Any]) -> None:
    """Print a defensive summary of a typing.

    Args:
        console: Console to print to.
        typing_label: Typing shown in the heading, e.g. "Water/Flying".
        scores: Result of score_defensive_typing.
    """
    table = Table(title=f"Defensive profile of {typing_label}")
    table.add_column("Matchup")
    table.add_column("Count", justify="right")
    table.add_column("Types")

    rows = (
        ("Immune", "immunities", "immunity_count"),
        ("Resists", "resistances", "resistance_count"),
        ("Neutral", "neutral", "neutral_count"),
        ("Weak", "weaknesses", "weakness_count"),
    )
    for label, key, count_key in rows:
        table.add_row(label, str(scores[count_key]), ", ".join(t.label for t in scores[key]))

    console.print(table)
