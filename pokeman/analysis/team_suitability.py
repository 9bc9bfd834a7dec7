# ABOUTME: Scores how well each team member matches up against each elemental type.
# ABOUTME: Aggregates the scores into ranked weakness and strength counts for the whole team.

import logging
from collections.abc import Iterable, Mapping, Sequence
from enum import IntEnum
from typing import Any

import polars as pl

from pokeman.core.effectiveness import (
    get_cross_effectiveness,
    get_defensive_weaknesses,
    is_strong_factor,
    is_weak_factor,
)
from pokeman.core.enums import ALL_TYPES, EffectivenessFactor, ElementalType
from pokeman.core.models import Creature
from pokeman.core.type_chart import TypeChart
from pokeman.core.type_profile import TypePair

logger = logging.getLogger(__name__)


class Suitability(IntEnum):
    """How a typing fares against a single opposing type."""

    SEVERELY_WEAK = -2
    WEAK = -1
    NEUTRAL = 0
    DECENT = 1
    STRONG = 2

    @property
    def description(self) -> str:
        """Short verdict shown in matchup listings."""
        if self < 0:
            return "Weak."
        if self == Suitability.STRONG:
            return "Strong!!"
        if self == Suitability.DECENT:
            return "Decent?"
        return "Alright..."


def evaluate_suitability(chart: TypeChart, typing: TypePair, candidate: ElementalType) -> Suitability:
    """Score a typing against one opposing type.

    Resisting the opposing type comes first: STRONG when we also hit it
    super effectively, DECENT otherwise. Failing that, being unable to hurt
    it is WEAK, and taking super-effective damage from it is SEVERELY_WEAK.

    Args:
        chart: Type chart to query.
        typing: Typing of the team member.
        candidate: The opposing type.

    Returns:
        Suitability score.
    """
    offense = get_cross_effectiveness(chart, typing, candidate)
    defense = get_cross_effectiveness(chart, candidate, typing)

    if is_strong_factor(defense):
        return Suitability.STRONG if is_weak_factor(offense) else Suitability.DECENT
    if offense == EffectivenessFactor.ZERO:
        return Suitability.WEAK
    if is_weak_factor(defense):
        return Suitability.SEVERELY_WEAK
    return Suitability.NEUTRAL


def _typing_of(creature: Creature) -> TypePair:
    return creature.require_species().typing


def count_weaknesses(chart: TypeChart, team: Sequence[Creature]) -> dict[ElementalType, int]:
    """Number of members scoring below neutral against each type."""
    return {
        candidate: sum(1 for member in team if evaluate_suitability(chart, _typing_of(member), candidate) < 0)
        for candidate in ALL_TYPES
    }


def count_strengths(chart: TypeChart, team: Sequence[Creature]) -> dict[ElementalType, int]:
    """Number of members scoring above neutral against each type."""
    return {
        candidate: sum(1 for member in team if evaluate_suitability(chart, _typing_of(member), candidate) > 0)
        for candidate in ALL_TYPES
    }


def rank_types(counts: Mapping[ElementalType, int]) -> list[ElementalType]:
    """Order types by count, highest first; ties keep ordinal order."""
    return sorted(sorted(counts), key=lambda t: counts[t], reverse=True)


def top_ranked(counts: Mapping[ElementalType, int], limit: int) -> list[tuple[ElementalType, int]]:
    """Highest-ranked types with a positive count, at most `limit` of them."""
    ranked = [(t, counts[t]) for t in rank_types(counts) if counts[t] > 0]
    return ranked[:limit]


def analyze_against_type(chart: TypeChart, team: Sequence[Creature], candidate: ElementalType) -> dict[str, Any]:
    """Break down how the team matches up against one type.

    Args:
        chart: Type chart to query.
        team: Team members, all with resolved species.
        candidate: The opposing type.

    Returns:
        Dictionary containing:
        - type: The opposing type.
        - weaknesses: Attacking types the opposing type is weak to.
        - members: List of dicts with nickname, species, suitability, description.
        - recommended: Number of members scoring STRONG.
        - nullified: Number of members scoring below neutral.
    """
    members: list[dict[str, Any]] = []
    recommended = 0
    nullified = 0

    for member in team:
        suitability = evaluate_suitability(chart, _typing_of(member), candidate)
        if suitability < 0:
            nullified += 1
        elif suitability > 1:
            recommended += 1

        members.append(
            {
                "nickname": member.nickname,
                "species": member.require_species().name,
                "suitability": suitability,
                "description": suitability.description,
            }
        )

    return {
        "type": candidate,
        "weaknesses": get_defensive_weaknesses(chart, candidate),
        "members": members,
        "recommended": recommended,
        "nullified": nullified,
    }


def build_team(creatures: Iterable[Creature]) -> tuple[list[Creature], int]:
    """Keep the creatures that can be analyzed.

    Returns:
        Tuple of (team members with a resolved species, number of creatures dropped).
    """
    team: list[Creature] = []
    failures = 0
    for creature in creatures:
        if creature.species is None:
            logger.warning("Could not add %s to team; invalid species", creature.nickname)
            failures += 1
            continue
        team.append(creature)
    return team, failures


def suitability_frame(chart: TypeChart, team: Sequence[Creature]) -> pl.DataFrame:
    """Suitability of every team member against every type.

    Returns:
        DataFrame with one row per member: nickname, species, typing, and one
        integer column per type (named by its label).
    """
    schema: dict[str, Any] = {"nickname": pl.String, "species": pl.String, "typing": pl.String}
    schema.update({t.label: pl.Int64 for t in ALL_TYPES})

    rows: list[dict[str, Any]] = []
    for member in team:
        typing = _typing_of(member)
        row: dict[str, Any] = {
            "nickname": member.nickname,
            "species": member.require_species().name,
            "typing": str(typing),
        }
        for candidate in ALL_TYPES:
            row[candidate.label] = int(evaluate_suitability(chart, typing, candidate))
        rows.append(row)

    return pl.DataFrame(rows, schema=schema)
