# ABOUTME: Unit tests for team suitability scoring and type rankings.
# ABOUTME: Tests per-matchup classification, team counts, ranking ties, and the suitability frame.

import logging

import pytest

from pokeman.analysis.team_suitability import (
    Suitability,
    analyze_against_type,
    build_team,
    count_strengths,
    count_weaknesses,
    evaluate_suitability,
    rank_types,
    suitability_frame,
    top_ranked,
)
from pokeman.core import ALL_TYPES, Creature, ElementalType, Species, TypeChart, TypePair, UnresolvedSpeciesError

T = ElementalType


def _member(nickname: str, typing: TypePair) -> Creature:
    return Creature(nickname=nickname, species=Species(number=1, name=f"{nickname}mon", typing=typing))


@pytest.fixture
def team() -> list[Creature]:
    """A Water monotype and a Fire monotype."""
    return [_member("Wave", TypePair(T.WATER)), _member("Blaze", TypePair(T.FIRE))]


class TestEvaluateSuitability:
    """Tests for evaluate_suitability."""

    @pytest.mark.parametrize(
        ("typing", "candidate", "expected"),
        [
            (TypePair(T.WATER), T.FIRE, Suitability.STRONG),
            (TypePair(T.GRASS), T.WATER, Suitability.STRONG),
            (TypePair(T.WATER), T.WATER, Suitability.DECENT),
            (TypePair(T.NORMAL), T.GHOST, Suitability.DECENT),
            (TypePair(T.ELECTRIC), T.GROUND, Suitability.WEAK),
            (TypePair(T.FIRE), T.WATER, Suitability.SEVERELY_WEAK),
            (TypePair(T.WATER), T.GRASS, Suitability.SEVERELY_WEAK),
            (TypePair(T.NORMAL), T.FIRE, Suitability.NEUTRAL),
        ],
    )
    def test_classification(
        self, gen5_chart: TypeChart, typing: TypePair, candidate: ElementalType, expected: Suitability
    ) -> None:
        """Resisting comes first, then being unable to hurt, then taking 2x."""
        assert evaluate_suitability(gen5_chart, typing, candidate) == expected

    def test_descriptions(self) -> None:
        """Each score has a short verdict."""
        assert Suitability.STRONG.description == "Strong!!"
        assert Suitability.DECENT.description == "Decent?"
        assert Suitability.NEUTRAL.description == "Alright..."
        assert Suitability.WEAK.description == "Weak."
        assert Suitability.SEVERELY_WEAK.description == "Weak."


class TestTeamCounts:
    """Tests for count_weaknesses and count_strengths."""

    def test_counts(self, gen5_chart: TypeChart, team: list[Creature]) -> None:
        """Members scoring below or above neutral are counted per type."""
        weaknesses = count_weaknesses(gen5_chart, team)
        strengths = count_strengths(gen5_chart, team)

        assert set(weaknesses) == set(ALL_TYPES)
        assert weaknesses[T.GRASS] == 1
        assert strengths[T.GRASS] == 1
        assert weaknesses[T.FIRE] == 0
        assert strengths[T.FIRE] == 2

    def test_empty_team(self, gen5_chart: TypeChart) -> None:
        """An empty team counts zero everywhere."""
        assert not any(count_weaknesses(gen5_chart, []).values())

    def test_unresolved_member_raises(self, gen5_chart: TypeChart) -> None:
        """Counting refuses members without a species, naming the member."""
        with pytest.raises(UnresolvedSpeciesError, match="Ghostly"):
            count_weaknesses(gen5_chart, [Creature(nickname="Ghostly", species=None)])


class TestRanking:
    """Tests for rank_types and top_ranked."""

    @pytest.fixture
    def counts(self) -> dict[ElementalType, int]:
        """Fighting and Flying tie for first, Normal follows."""
        values = dict.fromkeys(ALL_TYPES, 0)
        values[T.NORMAL] = 1
        values[T.FIGHTING] = 3
        values[T.FLYING] = 3
        return values

    def test_descending_with_stable_ties(self, counts: dict[ElementalType, int]) -> None:
        """Ties keep ordinal order."""
        assert rank_types(counts)[:3] == [T.FIGHTING, T.FLYING, T.NORMAL]
        assert len(rank_types(counts)) == 18

    def test_top_ranked_limit(self, counts: dict[ElementalType, int]) -> None:
        """At most `limit` entries are returned."""
        assert top_ranked(counts, 2) == [(T.FIGHTING, 3), (T.FLYING, 3)]

    def test_top_ranked_skips_zero(self, counts: dict[ElementalType, int]) -> None:
        """Types with a zero count are never listed."""
        assert top_ranked(counts, 10) == [(T.FIGHTING, 3), (T.FLYING, 3), (T.NORMAL, 1)]


class TestAnalyzeAgainstType:
    """Tests for analyze_against_type."""

    def test_against_fire(self, gen5_chart: TypeChart, team: list[Creature]) -> None:
        """Water is recommended against Fire; nothing is nullified."""
        result = analyze_against_type(gen5_chart, team, T.FIRE)

        assert result["type"] == T.FIRE
        assert result["weaknesses"] == [T.GROUND, T.ROCK, T.WATER]
        assert result["recommended"] == 1
        assert result["nullified"] == 0
        assert [m["description"] for m in result["members"]] == ["Strong!!", "Decent?"]

    def test_against_water(self, gen5_chart: TypeChart, team: list[Creature]) -> None:
        """Fire is nullified against Water."""
        result = analyze_against_type(gen5_chart, team, T.WATER)

        assert result["nullified"] == 1
        assert result["members"][1]["suitability"] == Suitability.SEVERELY_WEAK


class TestBuildTeam:
    """Tests for build_team."""

    def test_drops_unresolved_members(self, caplog: pytest.LogCaptureFixture) -> None:
        """Creatures without a species are dropped and counted."""
        creatures = [_member("Wave", TypePair(T.WATER)), Creature(nickname="Ghostly", species=None)]

        with caplog.at_level(logging.WARNING):
            team, failures = build_team(creatures)

        assert [c.nickname for c in team] == ["Wave"]
        assert failures == 1
        assert "Ghostly" in caplog.text


class TestSuitabilityFrame:
    """Tests for suitability_frame."""

    def test_shape_and_values(self, gen5_chart: TypeChart, team: list[Creature]) -> None:
        """One row per member, one column per type plus identity columns."""
        df = suitability_frame(gen5_chart, team)

        assert df.shape == (2, 21)
        assert df["nickname"].to_list() == ["Wave", "Blaze"]
        assert df["Fire"].to_list() == [2, 1]
        assert df["Water"].to_list() == [1, -2]

    def test_empty_team(self, gen5_chart: TypeChart) -> None:
        """An empty team gives an empty frame with the full schema."""
        df = suitability_frame(gen5_chart, [])

        assert df.height == 0
        assert "Fairy" in df.columns
