# ABOUTME: Unit tests for the type chart and the effectiveness queries over it.
# ABOUTME: Tests registration, defensive/offensive queries, cross effectiveness, and the shipped chart.

import pytest

from pokeman.core import (
    EffectivenessFactor,
    ElementalType,
    TypeChart,
    TypePair,
    TypeProfile,
    UnsetTypeError,
    get_cross_effectiveness,
    get_defensive_immunities,
    get_defensive_strengths,
    get_defensive_weaknesses,
    get_offensive_immunities,
    get_offensive_strengths,
    get_offensive_weaknesses,
    is_immune_to,
    is_strong_factor,
    is_strong_to,
    is_weak_factor,
    is_weak_to,
    score_defensive_typing,
)

F = EffectivenessFactor
T = ElementalType


def _chart(profiles: dict[ElementalType, dict[ElementalType, float]]) -> TypeChart:
    chart = TypeChart()
    for def_type, multipliers in profiles.items():
        chart.set_type(def_type, TypeProfile.from_multipliers(multipliers))
    return chart


class TestTypeChart:
    """Tests for TypeChart registration and lookup."""

    def test_unregistered_type_raises(self) -> None:
        """Querying a type that was never set raises UnsetTypeError."""
        chart = _chart({T.NORMAL: {}})

        with pytest.raises(UnsetTypeError):
            chart.get_profile(T.FIRE)

        with pytest.raises(KeyError):
            chart.get_profile(TypePair(T.NORMAL, T.FIRE))

    def test_is_complete(self) -> None:
        """A chart is complete once all 18 types are registered."""
        chart = _chart({t: {} for t in T if t != T.FAIRY})
        assert not chart.is_complete()

        chart.set_type(T.FAIRY, TypeProfile())
        assert chart.is_complete()

    def test_registered_types_in_ordinal_order(self) -> None:
        """Registered types are listed in ordinal order, not insertion order."""
        chart = _chart({T.DARK: {}, T.NORMAL: {}, T.FIRE: {}})

        assert chart.registered_types() == [T.NORMAL, T.FIRE, T.DARK]

    def test_set_type_overwrites(self) -> None:
        """Setting a type twice keeps the latest profile."""
        chart = _chart({T.NORMAL: {T.FIGHTING: 2}})
        chart.set_type(T.NORMAL, TypeProfile())

        assert chart.get_profile(T.NORMAL).factor_against(T.FIGHTING) == F.ONE

    def test_dual_profile_is_composed(self, gen5_chart: TypeChart) -> None:
        """A dual typing resolves to the product of both profiles."""
        profile = gen5_chart.get_profile(TypePair(T.GROUND, T.ROCK))

        assert profile.factor_against(T.WATER) == F.FOUR
        assert profile.factor_against(T.ELECTRIC) == F.ZERO
        assert profile.type_count == 2


class TestFactorPredicates:
    """Tests for is_strong_factor and is_weak_factor."""

    @pytest.mark.parametrize(
        ("factor", "strong", "weak"),
        [
            (F.ZERO, True, False),
            (F.QUARTER, True, False),
            (F.HALF, True, False),
            (F.ONE, False, False),
            (F.TWO, False, True),
            (F.FOUR, False, True),
        ],
    )
    def test_classification(self, factor: EffectivenessFactor, strong: bool, weak: bool) -> None:
        """Resisted factors are strong, super-effective factors are weak."""
        assert is_strong_factor(factor) is strong
        assert is_weak_factor(factor) is weak


class TestDefensiveQueries:
    """Tests for defensive weaknesses, strengths, and immunities."""

    def test_normal_and_dark(self) -> None:
        """Immunities count as strengths; counts follow the profile."""
        chart = _chart(
            {
                T.NORMAL: {T.FIGHTING: 2, T.GHOST: 0},
                T.DARK: {T.FIGHTING: 2, T.BUG: 2, T.GHOST: 0.5, T.PSYCHIC: 0, T.DARK: 0.5, T.FAIRY: 2},
            }
        )

        assert get_defensive_immunities(chart, T.NORMAL) == [T.GHOST]
        assert get_defensive_weaknesses(chart, T.NORMAL) == [T.FIGHTING]
        assert get_defensive_strengths(chart, T.NORMAL) == [T.GHOST]

        assert len(get_defensive_immunities(chart, T.DARK)) == 1
        assert len(get_defensive_strengths(chart, T.DARK)) == 3
        assert len(get_defensive_weaknesses(chart, T.DARK)) == 3

    def test_include_neutral(self) -> None:
        """include_neutral adds every 1x attacker."""
        chart = _chart({T.NORMAL: {T.FIGHTING: 2, T.GHOST: 0}})

        weaknesses = get_defensive_weaknesses(chart, T.NORMAL, include_neutral=True)
        strengths = get_defensive_strengths(chart, T.NORMAL, include_neutral=True)

        assert T.GHOST not in weaknesses
        assert len(weaknesses) == 17
        assert T.FIGHTING not in strengths
        assert len(strengths) == 17

    def test_flying_water(self) -> None:
        """Water/Flying is immune to Ground and weak only to Rock and Electric."""
        chart = _chart(
            {
                T.FLYING: {T.FIGHTING: 0.5, T.GROUND: 0, T.ROCK: 2, T.BUG: 0.5, T.GRASS: 0.5, T.ELECTRIC: 2, T.ICE: 2},
                T.WATER: {T.STEEL: 0.5, T.FIRE: 0.5, T.WATER: 0.5, T.GRASS: 2, T.ELECTRIC: 2, T.ICE: 0.5},
            }
        )
        typing = TypePair(T.FLYING, T.WATER)

        assert get_defensive_immunities(chart, typing)[0] == T.GROUND
        assert get_defensive_weaknesses(chart, typing) == [T.ROCK, T.ELECTRIC]

    def test_composite_strengths_and_immunities(self) -> None:
        """A 2x weakness cancelled by an immunity leaves an immunity."""
        chart = _chart({T.NORMAL: {T.NORMAL: 0.5}, T.FIGHTING: {T.NORMAL: 2, T.FIGHTING: 0}})
        typing = TypePair(T.NORMAL, T.FIGHTING)

        assert not is_strong_to(chart, typing, T.NORMAL)
        assert is_strong_to(chart, typing, T.FIGHTING)
        assert is_immune_to(chart, typing, T.FIGHTING)


class TestOffensiveQueries:
    """Tests for offensive weaknesses, strengths, and immunities."""

    def test_mono_weaknesses(self, gen5_chart: TypeChart) -> None:
        """Fire hits Bug, Steel, Grass, and Ice super effectively."""
        assert get_offensive_weaknesses(gen5_chart, T.FIRE) == [T.BUG, T.STEEL, T.GRASS, T.ICE]

    def test_mono_immunities(self, gen5_chart: TypeChart) -> None:
        """Defending types immune to an attacking type."""
        assert get_offensive_immunities(gen5_chart, T.GROUND) == [T.FLYING]
        assert get_offensive_immunities(gen5_chart, T.NORMAL) == [T.GHOST]

    def test_dual_strengths_are_merged(self, gen5_chart: TypeChart) -> None:
        """Resisting types of both attacking types are merged without duplicates."""
        strengths = get_offensive_strengths(gen5_chart, TypePair(T.FIRE, T.WATER))

        assert strengths == [T.ROCK, T.FIRE, T.WATER, T.GRASS, T.DRAGON]

    def test_dual_weaknesses_drop_combined_strengths(self, gen5_chart: TypeChart) -> None:
        """Types resisting either attacking type are removed from the merged weaknesses."""
        weaknesses = get_offensive_weaknesses(gen5_chart, TypePair(T.FIRE, T.WATER))

        assert weaknesses == [T.GROUND, T.BUG, T.STEEL, T.ICE]

    def test_unregistered_defenders_are_skipped(self) -> None:
        """Offensive queries only consider registered defending types."""
        chart = _chart({T.GRASS: {T.FIRE: 2}})

        assert get_offensive_weaknesses(chart, T.FIRE) == [T.GRASS]
        assert get_offensive_strengths(chart, T.FIRE) == []


class TestCrossEffectiveness:
    """Tests for get_cross_effectiveness."""

    @pytest.fixture
    def chart(self) -> TypeChart:
        """Three types: Normal, Fighting, and Flying with hand-made profiles."""
        return _chart(
            {
                T.NORMAL: {T.FLYING: 2},
                T.FIGHTING: {T.NORMAL: 2, T.FLYING: 0.5},
                T.FLYING: {T.NORMAL: 2},
            }
        )

    @pytest.mark.parametrize(
        ("attacker", "defender", "expected"),
        [
            (T.FIGHTING, T.NORMAL, F.ONE),
            (T.NORMAL, T.FIGHTING, F.TWO),
            (T.NORMAL, T.FLYING, F.TWO),
            (T.FLYING, T.NORMAL, F.TWO),
            (TypePair(T.FIGHTING, T.FLYING), T.NORMAL, F.TWO),
            (T.NORMAL, TypePair(T.FIGHTING, T.FLYING), F.FOUR),
            (TypePair(T.NORMAL, T.FIGHTING), T.FLYING, F.TWO),
            (T.FLYING, TypePair(T.NORMAL, T.FIGHTING), F.ONE),
        ],
    )
    def test_cross(
        self,
        chart: TypeChart,
        attacker: TypePair | ElementalType,
        defender: TypePair | ElementalType,
        expected: EffectivenessFactor,
    ) -> None:
        """Dual attackers use their best type; dual defenders use the composed profile."""
        assert get_cross_effectiveness(chart, attacker, defender) == expected

    def test_gen5_four_times(self, gen5_chart: TypeChart) -> None:
        """Water against Ground/Rock is 4x."""
        assert get_cross_effectiveness(gen5_chart, T.WATER, TypePair(T.GROUND, T.ROCK)) == F.FOUR


class TestGen5Chart:
    """Checks against well-known matchups of the shipped chart."""

    def test_chart_is_complete(self, gen5_chart: TypeChart) -> None:
        """All 18 types are present."""
        assert gen5_chart.is_complete()

    def test_normal(self, gen5_chart: TypeChart) -> None:
        """Normal is weak to Fighting and immune to Ghost."""
        assert is_weak_to(gen5_chart, T.NORMAL, T.FIGHTING)
        assert is_immune_to(gen5_chart, T.NORMAL, T.GHOST)
        assert is_strong_to(gen5_chart, T.NORMAL, T.GHOST)

    def test_fighting(self, gen5_chart: TypeChart) -> None:
        """Fighting resists Bug, Dark, Rock and is weak to Flying, Psychic."""
        for atk_type in (T.BUG, T.DARK, T.ROCK):
            assert is_strong_to(gen5_chart, T.FIGHTING, atk_type)
        for atk_type in (T.FLYING, T.PSYCHIC):
            assert is_weak_to(gen5_chart, T.FIGHTING, atk_type)

    def test_flying(self, gen5_chart: TypeChart) -> None:
        """Flying resists Bug, Fighting, Grass, is weak to Electric, Ice, Rock, immune to Ground."""
        for atk_type in (T.BUG, T.FIGHTING, T.GRASS):
            assert is_strong_to(gen5_chart, T.FLYING, atk_type)
        for atk_type in (T.ELECTRIC, T.ICE, T.ROCK):
            assert is_weak_to(gen5_chart, T.FLYING, atk_type)
        assert is_immune_to(gen5_chart, T.FLYING, T.GROUND)

    @pytest.mark.parametrize(
        ("typing", "weak_to"),
        [
            (TypePair(T.FIRE, T.FIGHTING), [T.FLYING, T.GROUND, T.WATER]),
            (TypePair(T.BUG, T.GRASS), [T.POISON, T.ROCK, T.BUG, T.ICE, T.FLYING, T.FIRE]),
            (TypePair(T.GROUND, T.DARK), [T.BUG, T.WATER, T.GRASS, T.ICE]),
            (TypePair(T.WATER, T.FLYING), [T.ROCK, T.ELECTRIC]),
        ],
    )
    def test_dual_weaknesses(self, gen5_chart: TypeChart, typing: TypePair, weak_to: list[ElementalType]) -> None:
        """Dual typings are weak to the expected attacking types."""
        for atk_type in weak_to:
            assert is_weak_to(gen5_chart, typing, atk_type)

    def test_bug_grass_four_times(self, gen5_chart: TypeChart) -> None:
        """Bug/Grass takes 4x from Fire and Flying."""
        profile = gen5_chart.get_profile(TypePair(T.BUG, T.GRASS))

        assert profile.factor_against(T.FIRE) == F.FOUR
        assert profile.factor_against(T.FLYING) == F.FOUR


class TestScoreDefensiveTyping:
    """Tests for score_defensive_typing."""

    def test_normal(self, gen5_chart: TypeChart) -> None:
        """Normal has one immunity, one weakness, no resistances."""
        result = score_defensive_typing(gen5_chart, T.NORMAL)

        assert result["immunities"] == [T.GHOST]
        assert result["weaknesses"] == [T.FIGHTING]
        assert result["resistance_count"] == 0
        assert result["neutral_count"] == 16

    def test_counts_cover_all_types(self, gen5_chart: TypeChart) -> None:
        """Every attacking type lands in exactly one bucket."""
        result = score_defensive_typing(gen5_chart, TypePair(T.STEEL, T.FLYING))
        total = result["immunity_count"] + result["resistance_count"] + result["neutral_count"]

        assert total + result["weakness_count"] == 18
