# ABOUTME: Derived read queries over a TypeChart: weaknesses, strengths, immunities.
# ABOUTME: Also provides cross effectiveness of one typing attacking another.

from typing import Any

from pokeman.core.enums import ALL_TYPES, EffectivenessFactor, ElementalType
from pokeman.core.type_chart import TypeChart
from pokeman.core.type_profile import TypePair, as_type_pair

Typing = TypePair | ElementalType


def is_strong_factor(factor: EffectivenessFactor) -> bool:
    """True for resisted matchups: 0x, 1/4x, or 1/2x."""
    return EffectivenessFactor.ZERO <= factor <= EffectivenessFactor.HALF


def is_weak_factor(factor: EffectivenessFactor) -> bool:
    """True for super-effective matchups: 2x or 4x."""
    return factor in (EffectivenessFactor.TWO, EffectivenessFactor.FOUR)


def get_defensive_weaknesses(chart: TypeChart, typing: Typing, include_neutral: bool = False) -> list[ElementalType]:
    """Return attacking types that deal more than 1x to the typing.

    Args:
        chart: Type chart to query.
        typing: The defending typing.
        include_neutral: Also include attacking types that deal exactly 1x.

    Returns:
        Attacking types in ordinal order.

    Raises:
        UnsetTypeError: If the typing uses an unregistered type.
    """
    profile = chart.get_profile(typing)
    return [
        atk_type
        for atk_type in ALL_TYPES
        if profile.is_weak_against(atk_type)
        or (include_neutral and profile.factor_against(atk_type) == EffectivenessFactor.ONE)
    ]


def get_defensive_strengths(chart: TypeChart, typing: Typing, include_neutral: bool = False) -> list[ElementalType]:
    """Return attacking types that deal less than 1x (immunities included) to the typing.

    Args:
        chart: Type chart to query.
        typing: The defending typing.
        include_neutral: Also include attacking types that deal exactly 1x.

    Returns:
        Attacking types in ordinal order.
    """
    profile = chart.get_profile(typing)
    return [
        atk_type
        for atk_type in ALL_TYPES
        if profile.is_strong_against(atk_type)
        or (include_neutral and profile.factor_against(atk_type) == EffectivenessFactor.ONE)
    ]


def get_defensive_immunities(chart: TypeChart, typing: Typing) -> list[ElementalType]:
    """Return attacking types that deal no damage to the typing."""
    profile = chart.get_profile(typing)
    return [atk_type for atk_type in ALL_TYPES if profile.is_immune_to(atk_type)]


def _offensive_weaknesses_mono(chart: TypeChart, atk_type: ElementalType, include_neutral: bool) -> list[ElementalType]:
    result: list[ElementalType] = []
    for def_type in chart.registered_types():
        profile = chart.get_profile(def_type)
        if profile.is_weak_against(atk_type) or (
            include_neutral and profile.factor_against(atk_type) == EffectivenessFactor.ONE
        ):
            result.append(def_type)
    return result


def _offensive_strengths_mono(chart: TypeChart, atk_type: ElementalType, include_neutral: bool) -> list[ElementalType]:
    result: list[ElementalType] = []
    for def_type in chart.registered_types():
        profile = chart.get_profile(def_type)
        if profile.is_strong_against(atk_type) or (
            include_neutral and profile.factor_against(atk_type) == EffectivenessFactor.ONE
        ):
            result.append(def_type)
    return result


def _offensive_immunities_mono(chart: TypeChart, atk_type: ElementalType) -> list[ElementalType]:
    return [def_type for def_type in chart.registered_types() if chart.get_profile(def_type).is_immune_to(atk_type)]


def _merge(first: list[ElementalType], second: list[ElementalType]) -> list[ElementalType]:
    """Sorted union without duplicates."""
    return sorted(set(first) | set(second))


def get_offensive_weaknesses(chart: TypeChart, typing: Typing, include_neutral: bool = False) -> list[ElementalType]:
    """Return defending types that are weak to the typing's attacks.

    For a dual typing, the two single-type results are merged and every
    type in the combined offensive strengths is then removed, since the
    combined strengths win over the per-type union.

    Args:
        chart: Type chart to query.
        typing: The attacking typing.
        include_neutral: Also include defending types that take exactly 1x.

    Returns:
        Defending types in ordinal order. Unregistered types are never listed.
    """
    pair = as_type_pair(typing)
    weaknesses = _offensive_weaknesses_mono(chart, pair.first, include_neutral)

    if pair.second is not None:
        weaknesses = _merge(weaknesses, _offensive_weaknesses_mono(chart, pair.second, include_neutral))
        strengths = set(get_offensive_strengths(chart, pair))
        weaknesses = [t for t in weaknesses if t not in strengths]

    return weaknesses


def get_offensive_strengths(chart: TypeChart, typing: Typing, include_neutral: bool = False) -> list[ElementalType]:
    """Return defending types that resist the typing's attacks.

    Args:
        chart: Type chart to query.
        typing: The attacking typing.
        include_neutral: Also include defending types that take exactly 1x.

    Returns:
        Defending types in ordinal order, merged across both types of a dual typing.
    """
    pair = as_type_pair(typing)
    strengths = _offensive_strengths_mono(chart, pair.first, include_neutral)

    if pair.second is not None:
        strengths = _merge(strengths, _offensive_strengths_mono(chart, pair.second, include_neutral))

    return strengths


def get_offensive_immunities(chart: TypeChart, typing: Typing) -> list[ElementalType]:
    """Return defending types that take no damage from the typing's attacks."""
    pair = as_type_pair(typing)
    immunities = _offensive_immunities_mono(chart, pair.first)

    if pair.second is not None:
        immunities = _merge(immunities, _offensive_immunities_mono(chart, pair.second))

    return immunities


def is_weak_to(chart: TypeChart, typing: Typing, atk_type: ElementalType) -> bool:
    """True if `atk_type` deals more than 1x to the typing."""
    return chart.get_profile(typing).is_weak_against(atk_type)


def is_strong_to(chart: TypeChart, typing: Typing, atk_type: ElementalType) -> bool:
    """True if `atk_type` deals less than 1x to the typing."""
    return chart.get_profile(typing).is_strong_against(atk_type)


def is_immune_to(chart: TypeChart, typing: Typing, atk_type: ElementalType) -> bool:
    """True if `atk_type` deals no damage to the typing."""
    return chart.get_profile(typing).is_immune_to(atk_type)


def get_cross_effectiveness(chart: TypeChart, attacker: Typing, defender: Typing) -> EffectivenessFactor:
    """Offensive factor of one typing attacking another.

    A dual-typed attacker uses whichever of its types hits harder.

    Args:
        chart: Type chart to query.
        attacker: The attacking typing.
        defender: The defending typing.

    Returns:
        The effectiveness factor.

    Raises:
        UnsetTypeError: If the defender uses an unregistered type.
    """
    profile = chart.get_profile(defender)
    return max(profile.factor_against(atk_type) for atk_type in as_type_pair(attacker))


def score_defensive_typing(chart: TypeChart, typing: Typing) -> dict[str, Any]:
    """Bucket every attacking type by how it fares against the typing.

    Args:
        chart: Type chart to query.
        typing: The defending typing.

    Returns:
        Dictionary containing:
        - immunities: Attacking types dealing 0x.
        - resistances: Attacking types dealing 1/4x or 1/2x.
        - neutral: Attacking types dealing 1x.
        - weaknesses: Attacking types dealing 2x or 4x.
        - immunity_count, resistance_count, neutral_count, weakness_count.
    """
    profile = chart.get_profile(typing)
    immunities: list[ElementalType] = []
    resistances: list[ElementalType] = []
    neutral: list[ElementalType] = []
    weaknesses: list[ElementalType] = []

    for atk_type in ALL_TYPES:
        factor = profile.factor_against(atk_type)

        if factor == EffectivenessFactor.ZERO:
            immunities.append(atk_type)
        elif factor < EffectivenessFactor.ONE:
            resistances.append(atk_type)
        elif factor == EffectivenessFactor.ONE:
            neutral.append(atk_type)
        else:
            weaknesses.append(atk_type)

    return {
        "immunities": immunities,
        "resistances": resistances,
        "neutral": neutral,
        "weaknesses": weaknesses,
        "immunity_count": len(immunities),
        "resistance_count": len(resistances),
        "neutral_count": len(neutral),
        "weakness_count": len(weaknesses),
    }
