# ABOUTME: Defensive type profiles, their multiplicative composition, and type pairs.
# ABOUTME: A profile records the factor taken from each of the 18 attacking types.

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pokeman.core.enums import ALL_TYPES, EffectivenessFactor, ElementalType


@dataclass(frozen=True)
class TypeProfile:
    """Damage factors a typing takes when attacked by each elemental type.

    Attributes:
        defending: Factor taken from each attacking type. Types missing at
            construction default to 1x, so every profile has 18 entries.
        type_count: Number of elemental types combined into this profile
            (1 = mono, 2 = dual).
    """

    defending: Mapping[ElementalType, EffectivenessFactor] = field(default_factory=dict)
    type_count: int = 1

    def __post_init__(self) -> None:
        full = {t: self.defending.get(t, EffectivenessFactor.ONE) for t in ALL_TYPES}
        object.__setattr__(self, "defending", MappingProxyType(full))

    @classmethod
    def from_multipliers(cls, multipliers: Mapping[ElementalType, float], type_count: int = 1) -> "TypeProfile":
        """Build a profile from real-valued multipliers.

        Raises:
            PrecisionError: If a multiplier is not one of the six factors.
        """
        return cls(
            {t: EffectivenessFactor.from_multiplier(value) for t, value in multipliers.items()},
            type_count,
        )

    def factor_against(self, attacking_type: ElementalType) -> EffectivenessFactor:
        """Factor taken from `attacking_type`."""
        return self.defending[attacking_type]

    def is_weak_against(self, attacking_type: ElementalType) -> bool:
        """True if `attacking_type` deals more than 1x."""
        return self.defending[attacking_type] > EffectivenessFactor.ONE

    def is_strong_against(self, attacking_type: ElementalType) -> bool:
        """True if `attacking_type` deals less than 1x (immunities included)."""
        return self.defending[attacking_type] < EffectivenessFactor.ONE

    def is_immune_to(self, attacking_type: ElementalType) -> bool:
        """True if `attacking_type` deals no damage."""
        return self.defending[attacking_type] == EffectivenessFactor.ZERO

    def is_valid_composition(self) -> bool:
        """False if this profile was composed from more than two types."""
        return self.type_count in (1, 2)


def compose(first: TypeProfile, second: TypeProfile) -> TypeProfile:
    """Combine two profiles into the profile of a dual typing.

    Factors are multiplied per attacking type and re-encoded. Composing a
    profile with an equal one returns it unchanged. The resulting type count
    is the sum of both counts; check `is_valid_composition` on the result.

    Args:
        first: Profile of the first type.
        second: Profile of the second type.

    Returns:
        The composite profile.

    Raises:
        PrecisionError: If any product is not a representable factor.
    """
    if first == second:
        return first

    defending = {
        t: EffectivenessFactor.from_multiplier(first.defending[t].multiplier * second.defending[t].multiplier)
        for t in ALL_TYPES
    }
    return TypeProfile(defending, first.type_count + second.type_count)


@dataclass(frozen=True)
class TypePair:
    """The typing an entity carries: one type, or two distinct types.

    Attributes:
        first: Primary type.
        second: Secondary type, None for a monotype. A second type equal to
            the first is dropped.
    """

    first: ElementalType
    second: ElementalType | None = None

    def __post_init__(self) -> None:
        if self.second == self.first:
            object.__setattr__(self, "second", None)

    @property
    def is_dual(self) -> bool:
        """True if the pair holds two distinct types."""
        return self.second is not None

    def __iter__(self) -> Iterator[ElementalType]:
        yield self.first
        if self.second is not None:
            yield self.second

    def __str__(self) -> str:
        return "/".join(t.label for t in self)


def as_type_pair(typing: "TypePair | ElementalType") -> TypePair:
    """Wrap a bare elemental type as a monotype pair."""
    if isinstance(typing, TypePair):
        return typing
    return TypePair(typing)
