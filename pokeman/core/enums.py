# ABOUTME: Closed enumerations for elemental types, effectiveness factors, and move metadata.
# ABOUTME: Name lookups are immutable tables built once at import time.

from enum import Enum, IntEnum
from types import MappingProxyType

from pokeman.core.errors import PrecisionError


class ElementalType(IntEnum):
    """The 18 elemental types. Ordinal order drives every tie-break."""

    NORMAL = 0
    FIGHTING = 1
    FLYING = 2
    POISON = 3
    GROUND = 4
    ROCK = 5
    BUG = 6
    GHOST = 7
    STEEL = 8
    FIRE = 9
    WATER = 10
    GRASS = 11
    ELECTRIC = 12
    PSYCHIC = 13
    ICE = 14
    DRAGON = 15
    DARK = 16
    FAIRY = 17

    @property
    def label(self) -> str:
        """Display name, e.g. "Fire"."""
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "ElementalType | None":
        """Look up a type by its display name (case-sensitive).

        Returns None when the name is not a known type.
        """
        return _TYPES_BY_NAME.get(name)


_TYPES_BY_NAME = MappingProxyType({t.label: t for t in ElementalType})

ALL_TYPES: tuple[ElementalType, ...] = tuple(ElementalType)


class EffectivenessFactor(IntEnum):
    """Discrete damage multipliers, ordered from weakest to strongest."""

    ZERO = 0
    QUARTER = 1
    HALF = 2
    ONE = 3
    TWO = 4
    FOUR = 5

    @property
    def multiplier(self) -> float:
        """Real-valued multiplier for this code."""
        return _MULTIPLIERS[self]

    @property
    def times(self) -> str:
        """Short notation, e.g. "1/2x"."""
        return _TIMES_NAMES[self]

    @property
    def description(self) -> str:
        """Adjective describing the matchup, e.g. "super effective"."""
        return _DESCRIPTIONS[self]

    @classmethod
    def from_multiplier(cls, value: float) -> "EffectivenessFactor":
        """Encode a real multiplier as a factor code.

        Args:
            value: Real multiplier, expected to be exactly one of 0, 0.25, 0.5, 1, 2, 4.

        Returns:
            The matching factor code.

        Raises:
            PrecisionError: If the value is not exactly representable.
        """
        for code, multiplier in _MULTIPLIERS.items():
            if value == multiplier:
                return code
        raise PrecisionError(f"Multiplier {value!r} is not a representable effectiveness factor")


_MULTIPLIERS = MappingProxyType(
    {
        EffectivenessFactor.ZERO: 0.0,
        EffectivenessFactor.QUARTER: 0.25,
        EffectivenessFactor.HALF: 0.5,
        EffectivenessFactor.ONE: 1.0,
        EffectivenessFactor.TWO: 2.0,
        EffectivenessFactor.FOUR: 4.0,
    }
)

_TIMES_NAMES = MappingProxyType(
    {
        EffectivenessFactor.ZERO: "0x",
        EffectivenessFactor.QUARTER: "1/4x",
        EffectivenessFactor.HALF: "1/2x",
        EffectivenessFactor.ONE: "1x",
        EffectivenessFactor.TWO: "2x",
        EffectivenessFactor.FOUR: "4x",
    }
)

_DESCRIPTIONS = MappingProxyType(
    {
        EffectivenessFactor.ZERO: "immune",
        EffectivenessFactor.QUARTER: "doubly resistant",
        EffectivenessFactor.HALF: "not very effective",
        EffectivenessFactor.ONE: "regular",
        EffectivenessFactor.TWO: "super effective",
        EffectivenessFactor.FOUR: "doubly weak",
    }
)


class MoveCategory(Enum):
    """Damage class of a move."""

    PHYSICAL = "Physical"
    SPECIAL = "Special"
    STATUS = "Status"

    @classmethod
    def from_name(cls, name: str) -> "MoveCategory | None":
        """Look up a category by display name, None if unknown."""
        return _CATEGORIES_BY_NAME.get(name)


_CATEGORIES_BY_NAME = MappingProxyType({c.value: c for c in MoveCategory})


class MoveTargetDescription(Enum):
    """Who a move can be aimed at, as printed in move listings."""

    ANY_ADJACENT_FOE = "Any Adjacent Foe"
    ALL_ADJACENT_FOES = "All Adjacent Foes"
    ALL_FOES = "All Foes"
    ANY_OTHER = "Any Other"
    ALL_ADJACENT = "All Adjacent"
    ALL = "All"
    SELF = "Self"
    SELF_OR_ADJACENT_ALLY = "Self Or Adjacent Ally"
    ADJACENT_ALLY = "Adjacent Ally"
    WHOLE_TEAM = "Whole Team"
    ANY_ADJACENT = "Any Adjacent"

    @classmethod
    def from_name(cls, name: str) -> "MoveTargetDescription | None":
        """Look up a target description by display name, None if unknown."""
        return _TARGETS_BY_NAME.get(name)


_TARGETS_BY_NAME = MappingProxyType({d.value: d for d in MoveTargetDescription})
