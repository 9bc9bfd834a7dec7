"""ABOUTME: Data classes for moves, species, and team members.
ABOUTME: Contains StatBlock, MoveTarget, Move, LearnsetMove, Species, SpeciesLibrary, and Creature."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType

from pokeman.core.enums import ElementalType, MoveCategory, MoveTargetDescription
from pokeman.core.errors import UnresolvedSpeciesError
from pokeman.core.type_profile import TypePair

logger = logging.getLogger(__name__)

# Sentinels used by moves that never deal damage / never miss
NO_POWER = -1
NEVER_MISSES = -1


@dataclass(frozen=True)
class StatBlock:
    """Six battle stats, used both for base stats and for stat deltas."""

    hp: int = 0
    attack: int = 0
    defense: int = 0
    special_attack: int = 0
    special_defense: int = 0
    speed: int = 0

    def is_blank(self) -> bool:
        """True if every stat is 0."""
        return not any(
            (self.hp, self.attack, self.defense, self.special_attack, self.special_defense, self.speed)
        )


@dataclass(frozen=True)
class MoveTarget:
    """Targeting facets decoded from a MoveTargetDescription.

    Attributes:
        target_foe: The move can hit an opponent.
        target_ally: The move can hit a partner.
        target_self: The move can hit the user.
        target_adjacent: Only adjacent positions can be hit.
        target_any: The target is chosen among valid targets.
    """

    target_foe: bool = False
    target_ally: bool = False
    target_self: bool = False
    target_adjacent: bool = False
    target_any: bool = False

    @classmethod
    def from_description(cls, description: MoveTargetDescription) -> "MoveTarget":
        """Decode a target description through the fixed decode table."""
        return _TARGET_DECODE[description]


_D = MoveTargetDescription
_TARGET_DECODE = MappingProxyType(
    {
        _D.ANY_ADJACENT_FOE: MoveTarget(target_foe=True, target_adjacent=True, target_any=True),
        _D.ALL_ADJACENT_FOES: MoveTarget(target_foe=True, target_adjacent=True),
        _D.ALL_FOES: MoveTarget(target_foe=True),
        _D.ANY_OTHER: MoveTarget(target_foe=True, target_ally=True, target_any=True),
        _D.ALL_ADJACENT: MoveTarget(target_foe=True, target_ally=True, target_adjacent=True),
        _D.ALL: MoveTarget(target_foe=True, target_ally=True, target_self=True),
        _D.SELF: MoveTarget(target_self=True),
        _D.SELF_OR_ADJACENT_ALLY: MoveTarget(
            target_ally=True, target_self=True, target_adjacent=True, target_any=True
        ),
        _D.ADJACENT_ALLY: MoveTarget(target_ally=True, target_adjacent=True, target_any=True),
        _D.WHOLE_TEAM: MoveTarget(target_ally=True, target_self=True),
        _D.ANY_ADJACENT: MoveTarget(target_foe=True, target_ally=True, target_adjacent=True, target_any=True),
    }
)


@dataclass(frozen=True)
class Move:
    """A battle move.

    Attributes:
        name: Move name, also its key in the move table.
        category: Physical, Special, or Status.
        elemental_type: The move's type.
        pp: Power points.
        power: Base power, NO_POWER (-1) for moves that deal no damage.
        accuracy: Accuracy percentage, NEVER_MISSES (-1) for moves that cannot miss.
        target: Who the move can be aimed at.
        self_stat_changes: Stat stages applied to the user.
        target_stat_changes: Stat stages applied to the target.
    """

    name: str
    category: MoveCategory
    elemental_type: ElementalType
    pp: int
    power: int = NO_POWER
    accuracy: int = NEVER_MISSES
    target: MoveTargetDescription = MoveTargetDescription.ANY_ADJACENT
    self_stat_changes: StatBlock = field(default_factory=StatBlock)
    target_stat_changes: StatBlock = field(default_factory=StatBlock)

    @property
    def target_scope(self) -> MoveTarget:
        """Decoded targeting facets."""
        return MoveTarget.from_description(self.target)


@dataclass
class LearnsetMove:
    """Entry in a species' learnset."""

    move_name: str
    machine: bool = False
    tutor: bool = False
    tutor_memo: str = ""
    level: int = 0
    """Level the move is learned at, 0 if not learned by leveling."""

    def set_as_tutorable(self, memo: str) -> None:
        """Mark the move as taught by a tutor, with a note on where."""
        self.tutor = True
        self.tutor_memo = memo


@dataclass(frozen=True)
class Species:
    """Immutable species record."""

    number: int
    name: str
    typing: TypePair
    base_stats: StatBlock = field(default_factory=StatBlock)
    learnset: tuple[LearnsetMove, ...] = ()

    @property
    def movepool(self) -> list[str]:
        """Learnable move names, in learnset order."""
        return [entry.move_name for entry in self.learnset]


class SpeciesLibrary:
    """Species keyed by dex number, with a name index."""

    def __init__(self) -> None:
        self._by_number: dict[int, Species] = {}
        self._number_by_name: dict[str, int] = {}

    def set(self, number: int, species: Species) -> None:
        """Add or replace the species stored under `number`."""
        self._by_number[number] = species
        self._number_by_name[species.name] = number

    def get(self, key: int | str) -> Species | None:
        """Retrieve a species by dex number or by name, None if absent."""
        if isinstance(key, str):
            if key not in self._number_by_name:
                logger.debug("Species '%s' not found", key)
                return None
            key = self._number_by_name[key]
        return self._by_number.get(key)

    def __len__(self) -> int:
        return len(self._by_number)

    def __iter__(self):  # type: ignore[no-untyped-def]
        return iter(self._by_number.values())


@dataclass
class Creature:
    """A team member.

    Attributes:
        nickname: Name given to the creature.
        species: Species record, None if the roster entry could not be resolved.
        reserved_moves: Moves that must occupy the first slots, in slot order.
    """

    nickname: str
    species: Species | None
    reserved_moves: list[str] = field(default_factory=list)

    def require_species(self) -> Species:
        """Return the species, raising UnresolvedSpeciesError if it is missing."""
        if self.species is None:
            raise UnresolvedSpeciesError(self.nickname)
        return self.species

    def __str__(self) -> str:
        if self.species is None:
            return f"'{self.nickname}'  ???  ???"
        return f"'{self.nickname}'  {self.species.name}  {self.species.typing}"
