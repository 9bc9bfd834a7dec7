# ABOUTME: Picks a four-slot moveset for a creature from its movepool.
# ABOUTME: Filters moves by STAB, damage, and stat effects, then fills role slots with candidates.

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from pokeman.analysis.move_rating import get_move_ratings, suited_to_physical, suited_to_special
from pokeman.core.effectiveness import get_defensive_strengths, get_offensive_weaknesses, is_weak_to
from pokeman.core.enums import ElementalType, MoveCategory
from pokeman.core.errors import MoveNotFoundError
from pokeman.core.models import Creature, Move
from pokeman.core.type_chart import TypeChart
from pokeman.core.type_profile import TypePair, as_type_pair

logger = logging.getLogger(__name__)

SLOT_COUNT = 4
SLOT_CANDIDATE_LIMIT = 10
LOCKED_LABEL = "LOCKED"

MONO_TYPE_LABELS = ("Bread n Butter STAB", "High Powered STAB", "Utility", "Non damaging")
DUAL_TYPE_LABELS = ("First type STAB", "Second type STAB", "Utility", "Non damaging")


def _get_move(moves: Mapping[str, Move], move_name: str) -> Move:
    if move_name not in moves:
        raise MoveNotFoundError(move_name)
    return moves[move_name]


def is_non_damaging(move: Move) -> bool:
    """True for moves without power or in the Status category."""
    return move.power < 0 or move.category == MoveCategory.STATUS


def has_stat_modifier(move: Move) -> bool:
    """True if the move changes any stat of the user or the target."""
    return not move.self_stat_changes.is_blank() or not move.target_stat_changes.is_blank()


def is_utility(move: Move) -> bool:
    """True for non-damaging moves that do not touch stats."""
    return is_non_damaging(move) and not has_stat_modifier(move)


def is_stab(move: Move, typing: TypePair | ElementalType) -> bool:
    """Whether the move gets the same-type attack bonus for the typing.

    Only damaging moves that can hit a foe qualify.
    """
    if not move.target_scope.target_foe or is_non_damaging(move):
        return False
    return move.elemental_type in as_type_pair(typing)


def get_strong_moves(chart: TypeChart, creature: Creature, moves: Mapping[str, Move]) -> list[str]:
    """Find movepool moves worth considering for the creature.

    A move is kept if it is a status move, or if it hits super effectively
    at least one type the creature takes at most neutral damage from.

    Args:
        chart: Type chart to query.
        creature: Creature with a resolved species.
        moves: Move table keyed by name.

    Returns:
        Move names in movepool order.

    Raises:
        MoveNotFoundError: If a movepool entry is missing from the move table.
        UnresolvedSpeciesError: If the creature has no species.
    """
    species = creature.require_species()
    types_of_interest = get_defensive_strengths(chart, species.typing, include_neutral=True)

    strong_moves: list[str] = []
    for move_name in species.movepool:
        move = _get_move(moves, move_name)
        for def_type in types_of_interest:
            if move.category == MoveCategory.STATUS or is_weak_to(chart, def_type, move.elemental_type):
                strong_moves.append(move_name)
                break
    return strong_moves


def filter_moves_by_category(move_names: Iterable[str], category: MoveCategory, moves: Mapping[str, Move]) -> list[str]:
    """Keep moves of the given damage class."""
    return [name for name in move_names if _get_move(moves, name).category == category]


def filter_moves_by_stab(
    move_names: Iterable[str], typing: TypePair | ElementalType, moves: Mapping[str, Move]
) -> list[str]:
    """Keep moves that get the same-type bonus for the typing."""
    return [name for name in move_names if is_stab(_get_move(moves, name), typing)]


def filter_moves_by_non_damaging(move_names: Iterable[str], moves: Mapping[str, Move]) -> list[str]:
    """Keep moves that deal no direct damage."""
    return [name for name in move_names if is_non_damaging(_get_move(moves, name))]


def filter_moves_by_utility(move_names: Iterable[str], moves: Mapping[str, Move]) -> list[str]:
    """Keep non-damaging moves with no stat changes."""
    return [name for name in move_names if is_utility(_get_move(moves, name))]


def filter_stat_change_moves(move_names: Iterable[str], creature: Creature, moves: Mapping[str, Move]) -> list[str]:
    """Keep moves that raise the attacking stat the creature favours."""
    physical = suited_to_physical(creature)
    special = suited_to_special(creature)

    filtered: list[str] = []
    for name in move_names:
        boosts = _get_move(moves, name).self_stat_changes
        if (boosts.attack > 0 and physical) or (boosts.special_attack > 0 and special):
            filtered.append(name)
    return filtered


class MoveRankings:
    """Rated moves of one creature, queried per moveset role.

    Ratings keep insertion order. No pick sorts by rating, PP, or power yet;
    candidates come back in the order they were rated.
    """

    def __init__(self, ratings: Mapping[str, float], moves: Mapping[str, Move]) -> None:
        self._ratings = ratings
        self._moves = moves

    def moves_rated_at_least(self, min_rating: float = 0.0) -> list[str]:
        """Move names whose rating is at least `min_rating`."""
        return [name for name, rating in self._ratings.items() if rating >= min_rating]

    def pick_stab_with_high_pp(self, elemental_type: ElementalType) -> list[str]:
        """STAB candidates for a single type."""
        return filter_moves_by_stab(self.moves_rated_at_least(), elemental_type, self._moves)

    def pick_stab_with_high_power(self, elemental_type: ElementalType) -> list[str]:
        """STAB candidates for a single type, for the power-oriented slot."""
        return self.pick_stab_with_high_pp(elemental_type)

    def pick_non_stab_but_strong(self, typing: TypePair) -> list[str]:
        """Damaging candidates that get no same-type bonus."""
        candidates = self.moves_rated_at_least()
        stab = set(filter_moves_by_stab(candidates, typing, self._moves))
        non_damaging = set(filter_moves_by_non_damaging(candidates, self._moves))
        return [name for name in candidates if name not in stab and name not in non_damaging]

    def pick_non_damaging(self, creature: Creature) -> list[str]:
        """Utility moves first, then moves boosting the favoured attacking stat."""
        candidates = filter_moves_by_non_damaging(self.moves_rated_at_least(), self._moves)
        utility = filter_moves_by_utility(candidates, self._moves)
        stat_changes = filter_stat_change_moves(candidates, creature, self._moves)
        return utility + stat_changes


@dataclass
class MoveSlot:
    """One of the four moveset slots.

    Attributes:
        label: Role of the slot, e.g. "First type STAB".
        locked: True if a reserved move occupies the slot.
        moves: Candidate move names, or only the reserved move when locked.
    """

    label: str
    locked: bool = False
    moves: list[str] = field(default_factory=list)

    @property
    def display_label(self) -> str:
        """Label shown to the user, "LOCKED" for locked slots."""
        return LOCKED_LABEL if self.locked else self.label


def _fill_slot(label: str, picks: list[str], reserved: list[str], index: int, limit: int) -> MoveSlot:
    if index < len(reserved):
        return MoveSlot(label=label, locked=True, moves=[reserved[index]])
    return MoveSlot(label=label, moves=picks[:limit])


def select_moveset(
    chart: TypeChart,
    creature: Creature,
    moves: Mapping[str, Move],
    limit: int = SLOT_CANDIDATE_LIMIT,
) -> list[MoveSlot]:
    """Pick candidate moves for each of the creature's four slots.

    Reserved move i locks slot i. Unlocked slots list at most `limit`
    candidates.

    Args:
        chart: Type chart to query.
        creature: Creature with a resolved species.
        moves: Move table keyed by name.
        limit: Maximum candidates listed per unlocked slot.

    Returns:
        Four slots, or an empty list if any movepool move is missing from
        the move table.

    Raises:
        UnresolvedSpeciesError: If the creature has no species.
    """
    species = creature.require_species()
    typing = species.typing

    try:
        strong_moves = get_strong_moves(chart, creature, moves)
        rankings = MoveRankings(get_move_ratings(creature, strong_moves, moves), moves)

        if typing.is_dual:
            labels = DUAL_TYPE_LABELS
            second_picks = rankings.pick_stab_with_high_pp(typing.second)  # type: ignore[arg-type]
        else:
            labels = MONO_TYPE_LABELS
            second_picks = rankings.pick_stab_with_high_power(typing.first)

        picks = [
            rankings.pick_stab_with_high_pp(typing.first),
            second_picks,
            rankings.pick_non_stab_but_strong(typing),
            rankings.pick_non_damaging(creature),
        ]
    except MoveNotFoundError as e:
        logger.error("Could not select moveset for %s: move '%s' not found", creature.nickname, e.move_name)
        return []

    reserved = creature.reserved_moves[:SLOT_COUNT]
    return [_fill_slot(labels[i], picks[i], reserved, i, limit) for i in range(SLOT_COUNT)]


def get_move_super_effective_types(chart: TypeChart, move_name: str, moves: Mapping[str, Move]) -> list[ElementalType]:
    """Types that take super-effective damage from a move.

    Deliberately the offensive weaknesses of the move type, not its
    offensive strengths, which are the types that resist it.

    Returns an empty list for unknown moves and for moves that cannot
    target a foe.
    """
    move = moves.get(move_name)
    if move is None:
        logger.error("Could not find move '%s'", move_name)
        return []
    if not move.target_scope.target_foe:
        return []
    return get_offensive_weaknesses(chart, move.elemental_type)


def describe_move(move_name: str, moves: Mapping[str, Move]) -> str:
    """One-line summary, e.g. "'Flamethrower' Fire Special 15mp 90 100%"."""
    move = moves.get(move_name)
    if move is None:
        return f"{move_name} <NOT FOUND>"

    power = str(move.power) if move.power > 0 else "--"
    accuracy = str(move.accuracy) if move.accuracy > 0 else "--"
    return f"'{move.name}' {move.elemental_type.label} {move.category.value} {move.pp}mp {power} {accuracy}%"
