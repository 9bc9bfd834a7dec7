# ABOUTME: Heuristic rating of how useful a move is to a given creature.
# ABOUTME: Combines physical/special suitability, accuracy, PP, and power into a score.

from collections.abc import Iterable, Mapping

from pokeman.core.enums import MoveCategory
from pokeman.core.errors import MoveNotFoundError
from pokeman.core.models import Creature, Move

STATUS_MOVE_RATING = 0.8
"""Flat rating for status moves the creature can use."""

PP_BASELINE = 20
POWER_BASELINE = 90


def suited_to_physical(creature: Creature) -> bool:
    """True if the species' attack is at least its special attack."""
    stats = creature.require_species().base_stats
    return stats.attack >= stats.special_attack


def suited_to_special(creature: Creature) -> bool:
    """True if the species' special attack is at least its attack."""
    stats = creature.require_species().base_stats
    return stats.special_attack >= stats.attack


def suited_to_move_category(creature: Creature, move: Move) -> bool:
    """Whether the creature can make use of the move's damage class.

    Status moves always suit. Balanced attackers suit both physical and special.
    """
    if move.category == MoveCategory.STATUS:
        return True
    if move.category == MoveCategory.PHYSICAL:
        return suited_to_physical(creature)
    return suited_to_special(creature)


def accuracy_rating(move: Move) -> float:
    """Accuracy component of the rating.

    Moves that never miss rate 1.0. Otherwise the rating is
    (accuracy - 100) / 10, which is 0.0 at 100% and negative below that.
    """
    if move.accuracy < 0:
        return 1.0
    return (move.accuracy - 100) / 10


def rate_move(creature: Creature, move: Move) -> float:
    """Rate a move for a creature.

    Args:
        creature: Creature with a resolved species.
        move: Move to rate.

    Returns:
        0.0 if the category does not suit the creature, 0.8 for status moves,
        otherwise accuracy_rating * pp/20 * power/90 capped at 1.0.
    """
    if not suited_to_move_category(creature, move):
        return 0.0
    if move.category == MoveCategory.STATUS:
        return STATUS_MOVE_RATING

    accuracy_pp = accuracy_rating(move) * (move.pp / PP_BASELINE)
    return min(accuracy_pp * (move.power / POWER_BASELINE), 1.0)


def get_move_ratings(creature: Creature, move_names: Iterable[str], moves: Mapping[str, Move]) -> dict[str, float]:
    """Rate a batch of moves for one creature.

    Args:
        creature: Creature with a resolved species.
        move_names: Names to rate.
        moves: Move table keyed by name.

    Returns:
        Ratings keyed by move name, in input order.

    Raises:
        MoveNotFoundError: If any name is missing from the move table.
    """
    ratings: dict[str, float] = {}
    for name in move_names:
        if name not in moves:
            raise MoveNotFoundError(name)
        ratings[name] = rate_move(creature, moves[name])
    return ratings
