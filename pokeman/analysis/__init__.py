# ABOUTME: Analysis package built on the type chart.
# ABOUTME: Contains move rating, moveset selection, and team suitability ranking.

from pokeman.analysis.move_rating import get_move_ratings, rate_move
from pokeman.analysis.moveset_selector import (
    MoveRankings,
    MoveSlot,
    describe_move,
    filter_moves_by_category,
    get_move_super_effective_types,
    get_strong_moves,
    select_moveset,
)
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

__all__ = [
    "MoveRankings",
    "MoveSlot",
    "Suitability",
    "analyze_against_type",
    "build_team",
    "count_strengths",
    "count_weaknesses",
    "describe_move",
    "evaluate_suitability",
    "filter_moves_by_category",
    "get_move_ratings",
    "get_move_super_effective_types",
    "get_strong_moves",
    "rank_types",
    "rate_move",
    "select_moveset",
    "suitability_frame",
    "top_ranked",
]
