# ABOUTME: Core package for the type algebra and the battle record types.
# ABOUTME: Contains enums, type profiles, the type chart, effectiveness queries, and models.

from pokeman.core.effectiveness import (
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
from pokeman.core.enums import (
    ALL_TYPES,
    EffectivenessFactor,
    ElementalType,
    MoveCategory,
    MoveTargetDescription,
)
from pokeman.core.errors import (
    DataLoadError,
    MoveNotFoundError,
    PokemanError,
    PrecisionError,
    UnresolvedSpeciesError,
    UnsetTypeError,
)
from pokeman.core.models import (
    Creature,
    LearnsetMove,
    Move,
    MoveTarget,
    Species,
    SpeciesLibrary,
    StatBlock,
)
from pokeman.core.type_chart import TypeChart
from pokeman.core.type_profile import TypePair, TypeProfile, as_type_pair, compose

__all__ = [
    "ALL_TYPES",
    "Creature",
    "DataLoadError",
    "EffectivenessFactor",
    "ElementalType",
    "LearnsetMove",
    "Move",
    "MoveCategory",
    "MoveNotFoundError",
    "MoveTarget",
    "MoveTargetDescription",
    "PokemanError",
    "PrecisionError",
    "Species",
    "SpeciesLibrary",
    "StatBlock",
    "TypeChart",
    "TypePair",
    "TypeProfile",
    "UnresolvedSpeciesError",
    "UnsetTypeError",
    "as_type_pair",
    "compose",
    "get_cross_effectiveness",
    "get_defensive_immunities",
    "get_defensive_strengths",
    "get_defensive_weaknesses",
    "get_offensive_immunities",
    "get_offensive_strengths",
    "get_offensive_weaknesses",
    "is_immune_to",
    "is_strong_factor",
    "is_strong_to",
    "is_weak_factor",
    "is_weak_to",
    "score_defensive_typing",
]
