# ABOUTME: Assembles the type chart, move table, species library, and team from YAML files.
# ABOUTME: Any failed parse aborts the load with a DataLoadError carrying the reason.

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from pokeman.config import DataSourcesConfig
from pokeman.core.enums import ALL_TYPES
from pokeman.core.errors import DataLoadError
from pokeman.core.models import Creature, Move, SpeciesLibrary
from pokeman.core.type_chart import TypeChart
from pokeman.ingestion.yaml_loader import parse_moves, parse_species, parse_team, parse_type_chart, read_yaml_file
from pokeman.settings import settings

logger = logging.getLogger(__name__)


@dataclass
class PokemanDatabase:
    """Everything the analyses read, loaded once."""

    chart: TypeChart
    moves: dict[str, Move] = field(default_factory=dict)
    species: SpeciesLibrary = field(default_factory=SpeciesLibrary)
    team: list[Creature] = field(default_factory=list)


def load_database(
    config: DataSourcesConfig,
    root: Path | None = None,
    verbose_callback: Callable[[str], None] | None = None,
) -> PokemanDatabase:
    """Load the data set named by `config`.

    Args:
        config: Data file locations.
        root: Directory relative paths are resolved against. Defaults to settings.project_root.
        verbose_callback: Optional callback for progress messages.

    Returns:
        The loaded database.

    Raises:
        DataLoadError: If a file cannot be read or parsed, or the type chart
            does not cover all 18 types.
    """
    if root is None:
        root = settings.project_root

    def log(msg: str) -> None:
        logger.info(msg)
        if verbose_callback:
            verbose_callback(msg)

    paths = config.resolve(root)

    log(f"Loading type chart from {paths.type_chart}")
    chart = parse_type_chart(read_yaml_file(paths.type_chart).unwrap()).unwrap()
    if not chart.is_complete():
        missing = ", ".join(t.label for t in ALL_TYPES if not chart.is_registered(t))
        raise DataLoadError(f"Type chart {paths.type_chart} is missing types: {missing}")

    log(f"Loading moves from {paths.moves}")
    moves = parse_moves(read_yaml_file(paths.moves).unwrap()).unwrap()

    log(f"Loading species from {paths.species}")
    species = parse_species(read_yaml_file(paths.species).unwrap()).unwrap()

    log(f"Loading team from {paths.team}")
    team = parse_team(read_yaml_file(paths.team).unwrap(), species).unwrap()

    log(f"Loaded {len(moves)} moves, {len(species)} species, {len(team)} team members")
    return PokemanDatabase(chart=chart, moves=moves, species=species, team=team)
