"""ABOUTME: Ingestion module for reading the YAML data set.
ABOUTME: Parses type charts, moves, species, and teams into core records."""

from pokeman.ingestion.database import PokemanDatabase, load_database
from pokeman.ingestion.yaml_loader import (
    ParseResult,
    parse_moves,
    parse_species,
    parse_team,
    parse_type_chart,
    read_yaml_file,
)

__all__ = [
    "ParseResult",
    "PokemanDatabase",
    "load_database",
    "parse_moves",
    "parse_species",
    "parse_team",
    "parse_type_chart",
    "read_yaml_file",
]
