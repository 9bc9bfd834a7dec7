"""ABOUTME: Parsers turning YAML documents into type charts, moves, species, and teams.
ABOUTME: Each parser validates record shapes with pydantic and returns a tagged ParseResult."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, TypeVar

import yaml
from pydantic import BaseModel, Field, ValidationError

from pokeman.core.enums import ElementalType, MoveCategory, MoveTargetDescription
from pokeman.core.errors import DataLoadError, PrecisionError
from pokeman.core.models import (
    NEVER_MISSES,
    NO_POWER,
    Creature,
    LearnsetMove,
    Move,
    MoveTarget,
    Species,
    SpeciesLibrary,
    StatBlock,
)
from pokeman.core.type_chart import TypeChart
from pokeman.core.type_profile import TypePair, TypeProfile

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing one document: a value, or the reason it failed."""

    ok: bool
    value: T | None = None
    reason: str = ""

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> "ParseResult[T]":
        return cls(ok=False, reason=reason)

    def unwrap(self) -> T:
        """Return the parsed value.

        Raises:
            DataLoadError: If parsing failed.
        """
        if not self.ok:
            raise DataLoadError(self.reason)
        return self.value  # type: ignore[return-value]


class StatsRecord(BaseModel):
    """Stat block as written in data files."""

    hp: int = 0
    attack: int = 0
    defense: int = 0
    spatk: int = 0
    spdef: int = 0
    speed: int = 0

    def to_stat_block(self) -> StatBlock:
        return StatBlock(
            hp=self.hp,
            attack=self.attack,
            defense=self.defense,
            special_attack=self.spatk,
            special_defense=self.spdef,
            speed=self.speed,
        )


class StatusRecord(BaseModel):
    """Stat changes a move applies, to its target and to its user."""

    target: StatsRecord = Field(default_factory=StatsRecord)
    user: StatsRecord = Field(default_factory=StatsRecord, alias="self")


class MoveRecord(BaseModel):
    name: str
    type: str
    category: str
    pp: int
    power: int = NO_POWER
    accuracy: int = NEVER_MISSES
    target: str = MoveTargetDescription.ANY_ADJACENT.value
    status: StatusRecord | None = None


class LevelingRecord(BaseModel):
    name: str
    level: int


class TutorRecord(BaseModel):
    """Tutor entry with a note on where the tutor is found."""

    name: str
    memo: str = ""


class LearnsetRecord(BaseModel):
    leveling: list[LevelingRecord] = Field(default_factory=list)
    machine: list[str] = Field(default_factory=list)
    tutoring: list[str | TutorRecord] = Field(default_factory=list)


class SpeciesRecord(BaseModel):
    number: int
    name: str
    types: list[str] = Field(min_length=1, max_length=2)
    basestats: StatsRecord = Field(default_factory=StatsRecord)
    learnset: LearnsetRecord = Field(default_factory=LearnsetRecord)


class TeamMemberRecord(BaseModel):
    species: str
    name: str | None = None
    moves: list[str] = Field(default_factory=list, max_length=4)


def read_yaml_file(path: Path) -> ParseResult[Any]:
    """Read a YAML document from disk.

    Args:
        path: File to read.

    Returns:
        The parsed document, or a failure naming the file.
    """
    try:
        with path.open(encoding="utf-8") as f:
            return ParseResult.success(yaml.safe_load(f))
    except FileNotFoundError:
        return ParseResult.failure(f"Cannot load {path}: file not found")
    except yaml.YAMLError as e:
        return ParseResult.failure(f"Error parsing {path}: {e}")


def _parse_type_name(name: str) -> ElementalType:
    elemental_type = ElementalType.from_name(name)
    if elemental_type is None:
        raise ValueError(f"'{name}' was not recognized as a type")
    return elemental_type


def _parse_typing(names: list[str]) -> TypePair:
    types = [_parse_type_name(name) for name in names]
    return TypePair(types[0], types[1] if len(types) == 2 else None)


def parse_type_chart(document: Any) -> ParseResult[TypeChart]:
    """Build a type chart from `{types: {Defending: {Attacking: factor}}}`.

    Attacking types left out of a defending entry deal 1x.

    Args:
        document: Parsed YAML document.

    Returns:
        ParseResult holding the chart. Completeness is not checked here.
    """
    if not isinstance(document, dict) or not isinstance(document.get("types"), dict):
        return ParseResult.failure("Type chart must be a mapping with a 'types' key")

    chart = TypeChart()
    for def_name, factors in document["types"].items():
        try:
            def_type = _parse_type_name(def_name)
            multipliers = {_parse_type_name(atk_name): float(value) for atk_name, value in (factors or {}).items()}
            chart.set_type(def_type, TypeProfile.from_multipliers(multipliers))
        except (ValueError, TypeError, AttributeError, PrecisionError) as e:
            return ParseResult.failure(f"Type chart entry '{def_name}': {e}")

    logger.debug("Parsed type chart with %d types", len(chart.registered_types()))
    return ParseResult.success(chart)


def _build_move(record: MoveRecord) -> Move:
    elemental_type = _parse_type_name(record.type)
    category = MoveCategory.from_name(record.category)
    if category is None:
        raise ValueError(f"'{record.category}' was not recognized as a move category")

    target = MoveTargetDescription.from_name(record.target)
    if target is None:
        logger.warning("Move '%s' has unknown target '%s'; using Any Adjacent", record.name, record.target)
        target = MoveTargetDescription.ANY_ADJACENT

    target_changes = StatBlock()
    self_changes = StatBlock()
    if record.status is not None:
        target_changes = record.status.target.to_stat_block()
        # Self-targeting moves put their boosts under "target"
        if MoveTarget.from_description(target).target_self:
            self_changes = target_changes
        else:
            self_changes = record.status.user.to_stat_block()

    return Move(
        name=record.name,
        category=category,
        elemental_type=elemental_type,
        pp=record.pp,
        power=record.power,
        accuracy=record.accuracy,
        target=target,
        self_stat_changes=self_changes,
        target_stat_changes=target_changes,
    )


def parse_moves(document: Any) -> ParseResult[dict[str, Move]]:
    """Build the move table from a list of move records.

    Missing power and accuracy default to -1, a missing or unknown target
    to "Any Adjacent". Name, pp, type, and category are required.

    Args:
        document: Parsed YAML document.

    Returns:
        ParseResult holding moves keyed by name.
    """
    if not isinstance(document, list):
        return ParseResult.failure("Move library must be a list of moves")

    moves: dict[str, Move] = {}
    for index, raw in enumerate(document):
        try:
            record = MoveRecord.model_validate(raw)
            moves[record.name] = _build_move(record)
        except (ValidationError, ValueError) as e:
            return ParseResult.failure(f"Move #{index + 1}: {e}")

    logger.debug("Parsed %d moves", len(moves))
    return ParseResult.success(moves)


def _build_learnset(record: LearnsetRecord) -> tuple[LearnsetMove, ...]:
    entries: dict[str, LearnsetMove] = {}

    for leveling in record.leveling:
        entries.setdefault(leveling.name, LearnsetMove(leveling.name)).level = leveling.level
    for move_name in record.machine:
        entries.setdefault(move_name, LearnsetMove(move_name)).machine = True
    for tutoring in record.tutoring:
        tutor = TutorRecord(name=tutoring) if isinstance(tutoring, str) else tutoring
        entries.setdefault(tutor.name, LearnsetMove(tutor.name)).set_as_tutorable(tutor.memo)

    return tuple(entries[name] for name in sorted(entries))


def parse_species(document: Any) -> ParseResult[SpeciesLibrary]:
    """Build the species library from a list of species records.

    Learnsets are ordered by move name.

    Args:
        document: Parsed YAML document.

    Returns:
        ParseResult holding the library keyed by dex number.
    """
    if not isinstance(document, list):
        return ParseResult.failure("Species library must be a list of species")

    library = SpeciesLibrary()
    for index, raw in enumerate(document):
        try:
            record = SpeciesRecord.model_validate(raw)
            species = Species(
                number=record.number,
                name=record.name,
                typing=_parse_typing(record.types),
                base_stats=record.basestats.to_stat_block(),
                learnset=_build_learnset(record.learnset),
            )
        except (ValidationError, ValueError) as e:
            return ParseResult.failure(f"Species #{index + 1}: {e}")
        library.set(record.number, species)

    logger.debug("Parsed %d species", len(library))
    return ParseResult.success(library)


def parse_team(document: Any, library: SpeciesLibrary) -> ParseResult[list[Creature]]:
    """Build the team from a list of `{species, name?, moves?}` records.

    Nicknames default to the species name. A species missing from the
    library fails the whole team.

    Args:
        document: Parsed YAML document.
        library: Species to resolve against.

    Returns:
        ParseResult holding the team members in file order.
    """
    if not isinstance(document, list):
        return ParseResult.failure("Team must be a list of members")

    team: list[Creature] = []
    for index, raw in enumerate(document):
        try:
            record = TeamMemberRecord.model_validate(raw)
        except ValidationError as e:
            return ParseResult.failure(f"Team member #{index + 1}: {e}")

        species = library.get(record.species)
        if species is None:
            return ParseResult.failure(f"Team member #{index + 1}: unknown species '{record.species}'")

        team.append(Creature(nickname=record.name or species.name, species=species, reserved_moves=record.moves))

    return ParseResult.success(team)
