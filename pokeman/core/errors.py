# ABOUTME: Exception hierarchy for type chart lookups, factor arithmetic, and data loading.
# ABOUTME: Invalid type compositions are a queryable property, not an exception.


class PokemanError(Exception):
    """Base class for all pokeman errors."""


class UnsetTypeError(PokemanError, KeyError):
    """A type chart was queried for a type that was never registered."""


class PrecisionError(PokemanError, ArithmeticError):
    """A multiplier product fell outside the representable effectiveness factors."""


class MoveNotFoundError(PokemanError, KeyError):
    """A move name was not present in the move table."""

    def __init__(self, move_name: str) -> None:
        super().__init__(f"Move '{move_name}' not found")
        self.move_name = move_name


class DataLoadError(PokemanError):
    """External data could not be parsed into records."""


class UnresolvedSpeciesError(PokemanError, ValueError):
    """A creature without a resolved species was passed to an analysis."""

    def __init__(self, nickname: str) -> None:
        super().__init__(f"Creature '{nickname}' has no resolved species")
        self.nickname = nickname
