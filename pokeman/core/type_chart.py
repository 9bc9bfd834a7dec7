# ABOUTME: Registry mapping every elemental type to its defensive profile.
# ABOUTME: Resolves mono and dual typings to a (possibly composed) TypeProfile.

from pokeman.core.enums import ALL_TYPES, ElementalType
from pokeman.core.errors import UnsetTypeError
from pokeman.core.type_profile import TypePair, TypeProfile, as_type_pair, compose


class TypeChart:
    """Lookup of type profiles across all elemental types.

    The chart is filled once through `set_type` and only read afterwards.
    """

    def __init__(self) -> None:
        self._profiles: dict[ElementalType, TypeProfile] = {}

    def set_type(self, elemental_type: ElementalType, profile: TypeProfile) -> None:
        """Register (or overwrite) the profile of `elemental_type`."""
        self._profiles[elemental_type] = profile

    def is_registered(self, elemental_type: ElementalType) -> bool:
        """True if `elemental_type` has a profile."""
        return elemental_type in self._profiles

    def is_complete(self) -> bool:
        """True once all 18 types have been registered."""
        return all(t in self._profiles for t in ALL_TYPES)

    def registered_types(self) -> list[ElementalType]:
        """Registered types in ordinal order."""
        return [t for t in ALL_TYPES if t in self._profiles]

    def get_profile(self, typing: TypePair | ElementalType) -> TypeProfile:
        """Resolve a typing to its defensive profile.

        Args:
            typing: A type pair or a bare elemental type.

        Returns:
            The stored profile for a monotype, or the composition of both
            stored profiles for a dual type.

        Raises:
            UnsetTypeError: If any of the types was never registered.
            PrecisionError: If composing the two profiles is not representable.
        """
        pair = as_type_pair(typing)
        if not pair.is_dual:
            return self._lookup(pair.first)
        first, second = (self._lookup(t) for t in pair)
        return compose(first, second)

    def _lookup(self, elemental_type: ElementalType) -> TypeProfile:
        try:
            return self._profiles[elemental_type]
        except KeyError:
            raise UnsetTypeError(f"Type '{elemental_type.label}' is not registered in the chart") from None
