"""
Type aliases and the ABSENT sentinel for mapext.

This module provides names used throughout the package:
- Key / Value / Pair: the units a container is built from
- Resolver / Predicate / OnMissing: user callback shapes
- ABSENT: the distinguished "no value" marker
- MISSING: marks an omitted optional argument
"""

from __future__ import annotations

import typing as _typing

Key: _typing.TypeAlias = _typing.Hashable
Value: _typing.TypeAlias = _typing.Any

# A (key, value) tuple, used while building and flattening containers
Pair: _typing.TypeAlias = tuple[Key, Value]

# resolver(key, current_value, incoming_value) -> merged value
Resolver: _typing.TypeAlias = _typing.Callable[[Key, Value, Value], Value]

# predicate(key, value) -> truthy/falsy
Predicate: _typing.TypeAlias = _typing.Callable[[Key, Value], object]

# on_missing() or on_missing(key)
OnMissing: _typing.TypeAlias = _typing.Callable[..., Value]


# Helper function to reconstruct ABSENT singleton during unpickle
def _get_absent_singleton() -> AbsentType:
    """Return the ABSENT singleton. Called by pickle to reconstruct."""
    return ABSENT


class AbsentType:
    """
    Type of the ABSENT sentinel.

    ABSENT marks "no value" where None would be ambiguous: key_of() returns
    it when nothing matches, and length-1 construction elements store it as
    their value. It is falsy and compares equal only to itself.

    This is a singleton: use the ABSENT constant, not the class.
    """

    __slots__ = ()

    _instance: _typing.ClassVar[AbsentType | None] = None

    def __new__(cls) -> AbsentType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> AbsentType:
        return self

    def __deepcopy__(self, memo: dict[int, _typing.Any]) -> AbsentType:
        return self

    def __reduce__(self) -> tuple[_typing.Callable[[], AbsentType], tuple[()]]:
        """Pickle support: ensure singleton is preserved."""
        return (_get_absent_singleton, ())


ABSENT = AbsentType()


def is_absent(value: _typing.Any) -> bool:
    """Check if a value is the ABSENT sentinel."""
    return value is ABSENT


class MissingType:
    """
    Type of the MISSING marker for an omitted optional argument.

    Lets fetch() tell "no default given" apart from an explicit None
    default. Never stored in a container or returned to callers.
    """

    __slots__ = ()

    _instance: _typing.ClassVar[MissingType | None] = None

    def __new__(cls) -> MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<MISSING>"


MISSING = MissingType()
