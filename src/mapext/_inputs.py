"""
Capability probes and tagged construction inputs.

from_args() accepts three input shapes. Rather than branching on
capabilities inside the constructor, classify_args() resolves the raw
arguments into exactly one of:

- MappingInput: a single mapping-convertible object
- PairsInput: a single sequence of 1- or 2-element pairs
- FlatInput: alternating key, value, key, value, ...

Example:
    >>> classify_args(({"a": 1},))
    MappingInput(source={'a': 1})
    >>> classify_args(([("a", 1)],))
    PairsInput(elements=[('a', 1)])
    >>> classify_args(("a", 1))
    FlatInput(items=('a', 1))
"""

from __future__ import annotations

import collections.abc as _abc
import dataclasses as _dataclasses
import typing as _typing

import pydantic as _pydantic

import mapext._types as _types
import mapext.errors as errors

# Iterables that are never treated as sequences of elements
_NON_SEQUENCE_TYPES = (str, bytes, bytearray)


# =============================================================================
# Capability probes
# =============================================================================


def is_mapping_convertible(obj: object) -> bool:
    """
    Check if obj can be converted to an ordered mapping.

    Accepted:
    - collections.abc.Mapping instances
    - objects with callable keys() and __getitem__ (what dict() accepts)
    - named tuples (via _asdict())
    - pydantic models (fields in declaration order)
    """
    if isinstance(obj, (_abc.Mapping, _pydantic.BaseModel)):
        return True
    if isinstance(obj, tuple) and callable(getattr(obj, "_asdict", None)):
        return True
    # Classes expose keys/__getitem__ as unbound attributes
    if isinstance(obj, type):
        return False
    return callable(getattr(obj, "keys", None)) and hasattr(obj, "__getitem__")


def is_sequence_convertible(obj: object) -> bool:
    """Check if obj can be converted to a sequence (any non-string iterable)."""
    if isinstance(obj, _NON_SEQUENCE_TYPES):
        return False
    return isinstance(obj, _abc.Iterable)


def iter_mapping_pairs(obj: object) -> _typing.Iterator[_types.Pair]:
    """
    Yield the (key, value) pairs of a mapping-convertible object in order.

    Raises:
        NotMappingConvertibleError: If obj is not mapping-convertible.
    """
    if isinstance(obj, _abc.Mapping):
        yield from obj.items()
    elif isinstance(obj, _pydantic.BaseModel):
        # Iterating a model yields (field_name, value) in declaration order
        yield from obj
    elif isinstance(obj, tuple) and callable(getattr(obj, "_asdict", None)):
        yield from obj._asdict().items()
    elif is_mapping_convertible(obj):
        mapping_like = _typing.cast(_typing.Any, obj)
        for key in mapping_like.keys():
            yield key, mapping_like[key]
    else:
        raise errors.NotMappingConvertibleError(type(obj))


def to_sequence(obj: object) -> list[_typing.Any]:
    """
    Convert a sequence-convertible object to a list.

    Mappings convert to their list of (key, value) pairs.

    Raises:
        InvalidElementTypeError: If obj is not sequence-convertible.
    """
    if not is_sequence_convertible(obj):
        raise errors.InvalidElementTypeError(type(obj))
    if isinstance(obj, _abc.Mapping):
        return list(obj.items())
    return list(_typing.cast(_abc.Iterable[_typing.Any], obj))


# =============================================================================
# Tagged inputs
# =============================================================================


@_dataclasses.dataclass(frozen=True, slots=True)
class ConstructionInput:
    """Base class for construction inputs."""

    pass


@_dataclasses.dataclass(frozen=True, slots=True)
class MappingInput(ConstructionInput):
    """A single mapping-convertible object to copy."""

    source: _typing.Any


@_dataclasses.dataclass(frozen=True, slots=True)
class PairsInput(ConstructionInput):
    """A sequence of elements, each a 1- or 2-element sequence."""

    elements: _typing.Any


@_dataclasses.dataclass(frozen=True, slots=True)
class FlatInput(ConstructionInput):
    """Alternating keys and values."""

    items: tuple[_typing.Any, ...]  # Immutable


def classify_args(args: tuple[_typing.Any, ...]) -> ConstructionInput:
    """
    Resolve raw from_args() arguments to a tagged input.

    With exactly one argument, mapping-conversion is tried before
    sequence-conversion. Everything else is a flat key/value list.

    Args:
        args: The positional arguments given to from_args().

    Returns:
        MappingInput, PairsInput or FlatInput.
    """
    if len(args) == 1:
        (only,) = args
        if is_mapping_convertible(only):
            return MappingInput(only)
        if is_sequence_convertible(only):
            return PairsInput(only)
    return FlatInput(tuple(args))
