"""
Construction family: build a new dict from flexible input.

    >>> from_args("a", 100, "b", 200)
    {'a': 100, 'b': 200}
    >>> from_args([["a", 100], ["b", 200]])
    {'a': 100, 'b': 200}
    >>> from_args({"a": 100, "b": 200})
    {'a': 100, 'b': 200}
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import mapext._inputs as _inputs
import mapext._types as _types
import mapext.errors as errors

_logger = _logging.getLogger(__name__)


def from_mapping(
    source: _typing.Any,
    *,
    into: dict[_typing.Any, _typing.Any] | None = None,
) -> dict[_typing.Any, _typing.Any]:
    """
    Copy all pairs of a mapping-convertible object into a new dict.

    Args:
        source: Mapping-convertible object.
        into: Empty dict to fill instead of a new plain dict.

    Raises:
        NotMappingConvertibleError: If source is not mapping-convertible.
    """
    result: dict[_typing.Any, _typing.Any] = {} if into is None else into
    for key, value in _inputs.iter_mapping_pairs(source):
        result[key] = value
    return result


def from_pairs(
    elements: _typing.Any,
    *,
    into: dict[_typing.Any, _typing.Any] | None = None,
) -> dict[_typing.Any, _typing.Any]:
    """
    Build a dict from a sequence of 1- or 2-element sequences.

    A 2-element entry is (key, value); a 1-element entry stores ABSENT
    as the value. Later duplicate keys overwrite earlier ones.

    Args:
        elements: Sequence-convertible object of pair-like elements.
        into: Empty dict to fill instead of a new plain dict.

    Raises:
        NotSequenceConvertibleError: If elements itself is not
            sequence-convertible.
        InvalidElementTypeError: If an element is not sequence-convertible.
        InvalidElementShapeError: If an element has a length other than 1 or 2.
    """
    if not _inputs.is_sequence_convertible(elements):
        raise errors.NotSequenceConvertibleError(type(elements))
    result: dict[_typing.Any, _typing.Any] = {} if into is None else into
    for element in _inputs.to_sequence(elements):
        entry = _inputs.to_sequence(element)
        if len(entry) == 2:
            result[entry[0]] = entry[1]
        elif len(entry) == 1:
            result[entry[0]] = _types.ABSENT
        else:
            raise errors.InvalidElementShapeError(len(entry))
    return result


def from_flat(
    items: _typing.Sequence[_typing.Any],
    *,
    into: dict[_typing.Any, _typing.Any] | None = None,
) -> dict[_typing.Any, _typing.Any]:
    """
    Build a dict from alternating keys and values.

    Raises:
        OddArgumentCountError: If the number of items is odd.
    """
    if len(items) % 2 != 0:
        raise errors.OddArgumentCountError(len(items))
    result: dict[_typing.Any, _typing.Any] = {} if into is None else into
    for i in range(0, len(items), 2):
        result[items[i]] = items[i + 1]
    return result


def from_input(
    parsed: _inputs.ConstructionInput,
    *,
    into: dict[_typing.Any, _typing.Any] | None = None,
) -> dict[_typing.Any, _typing.Any]:
    """
    Build a dict from a tagged construction input.

    Raises:
        TypeError: If parsed is not a known input variant.
    """
    if isinstance(parsed, _inputs.MappingInput):
        return from_mapping(parsed.source, into=into)
    elif isinstance(parsed, _inputs.PairsInput):
        return from_pairs(parsed.elements, into=into)
    elif isinstance(parsed, _inputs.FlatInput):
        return from_flat(parsed.items, into=into)
    else:
        raise TypeError(f"Unknown ConstructionInput type: {type(parsed).__name__}")


def from_args(*args: _typing.Any) -> dict[_typing.Any, _typing.Any]:
    """
    Create a new dict populated from the given arguments.

    Three forms are accepted:

    - from_args(key, value, ...): keys and values alternate, so the
      argument count must be even.
    - from_args([[key, value], ...]): a single sequence of pairs.
    - from_args(mapping): a single object convertible to a mapping.

    A single argument that is both a mapping and a sequence is treated
    as a mapping.

    Raises:
        OddArgumentCountError: Flat form with an odd argument count.
        InvalidElementShapeError: Pair form with an element of bad length.
        InvalidElementTypeError: Pair form with a non-sequence element.
    """
    parsed = _inputs.classify_args(args)
    _logger.debug("from_args: %s with %d argument(s)", type(parsed).__name__, len(args))
    return from_input(parsed)
