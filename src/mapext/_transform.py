"""
Transformations producing new objects: flatten(), invert(), to_dict().
"""

from __future__ import annotations

import typing as _typing

import mapext._inputs as _inputs
import mapext.errors as errors

# Only these count as nested sequences when flattening
_FLATTENABLE = (list, tuple)


def _flatten_into(
    result: list[_typing.Any],
    items: _typing.Iterable[_typing.Any],
    depth: int,
) -> None:
    """
    Append items to result, splicing nested sequences up to depth levels.

    Walks an explicit stack of (iterator, remaining depth, sequence id)
    frames, so nesting is not bounded by the interpreter's recursion limit.

    Args:
        result: List being built.
        items: Items at the top level.
        depth: Levels still allowed; negative means unlimited.
    """
    # ids of sequences currently being spliced (cycle detection)
    active: set[int] = set()
    stack: list[tuple[_typing.Iterator[_typing.Any], int, int | None]] = [
        (iter(items), depth, None)
    ]
    while stack:
        iterator, remaining, owner = stack[-1]
        for item in iterator:
            if remaining == 0 or not isinstance(item, _FLATTENABLE):
                result.append(item)
                continue
            if id(item) in active:
                raise errors.RecursiveFlattenError()
            active.add(id(item))
            stack.append((iter(item), remaining - 1, id(item)))
            break
        else:
            stack.pop()
            if owner is not None:
                active.discard(owner)


def flatten(
    container: _typing.Mapping[_typing.Any, _typing.Any],
    depth: int = 1,
) -> list[_typing.Any]:
    """
    Return a new list that is a flattening of the container's pairs.

    The container is first turned into its (key, value) pairs; the pair
    list is then flattened depth levels. With the default depth of 1 only
    the pairs themselves are spliced, so list values stay nested.

    Example:
        >>> a = {1: "one", 2: [2, "two"], 3: "three"}
        >>> flatten(a)
        [1, 'one', 2, [2, 'two'], 3, 'three']
        >>> flatten(a, 2)
        [1, 'one', 2, 2, 'two', 3, 'three']

    Args:
        container: Mapping to read.
        depth: Levels to flatten. 0 returns the list of pairs;
               negative flattens completely.

    Raises:
        RecursiveFlattenError: If a list containing itself would be spliced.
    """
    result: list[_typing.Any] = []
    _flatten_into(result, list(container.items()), depth)
    return result


def invert(
    container: _typing.Mapping[_typing.Any, _typing.Any],
) -> dict[_typing.Any, _typing.Any]:
    """
    Return a new dict using the container's values as keys and keys as values.

    When several keys share a value, the last one in iteration order wins.

        >>> h = {"n": 100, "m": 100, "y": 300, "d": 200, "a": 0}
        >>> invert(h)
        {100: 'm', 300: 'y', 200: 'd', 0: 'a'}

    Raises:
        TypeError: If a value is unhashable.
    """
    result: dict[_typing.Any, _typing.Any] = {}
    for key, value in container.items():
        result[value] = key
    return result


def to_dict(container: _typing.Any) -> dict[_typing.Any, _typing.Any]:
    """
    Return container itself if it is a plain dict, otherwise a dict copy.

    Dict subclasses and other mapping-convertible objects are converted
    to a plain dict with the same pairs in the same order.

    Raises:
        NotMappingConvertibleError: If container is not mapping-convertible.
    """
    if type(container) is dict:
        return container
    return dict(_inputs.iter_mapping_pairs(container))
