"""
Destructive merge of one mapping into another.

    >>> h1 = {"a": 100, "b": 200}
    >>> merge_into(h1, {"b": 254, "c": 300})
    {'a': 100, 'b': 254, 'c': 300}
    >>> h1 = {"a": 100, "b": 200}
    >>> merge_into(h1, {"b": 254, "c": 300}, lambda key, old, new: old)
    {'a': 100, 'b': 200, 'c': 300}
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import mapext._callbacks as _callbacks
import mapext._inputs as _inputs
import mapext._types as _types
import mapext.config as config
import mapext.errors as errors

_logger = _logging.getLogger(__name__)

_Target = _typing.TypeVar("_Target", bound=_typing.MutableMapping[_typing.Any, _typing.Any])


def merge_into(
    target: _Target,
    source: _typing.Any,
    resolver: _types.Resolver | None = None,
) -> _Target:
    """
    Add the contents of source to target, in place.

    For every key of source, in source order:
    - absent from target: inserted at the end
    - present, no resolver: overwritten with source's value
    - present, with resolver: set to resolver(key, target_value, source_value)

    Existing keys keep their position. The source pairs are read before
    the first write, so merging a container into itself is well defined
    (see the merge.self_merge setting).

    Args:
        target: Mapping to update.
        source: Mapping-convertible object to read from.
        resolver: Called once per colliding key to pick the merged value.

    Returns:
        target itself.

    Raises:
        NotMappingConvertibleError: If source is not mapping-convertible.
        SelfMergeError: If source is target and merge.self_merge is "error".
    """
    if not _inputs.is_mapping_convertible(source):
        raise errors.NotMappingConvertibleError(type(source))

    if source is target and config.get_settings().merge.self_merge == "error":
        raise errors.SelfMergeError()

    pairs = list(_inputs.iter_mapping_pairs(source))

    collisions = 0
    for key, value in pairs:
        if resolver is not None and key in target:
            collisions += 1
            target[key] = _callbacks.invoke("resolver", resolver, key, target[key], value)
        else:
            target[key] = value

    _logger.debug(
        "merge_into: %d pair(s) from %s, %d resolved collision(s)",
        len(pairs),
        type(source).__name__,
        collisions,
    )
    return target


# Alias kept for callers that expect the mutating-update name
update = merge_into
