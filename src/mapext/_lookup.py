"""
Lookups: fetch() with fallbacks and key_of() reverse lookup.
"""

from __future__ import annotations

import typing as _typing

import mapext._callbacks as _callbacks
import mapext._types as _types
import mapext.errors as errors


def fetch(
    container: _typing.Mapping[_typing.Any, _typing.Any],
    key: _typing.Any,
    default: _typing.Any = _types.MISSING,
    on_missing: _types.OnMissing | None = None,
) -> _typing.Any:
    """
    Return the value for key, with explicit fallbacks when it is missing.

    Fallback order when key is absent:
    1. on_missing, if given: its result is returned as-is
       (called with the key, or with no arguments if it takes none)
    2. default, if given (None counts as given)
    3. raise KeyNotFoundError

    Example:
        >>> h = {"a": 100, "b": 200}
        >>> fetch(h, "a")
        100
        >>> fetch(h, "z", "go fish")
        'go fish'
        >>> fetch(h, "z", on_missing=lambda el: f"go fish, {el}")
        'go fish, z'

    Raises:
        KeyNotFoundError: If key is absent and no fallback was given.
    """
    if key in container:
        return container[key]
    if on_missing is not None:
        if _callbacks.accepts_positional(on_missing):
            return _callbacks.invoke("on_missing", on_missing, key)
        return _callbacks.invoke("on_missing", on_missing)
    if default is not _types.MISSING:
        return default
    raise errors.KeyNotFoundError(key)


def key_of(
    container: _typing.Mapping[_typing.Any, _typing.Any],
    value: _typing.Any,
) -> _typing.Any:
    """
    Return the first key (in iteration order) whose value equals value.

    Returns ABSENT if no value matches.

        >>> h = {"a": 100, "b": 200, "c": 300, "d": 300}
        >>> key_of(h, 300)
        'c'
        >>> key_of(h, 999)
        ABSENT
    """
    for k, v in container.items():
        if v == value:
            return k
    return _types.ABSENT
