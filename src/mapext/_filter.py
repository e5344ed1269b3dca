"""
Predicate-driven in-place filtering: delete_if() and keep_if().

Both walk a snapshot of the keys taken when the call starts, so a
predicate that adds or removes entries cannot make the walk skip or
revisit anything. Called without a predicate they return a
PendingFilter instead of filtering.

Example:
    >>> h = {"a": 100, "b": 200, "c": 300}
    >>> delete_if(h, lambda key, value: key >= "b")
    {'a': 100}
    >>> pending = keep_if({"a": 1, "b": 2})
    >>> list(pending)
    [('a', 1), ('b', 2)]
    >>> pending.apply(lambda key, value: value > 1)
    {'b': 2}
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import mapext._callbacks as _callbacks
import mapext._types as _types

_logger = _logging.getLogger(__name__)

FilterKind = _typing.Literal["delete_if", "keep_if"]

_Container = _typing.TypeVar("_Container", bound=_typing.MutableMapping[_typing.Any, _typing.Any])


def _run_filter(
    container: _Container,
    predicate: _types.Predicate,
    *,
    remove_when: bool,
    kind: FilterKind,
) -> _Container:
    """
    Remove every entry whose predicate result (as bool) equals remove_when.

    Keys removed by the predicate before their turn are skipped.
    """
    removed = 0
    for key in list(container):
        if key not in container:
            continue
        verdict = _callbacks.invoke("predicate", predicate, key, container[key])
        if bool(verdict) is remove_when:
            # pop() tolerates a key the predicate already removed
            container.pop(key, None)
            removed += 1

    _logger.debug("%s: removed %d key(s), %d remain", kind, removed, len(container))
    return container


class PendingFilter(_typing.Generic[_Container]):
    """
    A filter bound to a container but not yet run.

    Iterating yields the container's (key, value) pairs from a fresh
    snapshot each time, so it can be restarted and never removes
    anything. Call apply() with a predicate to run the filter.
    """

    __slots__ = ("_container", "_kind")

    def __init__(self, container: _Container, kind: FilterKind) -> None:
        self._container = container
        self._kind = kind

    @property
    def container(self) -> _Container:
        """The container the filter will run on."""
        return self._container

    @property
    def kind(self) -> FilterKind:
        """Either "delete_if" or "keep_if"."""
        return self._kind

    def apply(self, predicate: _types.Predicate) -> _Container:
        """
        Run the bound filter with predicate.

        Returns:
            The container, filtered in place.
        """
        return _run_filter(
            self._container,
            predicate,
            remove_when=self._kind == "delete_if",
            kind=self._kind,
        )

    def __iter__(self) -> _typing.Iterator[_types.Pair]:
        """Yield (key, value) pairs from a snapshot of the container."""
        yield from list(self._container.items())

    def __len__(self) -> int:
        return len(self._container)

    def __repr__(self) -> str:
        return f"PendingFilter({self._kind}, size={len(self._container)})"


@_typing.overload
def delete_if(container: _Container, predicate: None = None) -> PendingFilter[_Container]: ...


@_typing.overload
def delete_if(container: _Container, predicate: _types.Predicate) -> _Container: ...


def delete_if(
    container: _Container,
    predicate: _types.Predicate | None = None,
) -> _Container | PendingFilter[_Container]:
    """
    Delete every entry for which predicate(key, value) is truthy.

    Args:
        container: Mapping to filter in place.
        predicate: Called once per entry; omit to get a PendingFilter.

    Returns:
        The container itself, or a PendingFilter when predicate is omitted.
    """
    if predicate is None:
        return PendingFilter(container, "delete_if")
    return _run_filter(container, predicate, remove_when=True, kind="delete_if")


@_typing.overload
def keep_if(container: _Container, predicate: None = None) -> PendingFilter[_Container]: ...


@_typing.overload
def keep_if(container: _Container, predicate: _types.Predicate) -> _Container: ...


def keep_if(
    container: _Container,
    predicate: _types.Predicate | None = None,
) -> _Container | PendingFilter[_Container]:
    """
    Keep only the entries for which predicate(key, value) is truthy.

    Args:
        container: Mapping to filter in place.
        predicate: Called once per entry; omit to get a PendingFilter.

    Returns:
        The container itself, or a PendingFilter when predicate is omitted.
    """
    if predicate is None:
        return PendingFilter(container, "keep_if")
    return _run_filter(container, predicate, remove_when=False, kind="keep_if")
