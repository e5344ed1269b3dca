"""
ExtDict: a dict with the mapext operations as methods.

Example:
    >>> from mapext import ExtDict
    >>> h = ExtDict.from_args("a", 100, "b", 200)
    >>> h.merge_into({"c": 300}).key_of(300)
    'c'
    >>> type(h.to_dict())
    <class 'dict'>
"""

from __future__ import annotations

import typing as _typing

import mapext._construct as _construct
import mapext._filter as _filter
import mapext._inputs as _inputs
import mapext._lookup as _lookup
import mapext._merge as _merge
import mapext._transform as _transform
import mapext._types as _types

_Self = _typing.TypeVar("_Self", bound="ExtDict")


class ExtDict(dict[_typing.Any, _typing.Any]):
    """
    dict subclass exposing every mapext operation as a method.

    In-place methods (merge_into, delete_if, keep_if) return self.
    from_args() and invert() return new ExtDict instances; to_dict()
    returns a plain dict copy.
    """

    __slots__ = ()

    @classmethod
    def from_args(cls: type[_Self], *args: _typing.Any) -> _Self:
        """Build an instance from flat pairs, a pair sequence or a mapping."""
        return _typing.cast(_Self, _construct.from_input(_inputs.classify_args(args), into=cls()))

    def merge_into(
        self: _Self,
        source: _typing.Any,
        resolver: _types.Resolver | None = None,
    ) -> _Self:
        """Merge source into self; see mapext.merge_into()."""
        return _merge.merge_into(self, source, resolver)

    def fetch(
        self,
        key: _typing.Any,
        default: _typing.Any = _types.MISSING,
        on_missing: _types.OnMissing | None = None,
    ) -> _typing.Any:
        """Look up key with fallbacks; see mapext.fetch()."""
        return _lookup.fetch(self, key, default, on_missing)

    def delete_if(
        self: _Self,
        predicate: _types.Predicate | None = None,
    ) -> _Self | _filter.PendingFilter[_Self]:
        """Delete entries matching predicate; see mapext.delete_if()."""
        return _filter.delete_if(self, predicate)

    def keep_if(
        self: _Self,
        predicate: _types.Predicate | None = None,
    ) -> _Self | _filter.PendingFilter[_Self]:
        """Keep only entries matching predicate; see mapext.keep_if()."""
        return _filter.keep_if(self, predicate)

    def flatten(self, depth: int = 1) -> list[_typing.Any]:
        return _transform.flatten(self, depth)

    def invert(self: _Self) -> _Self:
        result = type(self)()
        result.update(_transform.invert(self))
        return result

    def key_of(self, value: _typing.Any) -> _typing.Any:
        return _lookup.key_of(self, value)

    def to_dict(self) -> dict[_typing.Any, _typing.Any]:
        """Return a plain dict copy of self."""
        return _transform.to_dict(self)

    def __repr__(self) -> str:
        return f"ExtDict({dict.__repr__(self)})"
