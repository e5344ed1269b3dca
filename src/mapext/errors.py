"""
Exceptions raised by mapext operations.

Every error is a caller-input problem raised at the point of detection.
Each class also derives from the matching built-in exception, so code
that already catches ValueError, TypeError or KeyError keeps working.
"""

from __future__ import annotations

import typing as _typing


class MapExtError(Exception):
    """Base class for all mapext errors."""

    pass


class OddArgumentCountError(MapExtError, ValueError):
    """Raised when flat key/value construction gets an odd number of arguments."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"odd number of arguments for mapping ({count})")


class InvalidElementShapeError(MapExtError, ValueError):
    """Raised when a pair element has a length other than 1 or 2."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"invalid number of elements ({length} for 1..2)")


class InvalidElementTypeError(MapExtError, TypeError):
    """Raised when a pair element is not convertible to a sequence."""

    def __init__(self, element_type: type) -> None:
        self.element_type = element_type
        super().__init__(
            f"wrong element type {element_type.__name__} (expected sequence)"
        )


class NotMappingConvertibleError(MapExtError, TypeError):
    """Raised when an argument cannot be converted to an ordered mapping."""

    def __init__(self, source_type: type) -> None:
        self.source_type = source_type
        super().__init__(
            f"can't convert {source_type.__name__} into a mapping"
        )


class NotSequenceConvertibleError(MapExtError, TypeError):
    """Raised when the pair sequence itself cannot be converted to a sequence."""

    def __init__(self, source_type: type) -> None:
        self.source_type = source_type
        super().__init__(
            f"can't convert {source_type.__name__} into a sequence"
        )


class KeyNotFoundError(MapExtError, KeyError):
    """Raised by fetch() when the key is missing and no fallback was given."""

    def __init__(self, key: _typing.Any) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        # KeyError.__str__ would only repr the key
        return f"key not found: {self.key!r}"


class SelfMergeError(MapExtError, ValueError):
    """Raised when merging a container into itself and the policy forbids it."""

    def __init__(self) -> None:
        super().__init__(
            "source and target are the same container "
            "(set MAPEXT_MERGE__SELF_MERGE=snapshot to allow)"
        )


class RecursiveFlattenError(MapExtError, ValueError):
    """Raised when flatten() would recurse into a list that contains itself."""

    def __init__(self) -> None:
        super().__init__("tried to flatten recursive sequence")
