"""
mapext: convenience operations for insertion-ordered dicts.

Free functions that take a dict (or any MutableMapping) and either
return a new object or mutate it in place:

- from_args: build a dict from flat pairs, a pair sequence or a mapping
- merge_into / update: merge with optional collision resolver
- fetch: lookup with on_missing / default / KeyNotFoundError fallbacks
- delete_if / keep_if: predicate-driven in-place filtering
- flatten, invert, key_of, to_dict

Example:
    >>> import mapext
    >>> h = mapext.from_args("a", 1, "b", 2)
    >>> mapext.merge_into(h, {"b": 3, "c": 4}, lambda key, old, new: old)
    {'a': 1, 'b': 2, 'c': 4}
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml
__version__: str = _metadata.version("mapext")

from mapext._construct import from_args, from_flat, from_input, from_mapping, from_pairs  # noqa: E402
from mapext._filter import PendingFilter, delete_if, keep_if  # noqa: E402
from mapext._inputs import (  # noqa: E402
    ConstructionInput,
    FlatInput,
    MappingInput,
    PairsInput,
    classify_args,
    is_mapping_convertible,
    is_sequence_convertible,
)
from mapext._lookup import fetch, key_of  # noqa: E402
from mapext._merge import merge_into, update  # noqa: E402
from mapext._transform import flatten, invert, to_dict  # noqa: E402
from mapext._types import ABSENT, AbsentType, is_absent  # noqa: E402
from mapext.errors import (  # noqa: E402
    InvalidElementShapeError,
    InvalidElementTypeError,
    KeyNotFoundError,
    MapExtError,
    NotMappingConvertibleError,
    NotSequenceConvertibleError,
    OddArgumentCountError,
    RecursiveFlattenError,
    SelfMergeError,
)
from mapext.ext_dict import ExtDict  # noqa: E402

__all__ = [
    "ABSENT",
    "AbsentType",
    "ConstructionInput",
    "ExtDict",
    "FlatInput",
    "InvalidElementShapeError",
    "InvalidElementTypeError",
    "KeyNotFoundError",
    "MapExtError",
    "MappingInput",
    "NotMappingConvertibleError",
    "NotSequenceConvertibleError",
    "OddArgumentCountError",
    "PairsInput",
    "PendingFilter",
    "RecursiveFlattenError",
    "SelfMergeError",
    "__version__",
    "classify_args",
    "delete_if",
    "fetch",
    "flatten",
    "from_args",
    "from_flat",
    "from_input",
    "from_mapping",
    "from_pairs",
    "invert",
    "is_absent",
    "is_mapping_convertible",
    "is_sequence_convertible",
    "keep_if",
    "key_of",
    "merge_into",
    "to_dict",
    "update",
]
