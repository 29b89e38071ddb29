"""
iterup - lazy, chainable async sequences.

Wrap any collection, (async) iterator or range in an Iterup and chain
operators on it. Nothing is pulled until a terminal operation runs.

Architecture:
- iterup() entry point + Iterup handle (core)
- Operators as free functions taking the source first (transform, slicing,
  concurrency, collection); the handle exposes each one as a method
- try_* terminals returning kungfu LazyCoroResult (lift)

Example:
    from iterup import Absent, iterup

    result = await (
        iterup([1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
        .filter_map(lambda n: n if n % 2 == 0 else Absent)
        .map(lambda n: n * 2)
        .drop(1)
        .take(2)
        .collect()
    )
    # [8, 12]
"""

# Core
from .core import Iterup, from_async_iterator, from_iterable, iterup, to_async_iterator

# Option protocol
from ._sentinel import Absent, AbsentType, is_absent

# Types
from ._types import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, BaseIterator, Option

# Type guards
from .utils import (
    is_async_iterable,
    is_async_iterator,
    is_iterable,
    is_iterator,
    is_iterup,
)

# Transform
from .transform import (
    enumerate,
    filter,
    filter_indexed,
    filter_map,
    filter_map_indexed,
    find_map,
    find_map_indexed,
    flat_map,
    flat_map_indexed,
    map,
    map_indexed,
)

# Slicing
from .slicing import cycle, drop, take

# Concurrency
from .concurrency import zip

# Collection
from .collection import (
    Number,
    RangeArgument,
    collect,
    fold,
    for_each,
    for_each_indexed,
    max,
    min,
    range,
    reduce,
    sum,
    to_array,
    to_list,
)

# Result bridge
from . import lift
from .lift import (
    attempt,
    try_collect,
    try_filter,
    try_find_map,
    try_fold,
    try_max,
    try_min,
    try_reduce,
    try_sum,
)

# Registry
from .extensions import EXTENSIONS, NUMERIC_EXTENSIONS, OVERRIDE_FUNCTIONS

# Errors
from ._errors import InvalidArgumentError, NoValueError, TypeMismatchError

__all__ = (
    # Core
    "Iterup",
    "iterup",
    "from_async_iterator",
    "from_iterable",
    "to_async_iterator",
    # Option protocol
    "Absent",
    "AbsentType",
    "is_absent",
    # Types
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    "BaseIterator",
    "Number",
    "Option",
    "RangeArgument",
    # Type guards
    "is_async_iterable",
    "is_async_iterator",
    "is_iterable",
    "is_iterator",
    "is_iterup",
    # Transform - lazy
    "enumerate",
    "filter_map",
    "filter_map_indexed",
    "flat_map",
    "flat_map_indexed",
    "map",
    "map_indexed",
    # Transform - terminal
    "filter",
    "filter_indexed",
    "find_map",
    "find_map_indexed",
    # Slicing
    "cycle",
    "drop",
    "take",
    # Concurrency
    "zip",
    # Collection
    "range",
    "collect",
    "to_array",
    "to_list",
    "fold",
    "reduce",
    "for_each",
    "for_each_indexed",
    "sum",
    "min",
    "max",
    # Result bridge
    "lift",
    "attempt",
    "try_collect",
    "try_filter",
    "try_find_map",
    "try_fold",
    "try_max",
    "try_min",
    "try_reduce",
    "try_sum",
    # Registry
    "EXTENSIONS",
    "NUMERIC_EXTENSIONS",
    "OVERRIDE_FUNCTIONS",
    # Errors
    "InvalidArgumentError",
    "NoValueError",
    "TypeMismatchError",
)
