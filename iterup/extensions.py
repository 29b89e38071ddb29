"""
Operator registry for the Iterup handle.

Iterup.__getattr__ resolves method names here. Each entry takes the wrapped
iterator as first argument, so `handle.take(3)` is `take(iterator, 3)`.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Mapping
from types import MappingProxyType

from . import lift
from .collection import collect, fold, for_each, for_each_indexed, max, min, reduce, sum
from .concurrency import zip
from .slicing import cycle, drop, take
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

type Extension = Callable[..., typing.Any]

EXTENSIONS: Mapping[str, Extension] = MappingProxyType({
    # Lazy
    "enumerate": enumerate,
    "map": map,
    "map_indexed": map_indexed,
    "filter_map": filter_map,
    "filter_map_indexed": filter_map_indexed,
    "flat_map": flat_map,
    "flat_map_indexed": flat_map_indexed,
    "take": take,
    "drop": drop,
    "cycle": cycle,
    "zip": zip,
    # Terminal
    "find_map": find_map,
    "find_map_indexed": find_map_indexed,
    "filter": filter,
    "filter_indexed": filter_indexed,
    "collect": collect,
    "to_array": collect,
    "to_list": collect,
    "fold": fold,
    "reduce": reduce,
    "for_each": for_each,
    "for_each_indexed": for_each_indexed,
    # Result bridge
    "try_collect": lift.try_collect,
    "try_fold": lift.try_fold,
    "try_sum": lift.try_sum,
    "try_min": lift.try_min,
    "try_max": lift.try_max,
    "try_find_map": lift.try_find_map,
    "try_filter": lift.try_filter,
    "try_reduce": lift.try_reduce,
})

NUMERIC_EXTENSIONS: Mapping[str, Extension] = MappingProxyType({
    "sum": sum,
    "min": min,
    "max": max,
})

# Names of native methods of the wrapped iterator whose result is itself a
# sequence; the handle re-wraps those results. Empty for plain async generators.
OVERRIDE_FUNCTIONS: set[str] = set()


def lookup_extension(name: str) -> Extension | None:
    """Registered operator for `name`, or None."""
    extension = EXTENSIONS.get(name)
    if extension is None:
        extension = NUMERIC_EXTENSIONS.get(name)
    return extension


__all__ = ("EXTENSIONS", "NUMERIC_EXTENSIONS", "OVERRIDE_FUNCTIONS", "lookup_extension")
