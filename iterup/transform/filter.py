"""Filter operators

Option-based filtering (filter_map, find_map) and the find-like filter."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .._helpers import aiterate, resolve
from .._sentinel import Absent
from .._types import (
    BaseIterator,
    FilterFunction,
    IndexedFilterFunction,
    IndexedPredicate,
    Predicate,
)
from ..core import Iterup, from_async_iterator
from .map import enumerate

def filter_map[T, R](iterator: BaseIterator[T], f: FilterFunction[T, R]) -> Iterup[R]:
    """
    Transform and filter in one pass.
    
    Values mapped to Absent are dropped, everything else is yielded as is
    (None included).
    
    Example:
        from iterup import Absent
        
        await filter_map([10, 2, 30], lambda v: v if v >= 10 else Absent).collect()
        # [10, 30]
    """

    async def generator() -> AsyncIterator[R]:
        async for value in aiterate(iterator):
            new_value = await resolve(f(value))
            if new_value is Absent:
                continue
            yield new_value

    return from_async_iterator(generator())

def filter_map_indexed[T, R](
    iterator: BaseIterator[T],
    f: IndexedFilterFunction[T, R],
) -> Iterup[R]:
    """filter_map() with the element index as second argument."""
    return filter_map(enumerate(iterator), lambda pair: f(*pair))

async def find_map[T, R](iterator: BaseIterator[T], f: FilterFunction[T, R]) -> R | None:
    """
    First value `f` does not map to Absent, or None when the source runs out.
    
    Stops pulling as soon as a match is found.
    """
    async for value in aiterate(iterator):
        new_value = await resolve(f(value))
        if new_value is Absent:
            continue
        return new_value
    return None

async def find_map_indexed[T, R](
    iterator: BaseIterator[T],
    f: IndexedFilterFunction[T, R],
) -> R | None:
    """find_map() with the element index as second argument."""
    return await find_map(enumerate(iterator), lambda pair: f(*pair))

async def filter[T](iterator: BaseIterator[T], f: Predicate[T]) -> T | None:
    """
    First value the predicate accepts, or None when the source runs out.
    
    NOTE: unlike the builtin, this is a terminal "find". Use filter_map()
          for a filtered sequence.
    """
    async for value in aiterate(iterator):
        if await resolve(f(value)):
            return value
    return None

async def filter_indexed[T](iterator: BaseIterator[T], f: IndexedPredicate[T]) -> T | None:
    """filter() with the element index as second argument."""
    async for value, index in enumerate(iterator):
        if await resolve(f(value, index)):
            return value
    return None

__all__ = (
    "filter",
    "filter_indexed",
    "filter_map",
    "filter_map_indexed",
    "find_map",
    "find_map_indexed",
)
