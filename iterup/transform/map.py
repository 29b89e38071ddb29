"""
Map operators
=============

Lazy per-element transforms: enumerate, map, flat_map and their indexed forms.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from .._helpers import aiterate, resolve
from .._types import BaseIterator, IndexedMapFunction, MapFunction
from ..core import Iterup, from_async_iterator


def enumerate[T](iterator: BaseIterator[T]) -> Iterup[tuple[T, int]]:
    """
    Pair every value with its position, starting at 0.

    Example:
        await enumerate(["a", "b"]).collect()  # [("a", 0), ("b", 1)]
    """

    async def generator() -> AsyncIterator[tuple[T, int]]:
        index = 0
        async for value in aiterate(iterator):
            yield value, index
            index += 1

    return from_async_iterator(generator())


def map[T, R](iterator: BaseIterator[T], f: MapFunction[T, R]) -> Iterup[R]:
    """
    Transform every value. `f` may be async; each result is awaited
    before the next value is pulled.
    """

    async def generator() -> AsyncIterator[R]:
        async for value in aiterate(iterator):
            yield await resolve(f(value))

    return from_async_iterator(generator())


def map_indexed[T, R](iterator: BaseIterator[T], f: IndexedMapFunction[T, R]) -> Iterup[R]:
    """map() with the element index as second argument."""
    return map(enumerate(iterator), lambda pair: f(*pair))


def flat_map[T, R](iterator: BaseIterator[T], f: MapFunction[T, BaseIterator[R]]) -> Iterup[R]:
    """
    Map every value to a sequence and yield its elements in order.

    Flattens one level. The nested sequence can be anything iterup accepts:
    a list, a string, a (async) generator or another Iterup.

    Example:
        await flat_map([1, 2], lambda x: [x, x * 10]).collect()  # [1, 10, 2, 20]
    """

    async def generator() -> AsyncIterator[R]:
        async for value in aiterate(iterator):
            nested = await resolve(f(value))
            async for item in aiterate(nested):
                yield item

    return from_async_iterator(generator())


def flat_map_indexed[T, R](
    iterator: BaseIterator[T],
    f: IndexedMapFunction[T, BaseIterator[R]],
) -> Iterup[R]:
    """flat_map() with the element index as second argument."""
    return flat_map(enumerate(iterator), lambda pair: f(*pair))


__all__ = ("enumerate", "flat_map", "flat_map_indexed", "map", "map_indexed")
