"""
Fold operators
==============

Left-to-right accumulation and side-effecting traversal.
"""

from __future__ import annotations

import typing

from .._helpers import aiterate, pull, resolve
from .._types import BaseIterator, Folder, IndexedMapFunction, MapFunction


async def fold[A, T](iterator: BaseIterator[T], initial: A, f: Folder[A, T]) -> A:
    """
    Accumulate from `initial`. Returns `initial` for an empty sequence.

    Example:
        await fold([1, 2, 3], "", lambda acc, v: acc + str(v))  # "123"
    """
    acc = initial
    async for value in aiterate(iterator):
        acc = await resolve(f(acc, value))
    return acc


async def reduce[T](iterator: BaseIterator[T], f: Folder[T, T]) -> T | None:
    """
    fold() seeded with the first value. None for an empty sequence;
    a single value is returned without calling `f`.
    """
    source = aiterate(iterator)
    has_first, first = await pull(source)
    if not has_first:
        return None
    return await fold(source, typing.cast("T", first), f)


async def for_each[T](iterator: BaseIterator[T], f: MapFunction[T, typing.Any]) -> None:
    """Call `f` on every value in order, awaiting each call before the next pull."""
    async for value in aiterate(iterator):
        await resolve(f(value))


async def for_each_indexed[T](
    iterator: BaseIterator[T],
    f: IndexedMapFunction[T, typing.Any],
) -> None:
    """for_each() with the element index as second argument."""
    index = 0
    async for value in aiterate(iterator):
        await resolve(f(value, index))
        index += 1


__all__ = ("fold", "for_each", "for_each_indexed", "reduce")
