"""
Zip operator
============

Pairs two sequences, pulling both sides concurrently.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

from .._helpers import aiterate, pull
from .._types import BaseIterator
from ..core import Iterup, from_async_iterator
from ..utils import is_iterup


def _unwrap[T](iterator: AsyncIterator[T]) -> AsyncIterator[T]:
    while is_iterup(iterator):
        iterator = iterator._target
    return iterator


async def _pull_both[T, U](
    left: AsyncIterator[T],
    right: AsyncIterator[U],
) -> tuple[tuple[bool, T | None], tuple[bool, U | None]]:
    left_task = asyncio.ensure_future(pull(left))
    right_task = asyncio.ensure_future(pull(right))
    try:
        return await asyncio.gather(left_task, right_task)
    finally:
        # A failed side must not leave the other one running detached.
        for task in (left_task, right_task):
            if not task.done():
                task.cancel()
        await asyncio.gather(left_task, right_task, return_exceptions=True)


def zip[T, U](iterator: BaseIterator[T], other: BaseIterator[U]) -> Iterup[tuple[T, U]]:
    """
    Pair values of two sequences, stop at the shorter one.

    Each step starts both pulls before awaiting either, so slow sources
    overlap instead of adding up. When one side ends, the value already
    drawn from the other side in that step is discarded. When one side
    raises, the other side's pending pull is cancelled and the error
    reaches the caller unchanged.

    Zipping a sequence with itself pulls left then right, since one
    iterator cannot serve two pulls at once.

    Example:
        await zip([1, 2, 3], [3, 2]).collect()  # [(1, 3), (2, 2)]
        await zip(h, h).collect()               # h = iterup([1, 2, 3, 4]): [(1, 2), (3, 4)]
    """

    async def generator() -> AsyncIterator[tuple[T, U]]:
        left = aiterate(iterator)
        right = aiterate(other)
        shared = _unwrap(left) is _unwrap(right)
        while True:
            if shared:
                has_left, left_value = await pull(left)
                if not has_left:
                    return
                has_right, right_value = await pull(right)
            else:
                (has_left, left_value), (has_right, right_value) = await _pull_both(left, right)
            if not (has_left and has_right):
                return
            yield left_value, right_value  # type: ignore[misc]

    return from_async_iterator(generator())


__all__ = ("zip",)
