"""
Cycle operator
==============

Repeat a sequence, pulling the source only once.
"""

from __future__ import annotations

import math
from collections.abc import AsyncIterator

from .._helpers import aiterate
from .._types import BaseIterator
from ..core import Iterup, from_async_iterator, from_iterable


def cycle[T](iterator: BaseIterator[T], cycles: int | float = math.inf) -> Iterup[T]:
    """
    Repeat the values `cycles` times (forever by default).

    The first pass pulls from the source and caches every value; later
    passes replay the cache. Bound an endless cycle downstream with take().

    Example:
        await iterup([1, 2]).cycle().take(5).collect()  # [1, 2, 1, 2, 1]
        await iterup([1, 2]).cycle(2).collect()         # [1, 2, 1, 2]
    """
    if cycles <= 0:
        return from_iterable(())

    async def generator() -> AsyncIterator[T]:
        cache: list[T] = []
        async for value in aiterate(iterator):
            cache.append(value)
            yield value

        # Empty source: replaying would spin forever.
        if not cache:
            return

        rounds = 1
        while rounds < cycles:
            for value in cache:
                yield value
            rounds += 1

    return from_async_iterator(generator())


__all__ = ("cycle",)
