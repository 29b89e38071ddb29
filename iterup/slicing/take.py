"""Take / drop operators

Positional bounds on a sequence."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .._helpers import aiterate
from .._types import BaseIterator
from ..core import Iterup, from_async_iterator, from_iterable

def take[T](iterator: BaseIterator[T], count: int) -> Iterup[T]:
    """
    At most `count` values. Never pulls more than `count` from upstream.
    
    Example:
        await iterup(RangeArgument(start=10)).take(3).collect()  # [10, 11, 12]
    """
    if count <= 0:
        return from_iterable(())

    async def generator() -> AsyncIterator[T]:
        remaining = count
        async for value in aiterate(iterator):
            yield value
            remaining -= 1
            if remaining <= 0:
                break

    return from_async_iterator(generator())

def drop[T](iterator: BaseIterator[T], count: int) -> Iterup[T]:
    """Skip the first `count` values, yield the rest unchanged."""

    async def generator() -> AsyncIterator[T]:
        remaining = count
        async for value in aiterate(iterator):
            if remaining > 0:
                remaining -= 1
                continue
            yield value

    return from_async_iterator(generator())

__all__ = ("drop", "take")
