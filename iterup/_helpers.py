"""Internal helpers for iterup.

Common functions used across operator modules.
These are not part of the public API but are handy when writing custom operators."""

from __future__ import annotations

import inspect
import numbers
import typing
from collections.abc import AsyncIterator, Awaitable

from ._types import BaseIterator, MaybeAwaitable

# Callback results
async def resolve[T](value: MaybeAwaitable[T]) -> T:
    """
    Await value if it is awaitable, otherwise return it as is.
    
    Lets every callback be either sync or async:
        map(it, lambda x: x * 2)
        map(it, fetch_price)   # async def fetch_price(x) -> float
    """
    if inspect.isawaitable(value):
        return await typing.cast("Awaitable[T]", value)
    return typing.cast("T", value)

# Source normalization
def aiterate[T](source: BaseIterator[T]) -> AsyncIterator[T]:
    """
    Turn any supported source into an async iterator.
    
    Async iterators (handles included) are returned as is, everything else
    goes through the adapter in core.
    """
    from .core import to_async_iterator
    return to_async_iterator(source)

# Single pull
async def pull[T](iterator: AsyncIterator[T]) -> tuple[bool, T | None]:
    """
    Pull one element: (True, value) or (False, None) at end of sequence.
    
    Safe to schedule as a task (StopAsyncIteration never leaves the coroutine).
    """
    try:
        return True, await anext(iterator)
    except StopAsyncIteration:
        return False, None

# Numeric guard
def is_numeric(value: object) -> bool:
    """Real number that is not a bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)

__all__ = (
    "resolve",
    "aiterate",
    "pull",
    "is_numeric",
)
