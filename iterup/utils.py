"""
Type guards for the source shapes iterup understands.

Pure predicates, no side effects. Used by the entry point to pick an adapter
and by operators that accept a second source (`zip`, `flat_map`).
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

if typing.TYPE_CHECKING:
    from .core import Iterup


def is_iterator[T](value: object) -> typing.TypeGuard[Iterator[T]]:
    """
    Synchronous iterator: has both `__iter__` and `__next__`.

    Example:
        is_iterator(iter([1, 2]))  # True
        is_iterator([1, 2])        # False - iterable, but not an iterator
    """
    return isinstance(value, Iterator)


def is_iterable[T](value: object) -> typing.TypeGuard[Iterable[T]]:
    """
    Anything `for` can walk: lists, sets, dicts, strings, generators.

    Example:
        is_iterable("hello")  # True
        is_iterable(42)       # False
    """
    return isinstance(value, Iterable)


def is_async_iterator[T](value: object) -> typing.TypeGuard[AsyncIterator[T]]:
    """Asynchronous iterator: has both `__aiter__` and `__anext__`."""
    return isinstance(value, AsyncIterator)


def is_async_iterable[T](value: object) -> typing.TypeGuard[AsyncIterable[T]]:
    """Anything `async for` can walk."""
    return isinstance(value, AsyncIterable)


def is_iterup[T](value: object) -> typing.TypeGuard[Iterup[T]]:
    """
    Enhanced handle produced by `iterup()`.

    Example:
        is_iterup(iterup([1, 2]).map(str))  # True
        is_iterup(aiter_of_something)       # False
    """
    from .core import Iterup

    return isinstance(value, Iterup)


__all__ = (
    "is_async_iterable",
    "is_async_iterator",
    "is_iterable",
    "is_iterator",
    "is_iterup",
)
