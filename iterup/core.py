"""
Iterup handle, source adapter and entry point.

Architecture:
- iterup(source)       - entry point, picks an adapter for the source shape
- to_async_iterator()  - adapter: any supported source -> async iterator
- Iterup[T]            - enhanced handle over exactly one async iterator

Every attribute access on a handle goes through Iterup.__getattr__:
1. registered operator  -> bound to the wrapped iterator
2. native callable      -> forwarded to the wrapped iterator, re-wrapped when
                           its name is in OVERRIDE_FUNCTIONS
3. anything else        -> raw value of the wrapped iterator
"""

from __future__ import annotations

import functools
import logging
import typing
from collections.abc import AsyncIterator, Awaitable, Iterable, Mapping

from ._errors import InvalidArgumentError
from .utils import is_async_iterable, is_async_iterator, is_iterable, is_iterup

if typing.TYPE_CHECKING:
    import math

    from kungfu import LazyCoroResult

    from ._errors import NoValueError, TypeMismatchError
    from ._types import (
        BaseIterator,
        FilterFunction,
        Folder,
        IndexedFilterFunction,
        IndexedMapFunction,
        IndexedPredicate,
        MapFunction,
        Predicate,
    )
    from .collection.range import RangeArgument

logger = logging.getLogger(__name__)


# ============================================================================
# Enhanced handle
# ============================================================================


class Iterup[T]:
    """
    Lazy, chainable async sequence.

    Wraps one async iterator. Lazy operators return a new Iterup, terminal
    operators return a coroutine that drives the chain.

    Example:
        result = await (
            iterup([1, 2, 3, 4, 5])
            .map(lambda x: x * 2)
            .filter_map(lambda x: x if x > 5 else Absent)
            .collect()
        )
        # [6, 8, 10]
    """

    __slots__ = ("_target",)

    def __init__(self, target: AsyncIterator[T], /) -> None:
        self._target = target

    # Protocol methods

    def __aiter__(self) -> Iterup[T]:
        return self

    def __anext__(self) -> Awaitable[T]:
        return self._target.__anext__()

    def __repr__(self) -> str:
        return f"Iterup({self._target!r})"

    # Interception

    def __getattr__(self, name: str) -> typing.Any:
        # Reached only when normal lookup fails, e.g. before __init__ ran.
        if name == "_target":
            raise AttributeError(name)

        target = self._target

        if not name.startswith("_"):
            from .extensions import lookup_extension

            extension = lookup_extension(name)
            if extension is not None:
                return _bind_extension(extension, target)

        value = getattr(target, name)
        if callable(value):
            return _forward_native(name, value)
        return value

    # Fluent surface for static checkers; __getattr__ provides it at runtime.
    if typing.TYPE_CHECKING:

        def enumerate(self) -> Iterup[tuple[T, int]]: ...
        def map[R](self, f: MapFunction[T, R], /) -> Iterup[R]: ...
        def map_indexed[R](self, f: IndexedMapFunction[T, R], /) -> Iterup[R]: ...
        def filter_map[R](self, f: FilterFunction[T, R], /) -> Iterup[R]: ...
        def filter_map_indexed[R](self, f: IndexedFilterFunction[T, R], /) -> Iterup[R]: ...
        def flat_map[R](self, f: MapFunction[T, BaseIterator[R]], /) -> Iterup[R]: ...
        def flat_map_indexed[R](self, f: IndexedMapFunction[T, BaseIterator[R]], /) -> Iterup[R]: ...
        def take(self, count: int, /) -> Iterup[T]: ...
        def drop(self, count: int, /) -> Iterup[T]: ...
        def cycle(self, cycles: int | float = math.inf, /) -> Iterup[T]: ...
        def zip[U](self, other: BaseIterator[U], /) -> Iterup[tuple[T, U]]: ...
        async def find_map[R](self, f: FilterFunction[T, R], /) -> R | None: ...
        async def find_map_indexed[R](self, f: IndexedFilterFunction[T, R], /) -> R | None: ...
        async def filter(self, f: Predicate[T], /) -> T | None: ...
        async def filter_indexed(self, f: IndexedPredicate[T], /) -> T | None: ...
        async def collect(self) -> list[T]: ...
        async def to_array(self) -> list[T]: ...
        async def to_list(self) -> list[T]: ...
        async def fold[A](self, initial: A, f: Folder[A, T], /) -> A: ...
        async def reduce(self, f: Folder[T, T], /) -> T | None: ...
        async def for_each(self, f: MapFunction[T, typing.Any], /) -> None: ...
        async def for_each_indexed(self, f: IndexedMapFunction[T, typing.Any], /) -> None: ...
        async def sum(self) -> int | float: ...
        async def min(self) -> int | float: ...
        async def max(self) -> int | float: ...
        def try_collect(self) -> LazyCoroResult[list[T], Exception]: ...
        def try_fold[A](self, initial: A, f: Folder[A, T], /) -> LazyCoroResult[A, Exception]: ...
        def try_sum(self) -> LazyCoroResult[int | float, TypeMismatchError]: ...
        def try_min(self) -> LazyCoroResult[int | float, TypeMismatchError]: ...
        def try_max(self) -> LazyCoroResult[int | float, TypeMismatchError]: ...
        def try_find_map[R](self, f: FilterFunction[T, R], /) -> LazyCoroResult[R, NoValueError]: ...
        def try_filter(self, f: Predicate[T], /) -> LazyCoroResult[T, NoValueError]: ...
        def try_reduce(self, f: Folder[T, T], /) -> LazyCoroResult[T, NoValueError]: ...


def _bind_extension(
    extension: typing.Callable[..., typing.Any],
    target: AsyncIterator[typing.Any],
) -> typing.Callable[..., typing.Any]:
    @functools.wraps(extension)
    def bound(*args: typing.Any, **kwargs: typing.Any) -> typing.Any:
        return extension(target, *args, **kwargs)

    return bound


def _forward_native(
    name: str,
    method: typing.Callable[..., typing.Any],
) -> typing.Callable[..., typing.Any]:
    from .extensions import OVERRIDE_FUNCTIONS

    # `method` was looked up on the wrapped iterator, so it is already bound to it.
    def forward(*args: typing.Any, **kwargs: typing.Any) -> typing.Any:
        result = method(*args, **kwargs)
        if name in OVERRIDE_FUNCTIONS:
            logger.debug("re-wrapping result of producing native %r", name)
            return iterup(result)
        return result

    forward.__name__ = name
    forward.__doc__ = getattr(method, "__doc__", None)
    return forward


# ============================================================================
# Adapters
# ============================================================================


def from_async_iterator[T](iterator: AsyncIterator[T]) -> Iterup[T]:
    """Wrap an async iterator. Handles are returned unchanged."""
    if is_iterup(iterator):
        return iterator
    return Iterup(iterator)


def from_iterable[T](iterable: Iterable[T]) -> Iterup[T]:
    """
    Wrap a sync iterable (list, set, generator, ...) as an async sequence.

    The iterable is walked lazily, one element per pull.
    """

    async def generator() -> AsyncIterator[T]:
        for value in iterable:
            yield value

    return Iterup(generator())


def to_async_iterator[T](source: BaseIterator[T]) -> AsyncIterator[T]:
    """
    Normalize any supported source into an async iterator.

    Dispatch order: range descriptor, async iterator (handles included),
    async iterable, sync iterable. Range descriptors win over the mapping
    they are spelled as, so {"from": 1, "to": 3} counts instead of
    yielding its keys.
    """
    from .collection.range import as_range_argument, range

    range_argument = as_range_argument(source)
    if range_argument is not None:
        logger.debug("adapter: range descriptor %r", range_argument)
        return range(range_argument.start, range_argument.end)

    if is_async_iterator(source):
        return source
    if is_async_iterable(source):
        logger.debug("adapter: async iterable %s", type(source).__name__)
        return aiter(source)
    if is_iterable(source):
        logger.debug("adapter: iterable %s", type(source).__name__)
        return from_iterable(source)
    raise InvalidArgumentError(source)


# ============================================================================
# Entry point
# ============================================================================


@typing.overload
def iterup(source: RangeArgument | Mapping[str, int], /) -> Iterup[int]: ...


@typing.overload
def iterup[T](source: BaseIterator[T], /) -> Iterup[T]: ...


def iterup(source: typing.Any, /) -> Iterup[typing.Any]:
    """
    Create an Iterup from a collection, an (async) iterator or a range.

    Example:
        iterup([1, 2, 3])                  # from a list
        iterup(agen())                     # from an async generator
        iterup(RangeArgument(start=1))     # 1, 2, 3, ...
        iterup({"from": 0, "to": 5})       # 0, 1, 2, 3, 4, 5

    Wrapping a handle again returns it unchanged.
    """
    if is_iterup(source):
        return source
    return from_async_iterator(to_async_iterator(source))


__all__ = (
    "Iterup",
    "from_async_iterator",
    "from_iterable",
    "iterup",
    "to_async_iterator",
)
