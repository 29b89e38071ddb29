"""
Core type definitions for iterup.

Type aliases and constants shared across the library.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable, Iterable, Iterator

from ._sentinel import AbsentType

# ============================================================================
# Numeric bounds
# ============================================================================

# Same limits as the JavaScript runtime the API was designed against:
# default end of a range, identity of min() and max().
MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER

# ============================================================================
# Type aliases
# ============================================================================

# Option = value or the Absent marker
type Option[T] = T | AbsentType

# MaybeAwaitable = callback result that may need to be awaited
type MaybeAwaitable[T] = T | Awaitable[T]

# BaseIterator = anything the adapter can turn into an async iterator
type BaseIterator[T] = Iterable[T] | Iterator[T] | AsyncIterable[T] | AsyncIterator[T]

# Predicate = function that tests a value (possibly async)
type Predicate[T] = Callable[[T], MaybeAwaitable[bool]]

# MapFunction = per-element transform (possibly async)
type MapFunction[T, R] = Callable[[T], MaybeAwaitable[R]]

# FilterFunction = transform that can drop the element by returning Absent
type FilterFunction[T, R] = Callable[[T], MaybeAwaitable[Option[R]]]

# Indexed variants receive (value, index)
type IndexedMapFunction[T, R] = Callable[[T, int], MaybeAwaitable[R]]
type IndexedFilterFunction[T, R] = Callable[[T, int], MaybeAwaitable[Option[R]]]
type IndexedPredicate[T] = Callable[[T, int], MaybeAwaitable[bool]]

# Folder = (accumulator, value) -> accumulator
type Folder[A, T] = Callable[[A, T], MaybeAwaitable[A]]

__all__ = (
    # Constants
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    # Type aliases
    "Option",
    "MaybeAwaitable",
    "BaseIterator",
    "Predicate",
    "MapFunction",
    "FilterFunction",
    "IndexedMapFunction",
    "IndexedFilterFunction",
    "IndexedPredicate",
    "Folder",
)
