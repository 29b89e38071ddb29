"""
Lifting terminal operations into LazyCoroResult.

Plain terminals raise (TypeMismatchError, callback errors) and report
"no value" as None. The try_* versions return a kungfu LazyCoroResult instead:
nothing runs until it is awaited, failures come back as Error(...), and a
missing value is Error(NoValueError) so a None element is never ambiguous.

Example:
    from kungfu import Error, Ok
    
    match await iterup([1, 2, "x"]).try_sum():
        case Ok(total):
            print(total)
        case Error(err):
            print(f"not numeric: {err.value!r}")
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from ._errors import NoValueError, TypeMismatchError
from ._helpers import aiterate, pull, resolve
from ._sentinel import Absent
from ._types import BaseIterator, FilterFunction, Folder, Predicate
from .collection.collect import collect
from .collection.fold import fold
from .collection.numeric import Number, max, min, sum

# ============================================================================
# Generic lift
# ============================================================================


def attempt[T, E: BaseException](
    thunk: Callable[[], Awaitable[T]],
    *,
    catch: type[E] | tuple[type[E], ...] = Exception,  # type: ignore[assignment]
) -> LazyCoroResult[T, E]:
    """
    Defer an async thunk, turning exceptions of type `catch` into Error.
    
    Other exceptions propagate when the result is awaited.
    
    Example:
        result = await attempt(lambda: iterup(rows).map(parse).collect())
        # Ok([...]) or Error(ValueError(...))
    """
    async def run() -> Result[T, E]:
        try:
            return Ok(await thunk())
        except catch as exc:
            return Error(exc)

    return LazyCoroResult(run)


# ============================================================================
# Terminals
# ============================================================================


def try_collect[T](iterator: BaseIterator[T]) -> LazyCoroResult[list[T], Exception]:
    """collect() as a LazyCoroResult; any exception becomes Error."""
    return attempt(lambda: collect(iterator))


def try_fold[A, T](
    iterator: BaseIterator[T],
    initial: A,
    f: Folder[A, T],
) -> LazyCoroResult[A, Exception]:
    """fold() as a LazyCoroResult; any exception becomes Error."""
    return attempt(lambda: fold(iterator, initial, f))


def try_sum(iterator: BaseIterator[Number]) -> LazyCoroResult[Number, TypeMismatchError]:
    """sum() with non-numeric input reported as Error(TypeMismatchError)."""
    return attempt(lambda: sum(iterator), catch=TypeMismatchError)


def try_min(iterator: BaseIterator[Number]) -> LazyCoroResult[Number, TypeMismatchError]:
    """min() with non-numeric input reported as Error(TypeMismatchError)."""
    return attempt(lambda: min(iterator), catch=TypeMismatchError)


def try_max(iterator: BaseIterator[Number]) -> LazyCoroResult[Number, TypeMismatchError]:
    """max() with non-numeric input reported as Error(TypeMismatchError)."""
    return attempt(lambda: max(iterator), catch=TypeMismatchError)


# ============================================================================
# Lookups
# ============================================================================


def try_find_map[T, R](
    iterator: BaseIterator[T],
    f: FilterFunction[T, R],
) -> LazyCoroResult[R, NoValueError]:
    """
    find_map() where "nothing matched" is Error(NoValueError).
    
    Unlike find_map(), a match that maps to None is Ok(None).
    """
    async def run() -> Result[R, NoValueError]:
        async for value in aiterate(iterator):
            new_value = await resolve(f(value))
            if new_value is not Absent:
                return Ok(new_value)
        return Error(NoValueError("find_map"))

    return LazyCoroResult(run)


def try_filter[T](
    iterator: BaseIterator[T],
    f: Predicate[T],
) -> LazyCoroResult[T, NoValueError]:
    """filter() where "nothing matched" is Error(NoValueError)."""
    async def run() -> Result[T, NoValueError]:
        async for value in aiterate(iterator):
            if await resolve(f(value)):
                return Ok(value)
        return Error(NoValueError("filter"))

    return LazyCoroResult(run)


def try_reduce[T](
    iterator: BaseIterator[T],
    f: Folder[T, T],
) -> LazyCoroResult[T, NoValueError]:
    """reduce() where an empty sequence is Error(NoValueError)."""
    async def run() -> Result[T, NoValueError]:
        source = aiterate(iterator)
        has_first, first = await pull(source)
        if not has_first:
            return Error(NoValueError("reduce"))
        return Ok(await fold(source, first, f))

    return LazyCoroResult(run)


__all__ = (
    "attempt",
    "try_collect",
    "try_fold",
    "try_sum",
    "try_min",
    "try_max",
    "try_find_map",
    "try_filter",
    "try_reduce",
)
