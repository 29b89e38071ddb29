"""Numeric operators

sum / min / max over sequences of real numbers."""

from __future__ import annotations

from .._errors import TypeMismatchError
from .._helpers import aiterate, is_numeric
from .._types import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, BaseIterator

type Number = int | float

async def sum(iterator: BaseIterator[Number]) -> Number:
    """Arithmetic sum, 0 for an empty sequence."""
    total: Number = 0
    async for value in aiterate(iterator):
        if not is_numeric(value):
            raise TypeMismatchError("sum", value)
        total += value
    return total

async def min(iterator: BaseIterator[Number]) -> Number:
    """Smallest value, MAX_SAFE_INTEGER for an empty sequence."""
    lowest: Number = MAX_SAFE_INTEGER
    async for value in aiterate(iterator):
        if not is_numeric(value):
            raise TypeMismatchError("min", value)
        if value < lowest:
            lowest = value
    return lowest

async def max(iterator: BaseIterator[Number]) -> Number:
    """Largest value, MIN_SAFE_INTEGER for an empty sequence."""
    highest: Number = MIN_SAFE_INTEGER
    async for value in aiterate(iterator):
        if not is_numeric(value):
            raise TypeMismatchError("max", value)
        if value > highest:
            highest = value
    return highest

__all__ = ("Number", "max", "min", "sum")
