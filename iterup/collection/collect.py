"""Collect operator

Materialize a sequence into a list."""

from __future__ import annotations

from .._helpers import aiterate
from .._types import BaseIterator

async def collect[T](iterator: BaseIterator[T]) -> list[T]:
    """Pull every value into a list, in order."""
    return [value async for value in aiterate(iterator)]

# Aliases
to_array = collect
to_list = collect

__all__ = ("collect", "to_array", "to_list")
