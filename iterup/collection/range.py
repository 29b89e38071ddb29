"""
Range operator
==============

Inclusive integer ranges and the descriptor the entry point accepts.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass

from .._errors import InvalidArgumentError
from .._types import MAX_SAFE_INTEGER

if typing.TYPE_CHECKING:
    from ..core import Iterup

# Keys of the mapping form: {"from": 1, "to": 3}
_RANGE_KEYS = frozenset({"from", "to"})


@dataclass(frozen=True, slots=True)
class RangeArgument:
    """Inclusive bounds of a counting sequence."""

    start: int = 0
    end: int = MAX_SAFE_INTEGER

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            bound = getattr(self, name)
            if not isinstance(bound, int) or isinstance(bound, bool):
                raise InvalidArgumentError(self, f"RangeArgument.{name} must be an int, got {bound!r}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int]) -> RangeArgument:
        """Build from {"from": ..., "to": ...}; both keys optional."""
        return cls(
            start=mapping.get("from", 0),
            end=mapping.get("to", MAX_SAFE_INTEGER),
        )


def as_range_argument(value: object) -> RangeArgument | None:
    """
    RangeArgument for range-shaped values, None for everything else.

    A mapping is range-shaped when it is non-empty and has no keys
    besides "from" and "to". An empty dict stays an (empty) collection.
    """
    if isinstance(value, RangeArgument):
        return value
    if isinstance(value, Mapping) and value and set(value.keys()) <= _RANGE_KEYS:
        return RangeArgument.from_mapping(value)
    return None


def range(start: int = 0, end: int = MAX_SAFE_INTEGER) -> Iterup[int]:
    """
    Every integer in [start, end], ascending.

    Empty when start > end.

    Example:
        await range(1, 3).collect()  # [1, 2, 3]
        await range(5, 1).collect()  # []
    """
    from ..core import from_async_iterator, from_iterable

    bounds = RangeArgument(start, end)
    if bounds.start > bounds.end:
        return from_iterable(())

    async def generator() -> AsyncIterator[int]:
        count = bounds.start
        while count <= bounds.end:
            yield count
            count += 1

    return from_async_iterator(generator())


__all__ = ("RangeArgument", "as_range_argument", "range")
