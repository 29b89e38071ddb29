from __future__ import annotations

import asyncio
import typing
from collections.abc import AsyncIterator, Callable, Iterable
from dataclasses import dataclass, field

import pytest


@dataclass(slots=True)
class CallCounter[T, R]:
    """Wraps a function and records every argument it was called with."""

    fn: Callable[[T], R]
    calls: list[T] = field(default_factory=list)

    def __call__(self, value: T) -> R:
        self.calls.append(value)
        return self.fn(value)

    @property
    def count(self) -> int:
        return len(self.calls)


async def agen[T](values: Iterable[T], *, delay: float = 0.0) -> AsyncIterator[T]:
    """Async generator over values, sleeping `delay` before each one."""
    for value in values:
        await asyncio.sleep(delay)
        yield value


@pytest.fixture
def counter() -> Callable[..., CallCounter[typing.Any, typing.Any]]:
    def make(fn: Callable[[typing.Any], typing.Any] = lambda v: v) -> CallCounter[typing.Any, typing.Any]:
        return CallCounter(fn)

    return make
