from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterator, Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Reading:
    sensor: str
    value: float | str


@dataclass(slots=True)
class FakeSensorFeed:
    """Async source that emits readings with a delay, like a socket would."""

    sensor: str
    values: tuple[float | str, ...]
    delay_seconds: float = 0.0

    async def stream(self) -> AsyncIterator[Reading]:
        for value in self.values:
            await asyncio.sleep(self.delay_seconds)
            yield Reading(self.sensor, value)


async def fetch_label(sensor: str) -> str:
    await asyncio.sleep(0.01)
    return sensor.upper()


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
