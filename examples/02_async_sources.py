from __future__ import annotations

from _infra import FakeSensorFeed, Reading, banner, fetch_label, run

from iterup import Absent, iterup


def numeric(reading: Reading) -> float | object:
    # Feeds occasionally emit status strings instead of measurements.
    return reading.value if isinstance(reading.value, float) else Absent


async def main() -> None:
    banner("02_async_sources: async generators + async callbacks")

    north = FakeSensorFeed("north", (1.5, "offline", 2.5, 3.0), delay_seconds=0.01)
    south = FakeSensorFeed("south", (0.5, 0.25, 0.75), delay_seconds=0.01)

    total = await iterup(north.stream()).filter_map(numeric).sum()
    print(f"north total: {total}")  # 7.0

    labelled = await (
        iterup(south.stream())
        .map(lambda r: fetch_label(r.sensor))
        .enumerate()
        .map(lambda pair: f"{pair[0]}-{pair[1]}")
        .collect()
    )
    print(labelled)  # ['SOUTH-0', 'SOUTH-1', 'SOUTH-2']

    banner("zip pulls both feeds concurrently")

    north = FakeSensorFeed("north", (1.0, 2.0), delay_seconds=0.05)
    south = FakeSensorFeed("south", (3.0, 4.0, 5.0), delay_seconds=0.05)
    side_by_side = await (
        iterup(north.stream())
        .zip(south.stream())
        .map(lambda pair: (pair[0].value, pair[1].value))
        .collect()
    )
    print(side_by_side)  # [(1.0, 3.0), (2.0, 4.0)]


if __name__ == "__main__":
    run(main)
