from __future__ import annotations

from _infra import banner, run

from iterup import Absent, iterup


async def main() -> None:
    banner("01_quickstart: filter_map + map + drop + take")

    evens_doubled = await (
        iterup(range(1, 11))
        .filter_map(lambda n: n if n % 2 == 0 else Absent)
        .map(lambda n: n * 2)
        .drop(1)
        .take(2)
        .collect()
    )
    print(evens_doubled)  # [8, 12]

    banner("ranges, cycle, zip")

    labels = await iterup({"from": 1, "to": 3}).map(lambda v: f"#{v}").cycle(2).collect()
    print(labels)  # ['#1', '#2', '#3', '#1', '#2', '#3']

    pairs = await iterup("abc").zip(iterup({"from": 1})).collect()
    print(pairs)  # [('a', 1), ('b', 2), ('c', 3)]

    banner("terminals")

    print(await iterup([5, 4, 2, 0, -10, 890]).min())  # -10
    print(await iterup([3, 4]).fold(1, lambda acc, v: acc * v))  # 12
    print(await iterup(["x", "yy", "zzz"]).filter(lambda s: len(s) > 1))  # yy


if __name__ == "__main__":
    run(main)
