from __future__ import annotations

from _infra import banner, run

from kungfu import Error, Ok

from iterup import Absent, iterup


async def main() -> None:
    banner("03_results: try_* terminals return LazyCoroResult")

    match await iterup([1, 2, "three"]).try_sum():
        case Ok(total):
            print(f"sum: {total}")
        case Error(err):
            print(f"error: {err}")  # sum is not supported for non numeric iterators (got 'three')

    # None is a real element; "nothing found" is an Error, not None.
    match await iterup([None, 4]).try_find_map(lambda v: v):
        case Ok(found):
            print(f"found: {found!r}")  # found: None
        case Error(err):
            print(f"error: {err}")

    match await iterup([1, 3]).try_find_map(lambda v: v if v % 2 == 0 else Absent):
        case Ok(found):
            print(f"found: {found!r}")
        case Error(err):
            print(f"error: {err}")  # find_map produced no value

    # Lazy: nothing is pulled until awaited.
    pending = iterup(["1", "2", "x"]).map(int).try_collect()
    print(await pending)  # Error(ValueError(...))


if __name__ == "__main__":
    run(main)
