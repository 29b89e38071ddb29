import asyncio

import pytest

from iterup import Absent, filter, find_map, iterup


class TestFindMap:
    @pytest.mark.asyncio
    async def test_none_when_nothing_matches(self):
        assert await iterup([10, 2, 30]).find_map(lambda v: v if v < 0 else Absent) is None

    @pytest.mark.asyncio
    async def test_returns_mapped_value(self):
        assert await iterup([10, 2, 30]).find_map(lambda v: "Its a 10" if v == 10 else Absent) == "Its a 10"

    @pytest.mark.asyncio
    async def test_async_transform(self):
        async def first_even(value):
            await asyncio.sleep(0.001)
            return f"First even: {value}" if value % 2 == 0 else Absent

        assert await iterup([1, 3, 5, 2, 4]).find_map(first_even) == "First even: 2"

    @pytest.mark.asyncio
    async def test_stops_at_first_match(self, counter):
        probe = counter(lambda v: "found" if v == 2 else Absent)
        assert await iterup([1, 2, 3, 4, 5]).find_map(probe) == "found"
        assert probe.count == 2

    @pytest.mark.asyncio
    async def test_empty_source(self):
        assert await find_map([], lambda v: v) is None

    @pytest.mark.asyncio
    async def test_indexed(self):
        assert await iterup("abc").find_map_indexed(lambda v, i: f"{v}@{i}" if i == 1 else Absent) == "b@1"


class TestFilter:
    @pytest.mark.asyncio
    async def test_returns_first_accepted_element(self):
        assert await iterup([1, 2, 3, 4]).filter(lambda v: v > 2) == 3

    @pytest.mark.asyncio
    async def test_none_when_exhausted(self):
        assert await iterup([1, 2]).filter(lambda v: v > 5) is None

    @pytest.mark.asyncio
    async def test_async_predicate(self):
        async def is_big(value):
            await asyncio.sleep(0)
            return value > 10

        assert await filter([5, 50, 500], is_big) == 50

    @pytest.mark.asyncio
    async def test_stops_at_first_match(self, counter):
        probe = counter(lambda v: v == 1)
        await iterup([0, 1, 2, 3]).filter(probe)
        assert probe.calls == [0, 1]

    @pytest.mark.asyncio
    async def test_indexed(self):
        assert await iterup(["x", "y", "z"]).filter_indexed(lambda v, i: i == 2) == "z"
