import asyncio
from fractions import Fraction

import pytest

from conftest import agen

from iterup import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    TypeMismatchError,
    fold,
    for_each,
    iterup,
    reduce,
    sum,
)


class TestFold:
    @pytest.mark.asyncio
    async def test_accumulates_left_to_right(self):
        assert await iterup([1, 2, 3]).fold("", lambda acc, v: acc + str(v)) == "123"

    @pytest.mark.asyncio
    async def test_empty_returns_seed(self):
        seed = {"untouched": True}
        assert await fold([], seed, lambda acc, v: acc) is seed

    @pytest.mark.asyncio
    async def test_async_combiner(self):
        async def add(acc, value):
            await asyncio.sleep(0)
            return acc + value

        assert await iterup(agen([1, 2, 3])).fold(10, add) == 16

    @pytest.mark.asyncio
    async def test_callback_error_propagates(self):
        def explode(acc, value):
            if value == 2:
                raise ValueError("boom")
            return acc + value

        with pytest.raises(ValueError, match="boom"):
            await iterup([1, 2, 3]).fold(0, explode)


class TestReduce:
    @pytest.mark.asyncio
    async def test_empty_is_none(self):
        assert await reduce([], lambda a, b: a + b) is None

    @pytest.mark.asyncio
    async def test_single_value_skips_callback(self, counter):
        probe = counter()
        assert await iterup([42]).reduce(lambda a, b: probe(b)) == 42
        assert probe.count == 0

    @pytest.mark.asyncio
    async def test_seeds_with_first_value(self):
        calls = []

        def combine(acc, value):
            calls.append((acc, value))
            return acc * value

        assert await iterup([2, 3, 4]).reduce(combine) == 24
        assert calls == [(2, 3), (6, 4)]


class TestForEach:
    @pytest.mark.asyncio
    async def test_visits_every_value_in_order(self):
        seen = []
        assert await iterup([1, 2, 3]).for_each(seen.append) is None
        assert seen == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_awaits_each_callback(self):
        events = []

        async def visit(value):
            events.append(("start", value))
            await asyncio.sleep(0.001)
            events.append(("end", value))

        await for_each([1, 2], visit)
        assert events == [("start", 1), ("end", 1), ("start", 2), ("end", 2)]

    @pytest.mark.asyncio
    async def test_indexed(self):
        seen = []
        await iterup("ab").for_each_indexed(lambda v, i: seen.append((i, v)))
        assert seen == [(0, "a"), (1, "b")]


class TestCollectAliases:
    @pytest.mark.asyncio
    async def test_aliases(self):
        assert await iterup([1, 2]).to_array() == [1, 2]
        assert await iterup([1, 2]).to_list() == [1, 2]


class TestNumeric:
    @pytest.mark.asyncio
    async def test_sum(self):
        assert await iterup({"from": 1}).take(3).map(lambda _: 10).sum() == 30

    @pytest.mark.asyncio
    async def test_sum_floats_and_fractions(self):
        assert await sum([0.5, 0.25, Fraction(1, 4)]) == 1

    @pytest.mark.asyncio
    async def test_min(self):
        assert await iterup([5, 4, 2, 0, -10, 890]).min() == -10

    @pytest.mark.asyncio
    async def test_max(self):
        assert await iterup([5, 4, 2, 890, 0, -10]).max() == 890

    @pytest.mark.asyncio
    async def test_empty_identities(self):
        assert await iterup([]).sum() == 0
        assert await iterup([]).min() == MAX_SAFE_INTEGER
        assert await iterup([]).max() == MIN_SAFE_INTEGER

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", ["sum", "min", "max"])
    async def test_non_numeric_raises(self, operation):
        handle = iterup({"from": 1}).take(3).map(lambda _: "Ten")
        with pytest.raises(TypeMismatchError) as exc_info:
            await getattr(handle, operation)()
        assert exc_info.value.operation == operation
        assert exc_info.value.value == "Ten"

    @pytest.mark.asyncio
    async def test_mixed_input_fails_whole_call(self):
        with pytest.raises(TypeMismatchError):
            await sum([1, 2, "x"])

    @pytest.mark.asyncio
    async def test_bool_is_not_numeric(self):
        with pytest.raises(TypeMismatchError):
            await sum([1, True])

    @pytest.mark.asyncio
    async def test_type_mismatch_is_a_type_error(self):
        with pytest.raises(TypeError):
            await iterup([None]).max()
