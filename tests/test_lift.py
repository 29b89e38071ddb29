import pytest
from kungfu import Error, Ok

from iterup import Absent, NoValueError, TypeMismatchError, attempt, iterup, try_collect


class TestAttempt:
    @pytest.mark.asyncio
    async def test_ok(self):
        result = await attempt(lambda: iterup([1, 2]).collect())
        assert result.unwrap() == [1, 2]

    @pytest.mark.asyncio
    async def test_error(self):
        def parse(value):
            return int(value)

        result = await attempt(lambda: iterup(["1", "x"]).map(parse).collect())
        match result:
            case Error(err):
                assert isinstance(err, ValueError)
            case Ok(value):
                pytest.fail(f"expected Error, got Ok({value!r})")

    @pytest.mark.asyncio
    async def test_uncaught_class_propagates(self):
        def explode(value):
            raise KeyError(value)

        with pytest.raises(KeyError):
            await attempt(lambda: iterup([1]).map(explode).collect(), catch=ValueError)

    @pytest.mark.asyncio
    async def test_is_lazy(self, counter):
        probe = counter()
        lazy = try_collect(iterup([1, 2]).map(probe))
        assert probe.count == 0
        assert (await lazy).unwrap() == [1, 2]
        assert probe.count == 2


class TestTryTerminals:
    @pytest.mark.asyncio
    async def test_try_sum_ok(self):
        assert (await iterup([1, 2, 3]).try_sum()).unwrap() == 6

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", ["try_sum", "try_min", "try_max"])
    async def test_numeric_mismatch_is_error(self, operation):
        result = await getattr(iterup([1, "x"]), operation)()
        match result:
            case Error(err):
                assert isinstance(err, TypeMismatchError)
                assert err.value == "x"
            case Ok(value):
                pytest.fail(f"expected Error, got Ok({value!r})")

    @pytest.mark.asyncio
    async def test_try_fold(self):
        assert (await iterup([1, 2]).try_fold(0, lambda a, v: a + v)).unwrap() == 3

    @pytest.mark.asyncio
    async def test_try_find_map_distinguishes_none_match(self):
        found = await iterup([None, 1]).try_find_map(lambda v: v)
        assert found.unwrap() is None

    @pytest.mark.asyncio
    async def test_try_find_map_no_match(self):
        result = await iterup([1, 2]).try_find_map(lambda v: Absent)
        match result:
            case Error(err):
                assert isinstance(err, NoValueError)
                assert err.operation == "find_map"
            case Ok(value):
                pytest.fail(f"expected Error, got Ok({value!r})")

    @pytest.mark.asyncio
    async def test_try_filter(self):
        assert (await iterup([1, 5, 9]).try_filter(lambda v: v > 4)).unwrap() == 5
        missing = await iterup([1]).try_filter(lambda v: v > 4)
        assert isinstance(missing, Error)

    @pytest.mark.asyncio
    async def test_try_reduce(self):
        assert (await iterup([1, 2, 3]).try_reduce(lambda a, b: a + b)).unwrap() == 6
        empty = await iterup([]).try_reduce(lambda a, b: a + b)
        assert isinstance(empty, Error)
