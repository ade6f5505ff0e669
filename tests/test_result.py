"""Tests for the Result combinators and unwrap semantics."""

import copy
import pickle
from collections.abc import Callable

import pytest

import makilib as mk


class Counter:
    """Callable recording how many times it was called."""

    def __init__(self, func: Callable[..., object] = lambda x: x) -> None:
        self.calls = 0
        self._func = func

    def __call__(self, *args: object) -> object:
        self.calls += 1
        return self._func(*args)


class TestMatch:
    """`match` calls exactly the branch of the constructor used."""

    def test_ok_branch(self) -> None:
        on_ok, on_err = Counter(), Counter()
        assert mk.Ok(1).match(on_ok, on_err) == 1
        assert (on_ok.calls, on_err.calls) == (1, 0)

    def test_err_branch(self) -> None:
        on_ok, on_err = Counter(), Counter()
        assert mk.Err("e").match(on_ok, on_err) == "e"
        assert (on_ok.calls, on_err.calls) == (0, 1)

    def test_predicates(self) -> None:
        assert mk.Ok(1).is_ok()
        assert not mk.Ok(1).is_err()
        assert mk.Err(1).is_err()
        assert not mk.Err(1).is_ok()

    def test_variants_are_distinct(self) -> None:
        assert mk.Ok(1) != mk.Err(1)
        assert mk.Ok(1) == mk.Ok(1)


class TestPredicates:
    def test_is_ok_and(self) -> None:
        assert mk.Ok(2).is_ok_and(lambda x: x > 1)
        assert not mk.Ok(0).is_ok_and(lambda x: x > 1)

    def test_is_ok_and_skips_predicate_on_err(self) -> None:
        pred = Counter(bool)
        assert not mk.Err("e").is_ok_and(pred)
        assert pred.calls == 0

    def test_is_err_and(self) -> None:
        assert mk.Err("boom").is_err_and(lambda e: e == "boom")
        assert not mk.Err("boom").is_err_and(lambda e: e == "other")

    def test_is_err_and_skips_predicate_on_ok(self) -> None:
        pred = Counter(bool)
        assert not mk.Ok(1).is_err_and(pred)
        assert pred.calls == 0


class TestProjections:
    def test_ok_of_ok(self) -> None:
        assert mk.Ok(3).ok() == mk.Some(3)
        assert mk.Ok(3).err() == mk.NONE

    def test_ok_of_err(self) -> None:
        assert mk.Err("e").ok() == mk.NONE
        assert mk.Err("e").err() == mk.Some("e")


class TestMap:
    def test_identity(self) -> None:
        for res in (mk.Ok(1), mk.Err("e")):
            assert res.map(lambda x: x) == res
            assert res.map_err(lambda x: x) == res

    def test_map_ok(self) -> None:
        assert mk.Ok(2).map(lambda x: x * 10) == mk.Ok(20)

    def test_map_skips_err(self) -> None:
        f = Counter()
        error = ValueError("kept as is")
        res = mk.Err(error)
        mapped = res.map(f)
        assert f.calls == 0
        assert mapped is res
        assert mapped.unwrap_err() is error

    def test_map_err(self) -> None:
        assert mk.Err(13).map_err(str) == mk.Err("13")

    def test_map_err_skips_ok(self) -> None:
        f = Counter()
        res = mk.Ok(5)
        assert res.map_err(f) is res
        assert f.calls == 0


class TestMapOr:
    def test_eager_matches_lazy(self) -> None:
        for res in (mk.Ok("four"), mk.Err("e")):
            assert res.map_or(-1, len) == res.map_or_else(len, lambda _: -1)

    def test_default_is_evaluated_even_on_ok(self) -> None:
        default = Counter(lambda: -1)
        assert mk.Ok("abc").map_or(default(), len) == 3
        assert default.calls == 1

    def test_map_or_else_is_lazy(self) -> None:
        on_err = Counter()
        assert mk.Ok("abc").map_or_else(len, on_err) == 3
        assert on_err.calls == 0


class TestInspect:
    def test_inspect_ok(self) -> None:
        seen: list[int] = []
        res = mk.Ok(4)
        assert res.inspect(seen.append) is res
        assert seen == [4]

    def test_inspect_skips_err(self) -> None:
        seen: list[object] = []
        res = mk.Err("e")
        assert res.inspect(seen.append) is res
        assert seen == []

    def test_inspect_err(self) -> None:
        seen: list[str] = []
        res = mk.Err("e")
        assert res.inspect_err(seen.append) == mk.Err("e")
        assert seen == ["e"]
        assert mk.Ok(1).inspect_err(seen.append) == mk.Ok(1)
        assert seen == ["e"]


class TestToSequence:
    def test_ok_yields_once(self) -> None:
        assert list(mk.Ok(5).to_sequence()) == [5]

    def test_err_is_empty(self) -> None:
        assert list(mk.Err("e").to_sequence()) == []

    def test_restartable(self) -> None:
        res = mk.Ok("x")
        assert list(res) == ["x"]
        assert list(res) == ["x"]
        assert list(res.to_sequence()) == list(res.to_sequence())


class TestUnwrap:
    def test_unwrap_ok(self) -> None:
        assert mk.Ok(5).unwrap() == 5
        assert mk.Ok(5).expect("never shown") == 5

    def test_unwrap_err_raises_with_payload(self) -> None:
        with pytest.raises(mk.ResultUnwrapError) as exc_info:
            mk.Err("boom").unwrap()
        assert exc_info.value.value == "boom"
        assert "boom" in str(exc_info.value)

    def test_expect_carries_message(self) -> None:
        with pytest.raises(mk.ResultUnwrapError, match="config must load") as exc_info:
            mk.Err(404).expect("config must load")
        assert exc_info.value.value == 404
        assert exc_info.value.msg == "config must load"

    def test_unwrap_err_on_ok_raises_with_value(self) -> None:
        with pytest.raises(mk.ResultUnwrapError) as exc_info:
            mk.Ok(5).unwrap_err()
        assert exc_info.value.value == 5

    def test_default_messages(self) -> None:
        with pytest.raises(mk.ResultUnwrapError) as unwrap_info:
            mk.Err("boom").unwrap()
        assert unwrap_info.value.msg == "called `unwrap` on an `Err` value"
        assert str(unwrap_info.value) == "called `unwrap` on an `Err` value: 'boom'"

        with pytest.raises(mk.ResultUnwrapError) as unwrap_err_info:
            mk.Ok(5).unwrap_err()
        assert unwrap_err_info.value.msg == "called `unwrap_err` on an `Ok` value"
        assert str(unwrap_err_info.value) == "called `unwrap_err` on an `Ok` value: 5"

    def test_error_survives_copy_and_pickle(self) -> None:
        with pytest.raises(mk.ResultUnwrapError) as exc_info:
            mk.Err("boom").expect("must load")
        for clone in (
            copy.copy(exc_info.value),
            pickle.loads(pickle.dumps(exc_info.value)),  # noqa: S301
        ):
            assert isinstance(clone, mk.ResultUnwrapError)
            assert clone.value == "boom"
            assert clone.msg == "must load"
            assert str(clone) == str(exc_info.value)

    def test_expect_err(self) -> None:
        assert mk.Err("e").expect_err("never shown") == "e"
        with pytest.raises(mk.ResultUnwrapError, match="wanted a failure"):
            mk.Ok(1).expect_err("wanted a failure")

    def test_is_runtime_error(self) -> None:
        with pytest.raises(RuntimeError):
            mk.Err(None).unwrap()

    def test_fallbacks(self) -> None:
        assert mk.Err("e").unwrap_or(0) == 0
        assert mk.Ok(3).unwrap_or(0) == 3
        assert mk.Err("four").unwrap_or_else(len) == 4


class TestChain:
    def test_and_then_ok(self) -> None:
        def f(x: int) -> mk.Result[int, str]:
            return mk.Ok(x + 1)

        assert mk.Ok(1).and_then(f) == f(1)

    def test_and_then_can_fail(self) -> None:
        assert mk.Ok(1).and_then(lambda _: mk.Err("late")) == mk.Err("late")

    def test_and_then_skips_err(self) -> None:
        f = Counter(mk.Ok)
        res = mk.Err("e")
        assert res.and_then(f) == mk.Err("e")
        assert f.calls == 0

    def test_and(self) -> None:
        assert mk.Ok(1).and_(mk.Ok("next")) == mk.Ok("next")
        assert mk.Ok(1).and_(mk.Err("late")) == mk.Err("late")
        assert mk.Err("early").and_(mk.Ok("next")) == mk.Err("early")

    def test_or_else(self) -> None:
        assert mk.Err("e").or_else(lambda e: mk.Ok(len(e))) == mk.Ok(1)
        assert mk.Ok(2).or_else(lambda e: mk.Ok(len(e))) == mk.Ok(2)


def test_into() -> None:
    assert mk.Ok(2).into(lambda res, n: res.map(lambda x: x * n), 3) == mk.Ok(6)


def test_hashable() -> None:
    assert len({mk.Ok(1), mk.Ok(1), mk.Err(1)}) == 2


def test_frozen() -> None:
    res = mk.Ok(1)
    with pytest.raises(AttributeError):
        res.value = 2  # type: ignore[misc]


class _Rogue(mk.Result[int, str]):
    """Third variant that the closed `Ok`/`Err` pair does not know about."""

    def is_ok(self) -> bool:  # type: ignore[override]
        return False

    def is_err(self) -> bool:  # type: ignore[override]
        return False

    def expect(self, msg: str) -> int:
        raise NotImplementedError(msg)

    def expect_err(self, msg: str) -> str:
        raise NotImplementedError(msg)


def test_match_on_unknown_variant_faults() -> None:
    with pytest.raises(RuntimeError, match="unreachable"):
        _Rogue().match(lambda x: x, lambda e: e)
