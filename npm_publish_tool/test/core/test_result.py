"""Tests for npm_publish_tool.core.result."""

import pytest

from npm_publish_tool.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    def test_value_and_flags(self) -> None:
        result = Ok(42)
        assert result.value == 42
        assert result.is_ok() is True
        assert result.is_err() is False

    def test_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42
        assert Ok(42).unwrap_or(0) == 42

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap_err on Ok"):
            Ok(42).unwrap_err()

    def test_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)
        assert Ok(42).map_err(lambda e: f"error: {e}") == Ok(42)

    def test_flat_map_chains(self) -> None:
        result: Result[int, str] = Ok(0)
        assert result.flat_map(lambda x: Ok(x + 1)) == Ok(1)
        assert result.flat_map(lambda x: Err("zero") if x == 0 else Ok(x)) == Err("zero")

    def test_repr(self) -> None:
        assert repr(Ok("1.2.3")) == "Ok('1.2.3')"

    def test_frozen(self) -> None:
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]


class TestErr:
    def test_error_and_flags(self) -> None:
        result = Err("boom")
        assert result.error == "boom"
        assert result.is_ok() is False
        assert result.is_err() is True

    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("boom").unwrap()

    def test_unwrap_or_and_unwrap_err(self) -> None:
        assert Err("boom").unwrap_or(7) == 7
        assert Err("boom").unwrap_err() == "boom"

    def test_map_err(self) -> None:
        assert Err("boom").map(lambda x: x) == Err("boom")
        assert Err("boom").map_err(str.upper) == Err("BOOM")

    def test_flat_map_short_circuits(self) -> None:
        calls: list[int] = []

        def step(x: int) -> Result[int, str]:
            calls.append(x)
            return Ok(x)

        result: Result[int, str] = Err("stop")
        assert result.flat_map(step) == Err("stop")
        assert calls == []


def test_type_guards() -> None:
    assert is_ok(Ok(1)) and not is_err(Ok(1))
    assert is_err(Err("x")) and not is_ok(Err("x"))


def test_pattern_matching() -> None:
    def describe(result: Result[int, str]) -> str:
        match result:
            case Ok(value):
                return f"ok {value}"
            case Err(error):
                return f"err {error}"

    assert describe(Ok(1)) == "ok 1"
    assert describe(Err("no")) == "err no"
