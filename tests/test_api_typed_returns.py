"""Test that API functions return typed results."""

from bigcalc_pkg import config
from bigcalc_pkg.api import (
    _evaluate_cached,
    clear_caches,
    evaluate,
    format_result,
    parse_and_evaluate,
    validate_expression,
)
from bigcalc_pkg.bigint import BigInteger, from_int
from bigcalc_pkg.types import EvalResult


class TestAPITypedReturns:
    """Test that all API functions return typed values."""

    def test_evaluate_returns_eval_result(self):
        """Test that evaluate() returns EvalResult."""
        result = evaluate("2 + 2")
        assert isinstance(result, EvalResult)
        assert result.ok is True
        assert result.result == "4"
        assert result.error is None

    def test_evaluate_error_returns_eval_result(self):
        """Test that evaluate() errors return EvalResult."""
        result = evaluate("10/0")
        assert isinstance(result, EvalResult)
        assert result.ok is False
        assert result.result is None
        assert result.error_code == "DIVISION_BY_ZERO"
        assert "zero" in result.error.lower()

    def test_parse_and_evaluate_returns_big_integer(self):
        value = parse_and_evaluate("-5+3")
        assert isinstance(value, BigInteger)
        assert value == from_int(-2)

    def test_format_result(self):
        assert format_result(from_int(-42)) == "-42"
        assert format_result(from_int(10**9)) == "1000000000"

    def test_validate_expression_returns_tuple(self):
        """Test that validate_expression() returns (bool, str | None)."""
        assert validate_expression("2 + 2") == (True, None)
        is_valid, error = validate_expression("2 + x")
        assert is_valid is False
        assert error == "Unexpected character 'x' (at position 4)"


class TestResultSerialization:
    """Test EvalResult conversion helpers."""

    def test_to_dict_success(self):
        assert evaluate("6*7").to_dict() == {"ok": True, "result": "42"}

    def test_to_dict_failure(self):
        data = evaluate("(1").to_dict()
        assert data["ok"] is False
        assert data["error_code"] == "UNBALANCED_PARENS"
        assert "result" not in data

    def test_repr(self):
        assert repr(evaluate("1+1")) == "EvalResult(ok=True, result='2')"
        assert repr(evaluate("1+")).startswith("EvalResult(ok=False")


class TestResultCache:
    """Test memoization of successful evaluations."""

    def test_repeated_expression_hits_cache(self):
        clear_caches()
        evaluate("123*456")
        evaluate("  123*456\n")
        info = _evaluate_cached.cache_info()
        assert info.hits == 1
        assert info.currsize == 1

    def test_failures_are_not_cached(self):
        clear_caches()
        assert evaluate("1/0").ok is False
        assert evaluate("1/0").ok is False
        assert _evaluate_cached.cache_info().currsize == 0

    def test_clear_caches(self):
        evaluate("2+2")
        clear_caches()
        assert _evaluate_cached.cache_info().currsize == 0

    def test_long_inputs_bypass_cache(self, monkeypatch):
        monkeypatch.setattr(config, "CACHE_MAX_INPUT_LENGTH", 5)
        clear_caches()
        assert evaluate("123456+1").result == "123457"
        assert evaluate("1+1").result == "2"
        assert _evaluate_cached.cache_info().currsize == 1
