"""Tests for failure modes and invalid input handling."""

import pytest

from bigcalc_pkg.api import evaluate, parse_and_evaluate
from bigcalc_pkg.types import (
    DivisionByZero,
    MalformedExpression,
    UnbalancedParens,
    UnexpectedCharacter,
)


class TestInputValidationFailures:
    """Test input validation failure modes."""

    def test_empty_input(self):
        with pytest.raises(MalformedExpression):
            parse_and_evaluate("")

    def test_whitespace_only(self):
        with pytest.raises(MalformedExpression):
            parse_and_evaluate(" \n\t ")

    def test_none_input_is_empty(self):
        with pytest.raises(MalformedExpression):
            parse_and_evaluate(None)

    def test_unbalanced_parentheses(self):
        with pytest.raises(UnbalancedParens):
            parse_and_evaluate("(1 + 1")

    def test_brackets_are_not_parentheses(self):
        with pytest.raises(UnexpectedCharacter):
            parse_and_evaluate("[1 + 1]")

    def test_variables_rejected(self):
        with pytest.raises(UnexpectedCharacter):
            parse_and_evaluate("x + 1")

    def test_exponent_rejected(self):
        with pytest.raises(UnexpectedCharacter):
            parse_and_evaluate("2 ^ 3")


class TestArithmeticFailures:
    """Test failures raised during evaluation."""

    def test_division_by_zero_literal(self):
        with pytest.raises(DivisionByZero):
            parse_and_evaluate("1/0")

    def test_division_by_computed_zero(self):
        with pytest.raises(DivisionByZero):
            parse_and_evaluate("5/(1000000000000-1000000000000)")

    def test_division_by_negative_zero_literal(self):
        with pytest.raises(DivisionByZero):
            parse_and_evaluate("5/-0")

    def test_zero_dividend_still_checks_divisor(self):
        with pytest.raises(DivisionByZero):
            parse_and_evaluate("0/0")


class TestNoPartialOutput:
    """A failure never yields a truncated value."""

    @pytest.mark.parametrize(
        "expr",
        ["99999999999999999999*2+", "1+2+3+(4", "123456789123456789/0", "1+2+x"],
    )
    def test_failure_has_no_result(self, expr):
        result = evaluate(expr)
        assert result.ok is False
        assert result.result is None
        assert result.error_code is not None
