"""Public API for bigcalc - returns structured objects without side effects."""

from __future__ import annotations

from functools import lru_cache

from . import config
from .bigint import BigInteger, to_decimal_string
from .config import CACHE_SIZE_EVAL
from .evaluator import evaluate_tokens
from .logging_config import get_logger
from .tokenizer import preprocess, tokenize
from .types import EvalError, EvalResult

logger = get_logger("api")


def parse_and_evaluate(expression: str) -> BigInteger:
    """Evaluate an expression to an exact integer.

    Args:
        expression: Infix expression (e.g., "2+3*4", "(-5+1)*7")

    Returns:
        The BigInteger value of the expression

    Raises:
        EvalError: One of its subclasses for malformed input or division by zero
    """
    return evaluate_tokens(tokenize(preprocess(expression)))


def format_result(value: BigInteger) -> str:
    """Render a result as decimal digits with an optional leading '-'."""
    return to_decimal_string(value)


@lru_cache(maxsize=CACHE_SIZE_EVAL)
def _evaluate_cached(preprocessed: str) -> str:
    return format_result(evaluate_tokens(tokenize(preprocessed)))


def evaluate(expression: str) -> EvalResult:
    """Evaluate an expression.

    Args:
        expression: Expression string (e.g., "2+2", "(999999999+1)*3")

    Returns:
        EvalResult with the decimal result, or the error message and code

    Example:
        >>> from bigcalc_pkg.api import evaluate
        >>> evaluate("2+3*4").result
        '14'
        >>> evaluate("10/0").error_code
        'DIVISION_BY_ZERO'
    """
    try:
        text = preprocess(expression)
        if len(text) > config.CACHE_MAX_INPUT_LENGTH:
            result = format_result(evaluate_tokens(tokenize(text)))
        else:
            result = _evaluate_cached(text)
    except EvalError as e:
        logger.info(
            "Evaluation failed: %s",
            e.message,
            extra={"context": {"code": e.code, "position": e.position}},
        )
        return EvalResult(ok=False, error=str(e), error_code=e.code)
    return EvalResult(ok=True, result=result)


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check whether an expression would evaluate successfully.

    Args:
        expression: Expression string to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from bigcalc_pkg.api import validate_expression
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("2 + x")
        (False, "Unexpected character 'x' (at position 4)")
    """
    try:
        parse_and_evaluate(expression)
    except EvalError as e:
        return False, str(e)
    return True, None


def clear_caches() -> None:
    """Clear the evaluation result cache."""
    _evaluate_cached.cache_clear()
