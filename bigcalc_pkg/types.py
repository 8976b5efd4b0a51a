"""Type definitions, result dataclass and error hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression."""

    ok: bool
    result: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        return f"EvalResult(ok=True, result={self.result!r})"


class EvalError(Exception):
    """Base class for every failure raised while parsing or evaluating."""

    default_code = "EVAL_ERROR"

    def __init__(
        self, message: str, code: str | None = None, position: int | None = None
    ):
        self.message = message
        self.code = code or self.default_code
        self.position = position
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.position is not None:
            return f"{self.message} (at position {self.position})"
        return self.message


class ValidationError(EvalError):
    """Raised when input validation fails before tokenizing."""

    default_code = "VALIDATION_ERROR"


class MalformedNumber(EvalError):
    """Raised when a numeric literal has no digits or contains non-digits."""

    default_code = "MALFORMED_NUMBER"


class UnexpectedCharacter(EvalError):
    """Raised when the tokenizer meets a character outside the grammar."""

    default_code = "UNEXPECTED_CHARACTER"

    def __init__(self, char: str, position: int | None = None):
        self.char = char
        super().__init__(f"Unexpected character {char!r}", position=position)


class UnbalancedParens(EvalError):
    """Raised when parentheses do not pair up."""

    default_code = "UNBALANCED_PARENS"


class MalformedExpression(EvalError):
    """Raised when operators and operands do not form a valid expression."""

    default_code = "MALFORMED_EXPRESSION"


class DivisionByZero(EvalError):
    """Raised when the divisor of a division is zero."""

    default_code = "DIVISION_BY_ZERO"
