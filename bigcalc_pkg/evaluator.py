"""Shunting-yard evaluation of token streams into BigInteger values."""

from __future__ import annotations

from typing import Callable, Iterable

from . import bigint
from .bigint import BigInteger
from .config import OPERATOR_PRECEDENCE
from .logging_config import get_logger
from .tokenizer import Token, TokenType
from .types import MalformedExpression, UnbalancedParens

logger = get_logger("evaluator")

OPERATIONS: dict[str, Callable[[BigInteger, BigInteger], BigInteger]] = {
    "+": bigint.add,
    "-": bigint.subtract,
    "*": bigint.multiply,
    "/": bigint.divide,
}


class ShuntingYardEvaluator:
    """Two-stack operator-precedence evaluator.

    Tokens are fed one at a time. Operators wait on the operator stack until
    an operator of lower or equal precedence, a closing parenthesis or the end
    of input forces them to be folded into the operand stack. '(' markers on
    the operator stack stop folding and are never applied.
    """

    def __init__(self) -> None:
        self.operators: list[Token] = []
        self.operands: list[BigInteger] = []

    def feed(self, token: Token) -> None:
        if token.type is TokenType.NUMBER:
            self.operands.append(bigint.from_decimal_string(token.text))
        elif token.type is TokenType.OPERATOR:
            precedence = OPERATOR_PRECEDENCE[token.text]
            while (
                self.operators
                and self.operators[-1].type is not TokenType.OPEN_PAREN
                and OPERATOR_PRECEDENCE[self.operators[-1].text] >= precedence
            ):
                self._fold()
            self.operators.append(token)
        elif token.type is TokenType.OPEN_PAREN:
            self.operators.append(token)
        elif token.type is TokenType.CLOSE_PAREN:
            while (
                self.operators
                and self.operators[-1].type is not TokenType.OPEN_PAREN
            ):
                self._fold()
            if not self.operators:
                raise UnbalancedParens(
                    "Closing parenthesis without a match", position=token.position
                )
            self.operators.pop()
        else:
            raise MalformedExpression(
                f"Unknown token {token.text!r}", position=token.position
            )

    def _fold(self) -> None:
        """Apply the top operator to the top two operands."""
        operator = self.operators[-1]
        if operator.type is not TokenType.OPERATOR:
            raise MalformedExpression(
                "Cannot apply a parenthesis", position=operator.position
            )
        if len(self.operands) < 2:
            raise MalformedExpression(
                f"Operator {operator.text!r} is missing an operand",
                position=operator.position,
            )
        self.operators.pop()
        right = self.operands.pop()
        left = self.operands.pop()
        result = OPERATIONS[operator.text](left, right)
        logger.debug(
            "fold %s",
            operator.text,
            extra={
                "context": {
                    "left_limbs": len(left.limbs),
                    "right_limbs": len(right.limbs),
                    "result_limbs": len(result.limbs),
                }
            },
        )
        self.operands.append(result)

    def finish(self) -> BigInteger:
        """Fold the remaining operators and return the single result."""
        while self.operators:
            if self.operators[-1].type is TokenType.OPEN_PAREN:
                raise UnbalancedParens(
                    "Unclosed parenthesis", position=self.operators[-1].position
                )
            self._fold()
        if len(self.operands) != 1:
            raise MalformedExpression(
                f"Expected one value, found {len(self.operands)}"
            )
        return self.operands[0]


def evaluate_tokens(tokens: Iterable[Token]) -> BigInteger:
    """Run a token stream through a fresh evaluator."""
    machine = ShuntingYardEvaluator()
    for token in tokens:
        machine.feed(token)
    return machine.finish()
