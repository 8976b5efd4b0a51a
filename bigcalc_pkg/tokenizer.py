"""Input preprocessing and lazy tokenization of arithmetic expressions.

This module handles:
- Input sanitization (whitespace trimming, length limit)
- Scanning text into number, operator and parenthesis tokens
- Telling a negative literal's '-' apart from binary subtraction
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from . import config
from .types import UnexpectedCharacter, ValidationError

DIGITS = frozenset("0123456789")
OPERATORS = frozenset(config.OPERATOR_PRECEDENCE)


class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"


@dataclass(frozen=True)
class Token:
    """A lexical unit of an expression.

    Attributes:
        type: Token category
        text: Digit run (optionally '-'-prefixed) or the symbol itself
        position: Offset of the first character in the scanned text
    """

    type: TokenType
    text: str
    position: int = 0


def preprocess(input_str: str) -> str:
    """Trim whitespace and enforce the input length limit.

    Args:
        input_str: Raw expression text, possibly spanning several lines

    Returns:
        Trimmed text ready for tokenizing

    Raises:
        ValidationError: If the input is longer than MAX_INPUT_LENGTH
    """
    input_str = input_str.strip() if input_str else ""
    if len(input_str) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (>{config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    return input_str


def _starts_negative_literal(previous: Token | None) -> bool:
    """A '-' opens a literal at the start, after an operator, or after '('."""
    return previous is None or previous.type in (
        TokenType.OPERATOR,
        TokenType.OPEN_PAREN,
    )


def next_token(
    text: str, pos: int = 0, previous: Token | None = None
) -> tuple[Token, int] | None:
    """Scan one token starting at pos.

    Args:
        text: Expression text
        pos: Offset to resume scanning from
        previous: Token emitted before this one, or None at the start

    Returns:
        (token, consumed) where consumed counts skipped whitespace too,
        or None when only whitespace remains

    Raises:
        UnexpectedCharacter: On any character outside the grammar
    """
    start = pos
    while pos < len(text) and text[pos].isspace():
        pos += 1
    if pos >= len(text):
        return None

    char = text[pos]
    if char in DIGITS or (char == "-" and _starts_negative_literal(previous)):
        # Whitespace inside a literal is dropped: "1 2" is 12, "- 5" is -5.
        chars = [char]
        end = pos + 1
        while end < len(text) and (text[end] in DIGITS or text[end].isspace()):
            if text[end] in DIGITS:
                chars.append(text[end])
            end += 1
        # A '-' with no digits after it is still a NUMBER; from_decimal_string
        # rejects it.
        return Token(TokenType.NUMBER, "".join(chars), pos), end - start
    if char in OPERATORS:
        return Token(TokenType.OPERATOR, char, pos), pos + 1 - start
    if char == "(":
        return Token(TokenType.OPEN_PAREN, char, pos), pos + 1 - start
    if char == ")":
        return Token(TokenType.CLOSE_PAREN, char, pos), pos + 1 - start
    raise UnexpectedCharacter(char, pos)


def tokenize(text: str) -> Iterator[Token]:
    """Lazily yield the tokens of text.

    Errors are raised when the offending character is reached, so tokens
    before it have already been yielded.
    """
    pos = 0
    previous: Token | None = None
    while True:
        step = next_token(text, pos, previous)
        if step is None:
            return
        token, consumed = step
        pos += consumed
        previous = token
        yield token
