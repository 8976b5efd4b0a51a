"""Arbitrary-precision signed integers stored as base 10**9 limbs.

This module handles:
- Construction from decimal strings and native integers
- Sign-aware addition, subtraction, multiplication and truncating division
- Sign-aware and magnitude-only comparison
- Decimal rendering

A BigInteger holds a sign flag and a tuple of limbs, least significant
first, each limb in [0, 10**9). Values are immutable: every operation
builds its result in a fresh list and freezes it into a new BigInteger.
Zero is always exactly one 0 limb with a non-negative sign.
"""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering
from typing import Sequence

from .config import LIMB_BASE, LIMB_DIGITS
from .types import DivisionByZero, MalformedNumber


class Ordering(IntEnum):
    """Three-way comparison outcome."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# ---------------------------------------------------------------------------
# Limb-level primitives. These work on magnitudes only and never touch their
# inputs; they return new lists.
# ---------------------------------------------------------------------------


def _trim(limbs: list[int]) -> list[int]:
    """Drop most-significant zero limbs, keeping at least one limb."""
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    return limbs


def _compare_limbs(a: Sequence[int], b: Sequence[int]) -> Ordering:
    if len(a) != len(b):
        return Ordering.LESS if len(a) < len(b) else Ordering.GREATER
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return Ordering.LESS if x < y else Ordering.GREATER
    return Ordering.EQUAL


def _add_limbs(a: Sequence[int], b: Sequence[int]) -> list[int]:
    result = []
    carry = 0
    for i in range(max(len(a), len(b))):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        carry, limb = divmod(total, LIMB_BASE)
        result.append(limb)
    if carry:
        result.append(carry)
    return result


def _sub_limbs(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return |a| - |b|. Requires |a| >= |b|."""
    result = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]
        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    return _trim(result)


def _mul_limbs(a: Sequence[int], b: Sequence[int]) -> list[int]:
    result = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if x == 0:
            continue
        carry = 0
        for j, y in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + x * y + carry, LIMB_BASE)
        k = i + len(b)
        while carry:
            carry, result[k] = divmod(result[k] + carry, LIMB_BASE)
            k += 1
    return _trim(result)


def _mul_small(a: Sequence[int], x: int) -> list[int]:
    """Multiply a magnitude by a single limb value."""
    if x == 0:
        return [0]
    return _mul_limbs(a, (x,))


def _divmod_limbs(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], list[int]]:
    """Schoolbook long division of magnitudes. Requires b != 0.

    Walks the dividend from its most significant limb. Each step shifts the
    running remainder up by one limb, brings in the next dividend limb and
    binary-searches the largest quotient digit x in [0, LIMB_BASE) with
    b * x <= remainder.
    """
    if _compare_limbs(a, b) is Ordering.LESS:
        return [0], list(a)

    quotient = [0] * len(a)
    current = [0]
    for i in range(len(a) - 1, -1, -1):
        current = _trim([a[i]] + current)
        lo, hi = 0, LIMB_BASE - 1
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if _compare_limbs(_mul_small(b, mid), current) is Ordering.GREATER:
                hi = mid - 1
            else:
                lo = mid
        quotient[i] = lo
        if lo:
            current = _sub_limbs(current, _mul_small(b, lo))
    return _trim(quotient), current


# ---------------------------------------------------------------------------
# Value type
# ---------------------------------------------------------------------------


@total_ordering
class BigInteger:
    """Immutable arbitrary-precision signed integer.

    Use from_decimal_string() or from_int() to build values; the
    constructor takes raw limbs (least significant first) and normalizes
    them.
    """

    __slots__ = ("_negative", "_limbs")

    def __init__(self, limbs: Sequence[int] = (0,), negative: bool = False):
        normalized = _trim(list(limbs) or [0])
        for limb in normalized:
            if not 0 <= limb < LIMB_BASE:
                raise ValueError(f"Limb {limb} out of range [0, {LIMB_BASE})")
        self._limbs = tuple(normalized)
        self._negative = bool(negative) and self._limbs != (0,)

    @property
    def negative(self) -> bool:
        return self._negative

    @property
    def limbs(self) -> tuple[int, ...]:
        return self._limbs

    @classmethod
    def from_str(cls, text: str) -> BigInteger:
        return from_decimal_string(text)

    @classmethod
    def from_int(cls, value: int) -> BigInteger:
        return from_int(value)

    def __add__(self, other: object) -> BigInteger:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: object) -> BigInteger:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other: object) -> BigInteger:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return multiply(self, other)

    def __neg__(self) -> BigInteger:
        return negate(self)

    def __abs__(self) -> BigInteger:
        return abs_value(self)

    def __bool__(self) -> bool:
        return not is_zero(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return equals(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return less_than(self, other)

    def __hash__(self) -> int:
        return hash((self._negative, self._limbs))

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = value * LIMB_BASE + limb
        return -value if self._negative else value

    def __str__(self) -> str:
        return to_decimal_string(self)

    def __repr__(self) -> str:
        return f"BigInteger({to_decimal_string(self)!r})"


ZERO = BigInteger()


# ---------------------------------------------------------------------------
# Construction and rendering
# ---------------------------------------------------------------------------


def from_decimal_string(text: str) -> BigInteger:
    """Parse an optional '-' followed by one or more decimal digits.

    Args:
        text: Literal such as "42", "-7" or "000123"

    Returns:
        The parsed value; "-0" yields non-negative zero

    Raises:
        MalformedNumber: If no digits are present or a non-digit appears
    """
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise MalformedNumber(f"Malformed number {text!r}")
    limbs = []
    for end in range(len(digits), 0, -LIMB_DIGITS):
        limbs.append(int(digits[max(0, end - LIMB_DIGITS):end]))
    return BigInteger(limbs, negative)


def from_int(value: int) -> BigInteger:
    """Build a BigInteger from a native integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    magnitude = abs(value)
    limbs = []
    while True:
        magnitude, limb = divmod(magnitude, LIMB_BASE)
        limbs.append(limb)
        if not magnitude:
            break
    return BigInteger(limbs, value < 0)


def to_decimal_string(value: BigInteger) -> str:
    """Render as decimal digits with a leading '-' for negative values."""
    limbs = value.limbs
    head = str(limbs[-1])
    tail = "".join(f"{limb:0{LIMB_DIGITS}d}" for limb in reversed(limbs[:-1]))
    return ("-" if value.negative else "") + head + tail


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


def is_zero(value: BigInteger) -> bool:
    return value.limbs == (0,)


def negate(value: BigInteger) -> BigInteger:
    return BigInteger(value.limbs, not value.negative)


def abs_value(value: BigInteger) -> BigInteger:
    return BigInteger(value.limbs, False)


def _subtract_magnitudes(a: Sequence[int], b: Sequence[int]) -> BigInteger:
    """Signed result of |a| - |b|."""
    if _compare_limbs(a, b) is Ordering.LESS:
        return negate(_subtract_magnitudes(b, a))
    return BigInteger(_sub_limbs(a, b), False)


def add(a: BigInteger, b: BigInteger) -> BigInteger:
    """Return a + b."""
    if not a.negative and not b.negative:
        return BigInteger(_add_limbs(a.limbs, b.limbs), False)
    if not a.negative and b.negative:
        return _subtract_magnitudes(a.limbs, b.limbs)
    if a.negative and not b.negative:
        return negate(_subtract_magnitudes(a.limbs, b.limbs))
    return BigInteger(_add_limbs(a.limbs, b.limbs), True)


def subtract(a: BigInteger, b: BigInteger) -> BigInteger:
    """Return a - b."""
    return add(a, negate(b))


def multiply(a: BigInteger, b: BigInteger) -> BigInteger:
    """Return a * b."""
    return BigInteger(_mul_limbs(a.limbs, b.limbs), a.negative != b.negative)


def divide_with_remainder(
    a: BigInteger, b: BigInteger
) -> tuple[BigInteger, BigInteger]:
    """Truncating division.

    The quotient is rounded toward zero and the remainder takes the sign of
    the dividend, so a == q * b + r and |r| < |b|.

    Raises:
        DivisionByZero: If b is zero
    """
    if is_zero(b):
        raise DivisionByZero("Division by zero")
    quotient, remainder = _divmod_limbs(a.limbs, b.limbs)
    return (
        BigInteger(quotient, a.negative != b.negative),
        BigInteger(remainder, a.negative),
    )


def divide(a: BigInteger, b: BigInteger) -> BigInteger:
    """Return a / b truncated toward zero; the remainder is discarded."""
    return divide_with_remainder(a, b)[0]


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


def compare_magnitude(a: BigInteger, b: BigInteger) -> Ordering:
    """Compare |a| with |b|."""
    return _compare_limbs(a.limbs, b.limbs)


def compare(a: BigInteger, b: BigInteger) -> Ordering:
    """Sign-aware three-way comparison."""
    if a.negative != b.negative:
        return Ordering.LESS if a.negative else Ordering.GREATER
    ordering = _compare_limbs(a.limbs, b.limbs)
    return Ordering(-ordering) if a.negative else ordering


def equals(a: BigInteger, b: BigInteger) -> bool:
    return a.negative == b.negative and a.limbs == b.limbs


def less_than(a: BigInteger, b: BigInteger) -> bool:
    return compare(a, b) is Ordering.LESS
