"""Cross-check limb arithmetic against SymPy's exact integers.

Used by the CLI health check and the test-suite to confirm that every
BigInteger operation agrees with an independent arbitrary-precision
implementation.
"""

from __future__ import annotations

import random

import sympy as sp

from . import bigint
from .config import LIMB_DIGITS


def truncating_divmod(a: sp.Integer, b: sp.Integer) -> tuple[sp.Integer, sp.Integer]:
    """Quotient rounded toward zero and the matching remainder.

    SymPy's // floors, so divide magnitudes and reapply the sign.
    """
    quotient = abs(a) // abs(b)
    if a.is_negative != b.is_negative:
        quotient = -quotient
    return quotient, a - quotient * b


def cross_check(a_text: str, b_text: str) -> list[str]:
    """Compare BigInteger results with SymPy for one operand pair.

    Args:
        a_text: Left operand as a decimal literal
        b_text: Right operand as a decimal literal

    Returns:
        Descriptions of every mismatching operation (empty when all agree)
    """
    a = bigint.from_decimal_string(a_text)
    b = bigint.from_decimal_string(b_text)
    ref_a = sp.Integer(int(a_text))
    ref_b = sp.Integer(int(b_text))

    checks = [
        ("add", bigint.add(a, b), ref_a + ref_b),
        ("subtract", bigint.subtract(a, b), ref_a - ref_b),
        ("multiply", bigint.multiply(a, b), ref_a * ref_b),
    ]
    if not bigint.is_zero(b):
        quotient, remainder = bigint.divide_with_remainder(a, b)
        ref_quotient, ref_remainder = truncating_divmod(ref_a, ref_b)
        checks.append(("divide", quotient, ref_quotient))
        checks.append(("remainder", remainder, ref_remainder))

    mismatches = []
    for name, got, expected in checks:
        if bigint.to_decimal_string(got) != str(expected):
            mismatches.append(
                f"{name}({a_text}, {b_text}): got {got}, expected {expected}"
            )
    return mismatches


def random_operand(rng: random.Random, max_limbs: int = 4) -> str:
    """Random signed decimal literal of up to max_limbs limbs.

    Runs of nines are over-represented.
    """
    length = rng.randint(1, max_limbs * LIMB_DIGITS)
    if rng.random() < 0.2:
        digits = "9" * length
    else:
        digits = "".join(rng.choice("0123456789") for _ in range(length))
    sign = "-" if rng.random() < 0.5 else ""
    return sign + digits


def run_cross_check(samples: int = 200, seed: int = 0, max_limbs: int = 4) -> list[str]:
    """Cross-check a batch of random operand pairs."""
    rng = random.Random(seed)
    mismatches: list[str] = []
    for _ in range(samples):
        mismatches.extend(
            cross_check(random_operand(rng, max_limbs), random_operand(rng, max_limbs))
        )
    return mismatches
