"""Centralized configuration for bigcalc.

This module defines:
- Limb representation constants for big integers
- Operator precedence table for the expression evaluator
- Input validation limits
- Cache sizes
- Output and logging defaults

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with BIGCALC_)
"""

import os

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("bigcalc")
except Exception:
    # Package not installed
    VERSION = "1.0.0"

# Limb representation: each limb holds LIMB_DIGITS decimal digits
LIMB_DIGITS = 9
LIMB_BASE = 10**LIMB_DIGITS

# Binary operators and their precedence (all left-associative)
OPERATOR_PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}

# Input validation limits
MAX_INPUT_LENGTH = int(
    os.getenv("BIGCALC_MAX_INPUT_LENGTH", "100000")
)  # characters

# Cache configuration
CACHE_SIZE_EVAL = int(os.getenv("BIGCALC_CACHE_SIZE_EVAL", "256"))
# Longer inputs are evaluated without touching the cache
CACHE_MAX_INPUT_LENGTH = int(os.getenv("BIGCALC_CACHE_MAX_INPUT_LENGTH", "2000"))

# Output
ERROR_SENTINEL = "[error]"

# Logging
LOG_LEVEL = os.getenv("BIGCALC_LOG_LEVEL", "WARNING")
