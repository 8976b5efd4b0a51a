"""Main entry point for running bigcalc_pkg as a module.

This allows running bigcalc with:
    python -m bigcalc_pkg                   # read one expression from stdin
    python -m bigcalc_pkg --health-check
    python -m bigcalc_pkg -e "2+2"

This is equivalent to running:
    python -m bigcalc_pkg.cli
    python bigcalc.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
