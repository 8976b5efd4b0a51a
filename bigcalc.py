#!/usr/bin/env python3
"""
bigcalc - Exact Integer Expression Calculator

Main entry point for the bigcalc application. This file serves as a thin
wrapper that delegates all functionality to the bigcalc_pkg package.

Usage:
    python bigcalc.py < expression.txt      # Evaluate stdin, print value or [error]
    python bigcalc.py -e "2+2"              # Evaluate expression (--eval=-5+3 for a leading minus)
    python bigcalc.py -i                    # Interactive prompt
    python bigcalc.py --help                # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for bigcalc.

    Delegates all functionality to the bigcalc_pkg.cli module,
    which handles argument parsing, expression evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from bigcalc_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import bigcalc_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
