from __future__ import annotations

import argparse
import json
import sys

from . import config
from .api import evaluate
from .config import ERROR_SENTINEL, VERSION
from .logging_config import get_logger, setup_logging
from .types import EvalResult

logger = get_logger("cli")

# Expressions the health check must get right, with their expected output
HEALTH_SCENARIOS = [
    ("2+3*4", "14"),
    ("(2+3)*4", "20"),
    ("-5+3", "-2"),
    ("999999999999999999999999999+1", "1000000000000000000000000000"),
]
HEALTH_ERROR_SCENARIOS = [
    ("10/0", "DIVISION_BY_ZERO"),
    ("(2+3", "UNBALANCED_PARENS"),
]


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running bigcalc health check...")
    print("-" * 50)

    # Check SymPy import
    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    # Check evaluation scenarios
    for expr, expected in HEALTH_SCENARIOS:
        result = evaluate(expr)
        if result.ok and result.result == expected:
            print(f"[OK] {expr} = {expected}")
            checks_passed += 1
        else:
            print(f"[FAIL] {expr}: expected {expected}, got {result}")
            checks_failed += 1

    for expr, expected_code in HEALTH_ERROR_SCENARIOS:
        result = evaluate(expr)
        if not result.ok and result.error_code == expected_code:
            print(f"[OK] {expr} rejected with {expected_code}")
            checks_passed += 1
        else:
            print(f"[FAIL] {expr}: expected {expected_code}, got {result}")
            checks_failed += 1

    # Cross-check limb arithmetic against SymPy
    try:
        from .verify import run_cross_check

        mismatches = run_cross_check()
        if mismatches:
            print(f"[FAIL] Arithmetic cross-check: {len(mismatches)} mismatches")
            for line in mismatches[:5]:
                print(f"  {line}")
            checks_failed += 1
        else:
            print("[OK] Arithmetic agrees with SymPy")
            checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] Arithmetic cross-check unavailable: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(res: EvalResult, output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Evaluation result
        output_format: "json" for JSON output, "human" for the bare value or [error]
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print(ERROR_SENTINEL)
        return
    print(res.result)


def repl_loop(output_format: str = "human") -> None:
    """Interactive REPL loop: one expression per line."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    print("bigcalc - exact integer arithmetic. Type 'quit' to exit.")
    while True:
        try:
            raw = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            return
        if not raw:
            continue
        if raw.lower() in ("quit", "exit"):
            print("Goodbye.")
            return
        print_result_pretty(evaluate(raw), output_format)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for bigcalc CLI.

    Without --eval or --interactive the whole of stdin is read as a single
    expression, so multi-line input is joined before evaluation.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="bigcalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit",
        dest="eval_expr",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Start an interactive prompt (one expression per line)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (value or [error])",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        help=f"Maximum input length in characters (default: {config.MAX_INPUT_LENGTH})",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.LOG_LEVEL.upper(),
        help="Set logging level",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write logs to file (stderr then shows warnings and errors only)",
    )
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(
        level=args.log_level,
        log_file=args.log_file,
        console_level="WARNING" if args.log_file else None,
    )

    if args.max_length and args.max_length > 0:
        config.MAX_INPUT_LENGTH = int(args.max_length)
    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.interactive:
        repl_loop(args.format)
        return 0

    if args.eval_expr is not None:
        expr = args.eval_expr
    else:
        expr = sys.stdin.read()
    logger.debug("Evaluating %d characters", len(expr))
    result = evaluate(expr)
    print_result_pretty(result, args.format)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main_entry())
