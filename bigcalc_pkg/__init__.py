"""bigcalc package: exact integer expression evaluation on base 10**9 limbs."""

__all__ = [
    "config",
    "bigint",
    "tokenizer",
    "evaluator",
    "cli",
    "types",
    "api",
    "logging_config",
    "verify",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "parse_and_evaluate",
    "format_result",
    "validate_expression",
]
