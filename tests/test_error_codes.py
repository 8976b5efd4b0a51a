"""Test error codes returned by the facade."""

import unittest

from bigcalc_pkg.api import evaluate
from bigcalc_pkg.tokenizer import preprocess
from bigcalc_pkg.types import ValidationError


class TestErrorCodes(unittest.TestCase):
    """Test that every failure kind maps to a distinct error code."""

    def test_malformed_number_error_code(self):
        result = evaluate("-")
        self.assertFalse(result.ok)
        self.assertEqual(result.error_code, "MALFORMED_NUMBER")

    def test_unexpected_character_error_code(self):
        result = evaluate("2 + two")
        self.assertFalse(result.ok)
        self.assertEqual(result.error_code, "UNEXPECTED_CHARACTER")
        self.assertIn("'t'", result.error)

    def test_unbalanced_parens_error_code(self):
        for expr in ("(2+3", "2+3)"):
            result = evaluate(expr)
            self.assertFalse(result.ok)
            self.assertEqual(result.error_code, "UNBALANCED_PARENS", expr)

    def test_malformed_expression_error_code(self):
        for expr in ("", "2 +", "* 2", "(1) 2"):
            result = evaluate(expr)
            self.assertFalse(result.ok)
            self.assertEqual(result.error_code, "MALFORMED_EXPRESSION", expr)

    def test_division_by_zero_error_code(self):
        result = evaluate("10/0")
        self.assertFalse(result.ok)
        self.assertEqual(result.error_code, "DIVISION_BY_ZERO")

    def test_too_long_error_code(self):
        """Test that overly long input returns TOO_LONG error code."""
        from bigcalc_pkg.config import MAX_INPUT_LENGTH

        long_input = "1" * (MAX_INPUT_LENGTH + 1)
        try:
            preprocess(long_input)
            self.fail("Should have raised ValidationError")
        except ValidationError as e:
            self.assertEqual(e.code, "TOO_LONG", f"Expected TOO_LONG, got {e.code}")
            self.assertIn("too long", str(e).lower())
        result = evaluate(long_input)
        self.assertEqual(result.error_code, "TOO_LONG")


if __name__ == "__main__":
    unittest.main()
