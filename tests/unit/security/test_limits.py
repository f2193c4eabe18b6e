"""
Test cases for limit validation.
"""

import unittest

from loosejson.security.exceptions import InputTooLarge, SecurityError
from loosejson.security.limits import LimitValidator
from loosejson.utils.config import ConversionLimits


class TestLimitValidator(unittest.TestCase):
    """Test LimitValidator against custom limits."""

    def setUp(self):
        self.limits = ConversionLimits(
            max_input_size=100,
            max_output_size=50,
            max_tokens=20,
            max_stack_size=5,
        )
        self.validator = LimitValidator(self.limits)

    def test_input_size_validation_pass(self):
        self.validator.validate_input_size("x" * 100)

    def test_input_size_validation_fail(self):
        with self.assertRaises(InputTooLarge) as cm:
            self.validator.validate_input_size("x" * 101)
        self.assertIsInstance(cm.exception, SecurityError)
        self.assertIn("Input size 101 exceeds limit 100", str(cm.exception))

    def test_token_capacity(self):
        self.assertEqual(self.validator.max_tokens, 20)


if __name__ == "__main__":
    unittest.main()
