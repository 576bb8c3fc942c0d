"""
Unit tests for conversion error types.
"""
import unittest

from citisage.models.errors import (
    ConversionError,
    ErrorCategory,
    StructureError,
    TransformationError,
)


class TestConversionErrors(unittest.TestCase):
    def test_categories(self):
        """Test that each error type carries its category."""
        self.assertEqual(StructureError("no header").category, ErrorCategory.STRUCTURE)
        self.assertEqual(TransformationError("bad amount").category, ErrorCategory.TRANSFORMATION)
        self.assertEqual(ConversionError("other").category, ErrorCategory.PROCESSING)
        self.assertEqual(
            {category.value for category in ErrorCategory},
            {StructureError.category.value, TransformationError.category.value, ConversionError.category.value}
        )

    def test_value_errors(self):
        """Test that conversion errors can be handled as ValueError."""
        error = TransformationError("Invalid numeric amount: abc", "abc")
        self.assertIsInstance(error, ValueError)
        self.assertEqual(str(error), "Invalid numeric amount: abc")
        self.assertEqual(error.message, "Invalid numeric amount: abc")
        self.assertEqual(error.value, "abc")
