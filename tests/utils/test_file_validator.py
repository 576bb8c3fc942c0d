"""
Unit tests for upload and structure validation.
"""
import unittest
from unittest.mock import patch

from citisage.utils.converter_config import ConverterConfig
from citisage.utils.file_validator import (
    check_file_size,
    check_file_type,
    decode_content,
    validate_csv_structure,
    validate_file,
)

HEADER = "Account Number,Value Date,Customer Reference,Amount"


def build_export(data_rows, preamble_rows=0):
    preamble = [f"Search Criteria: line {i}" for i in range(preamble_rows)]
    rows = [f"1234,06/{i + 1:02d}/2025,Payment {i},100.00" for i in range(data_rows)]
    return "\n".join(preamble + [HEADER] + rows)


class TestValidateFile(unittest.TestCase):
    def test_valid_file(self):
        """Test a normal CSV upload."""
        result = validate_file("statement.csv", 2048)
        self.assertTrue(result.is_valid)
        self.assertEqual(result.errors, [])
        self.assertEqual(result.warnings, [])

    def test_wrong_extension(self):
        """Test that non-CSV files are rejected."""
        result = validate_file("statement.xlsx", 2048)
        self.assertFalse(result.is_valid)
        self.assertIn("File must be a CSV file with .csv extension", result.errors)

    def test_extension_is_case_insensitive(self):
        """Test upper-case extensions."""
        self.assertTrue(check_file_type("STATEMENT.CSV"))

    def test_empty_file(self):
        """Test that an empty file is rejected with a small-file warning."""
        result = validate_file("statement.csv", 0)
        self.assertFalse(result.is_valid)
        self.assertIn("File is empty", result.errors)
        self.assertEqual(len(result.warnings), 1)

    def test_too_large(self):
        """Test the size limit and the large-file warning."""
        result = validate_file("statement.csv", 11 * 1024 * 1024)
        self.assertFalse(result.is_valid)
        self.assertIn("File size must be less than 10MB", result.errors)
        self.assertIn("Large file detected. Processing may take longer than usual.", result.warnings)

    def test_custom_limits(self):
        """Test limits taken from configuration."""
        config = ConverterConfig(max_size_mb=1, allowed_extensions=('.csv', '.txt'))
        self.assertTrue(check_file_type("export.txt", config))
        self.assertFalse(check_file_size(2 * 1024 * 1024, config))
        self.assertTrue(check_file_size(1024, config))
        self.assertFalse(check_file_size(0, config))


class TestDecodeContent(unittest.TestCase):
    def test_utf8_with_bom(self):
        """Test that a UTF-8 byte order mark is dropped."""
        self.assertEqual(decode_content(b"\xef\xbb\xbfAccount Number"), "Account Number")

    def test_latin1_fallback(self):
        """Test non UTF-8 content."""
        self.assertEqual(decode_content("Caf\xe9".encode("latin-1")), "Caf\xe9")


class TestValidateCsvStructure(unittest.TestCase):
    def test_valid_structure(self):
        """Test a well formed export."""
        result = validate_csv_structure(build_export(6, preamble_rows=3))
        self.assertTrue(result.is_valid)
        self.assertEqual(result.warnings, [])

    def test_empty_content(self):
        """Test blank content."""
        result = validate_csv_structure("  \n ")
        self.assertFalse(result.is_valid)
        self.assertEqual(result.errors, ["File is empty"])

    def test_missing_header(self):
        """Test content without a header row."""
        result = validate_csv_structure("1234,06/01/2025,Payment,100.00")
        self.assertFalse(result.is_valid)
        self.assertEqual(
            result.errors,
            ["CSV file must contain required headers: Account Number, Value Date, Customer Reference, Amount"]
        )

    def test_missing_required_columns(self):
        """Test a header row that lacks some required labels."""
        text = "Account Number,Value Date,Reference,Total\n" + "\n".join(
            f"1234,06/0{i + 1}/2025,Payment,100.00" for i in range(5)
        )
        result = validate_csv_structure(text)
        self.assertFalse(result.is_valid)
        self.assertEqual(result.errors, ["Missing required headers: Customer Reference, Amount"])

    def test_no_data_rows(self):
        """Test a header without data."""
        result = validate_csv_structure(HEADER + "\nSearch Criteria:\n")
        self.assertFalse(result.is_valid)
        self.assertIn("CSV file contains no transaction data", result.errors)

    def test_warnings(self):
        """Test the few-rows and many-metadata-rows warnings."""
        result = validate_csv_structure(build_export(2, preamble_rows=11))
        self.assertTrue(result.is_valid)
        self.assertEqual(result.warnings, [
            "Very few transaction rows found. Please verify this is a complete export.",
            "Many metadata rows detected. File structure may be unusual.",
        ])

    @patch('citisage.utils.file_validator.parse_document', side_effect=RuntimeError("boom"))
    def test_malformed_content(self, mock_parse):
        """Test that a parser failure is reported as a malformed file."""
        result = validate_csv_structure(build_export(6))
        self.assertFalse(result.is_valid)
        self.assertEqual(result.errors, ["CSV file is malformed or corrupted"])
        mock_parse.assert_called_once()
