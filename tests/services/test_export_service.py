"""
Unit tests for Sage Bank Manager CSV output.
"""
import csv
import io
import unittest

from citisage.models.transaction import SageTransaction
from citisage.services.export_service import generate_output_csv, serialize_output
from citisage.utils.transaction_parser import parse_csv_row


class TestSerializeOutput(unittest.TestCase):
    def setUp(self):
        """Set up test fixtures."""
        self.rows = [
            SageTransaction(date="01/06/2025", description="Payment to ACME", amount="1750000.00"),
            SageTransaction(date="02/06/2025", description="Refund, partial", amount="-88433.98"),
        ]

    def test_header_only(self):
        """Test that an empty list still produces the header."""
        self.assertEqual(serialize_output([]), "Date,Description,Amount")

    def test_serialize_rows(self):
        """Test quoting of descriptions and raw dates and amounts."""
        self.assertEqual(
            serialize_output(self.rows),
            'Date,Description,Amount\n'
            '01/06/2025,"Payment to ACME",1750000.00\n'
            '02/06/2025,"Refund, partial",-88433.98'
        )

    def test_embedded_quotes_are_doubled(self):
        """Test standard CSV escaping of quotes."""
        rows = [SageTransaction(date="03/06/2025", description='Invoice "A-17"', amount="10.50")]
        self.assertEqual(serialize_output(rows).split("\n")[1], '03/06/2025,"Invoice ""A-17""",10.50')

    def test_round_trip_with_tokenizer(self):
        """Test that tokenizing the output restores every value."""
        lines = serialize_output(self.rows).split("\n")[1:]
        parsed = [parse_csv_row(line) for line in lines]
        self.assertEqual(parsed, [[row.date, row.description, row.amount] for row in self.rows])

    def test_round_trip_with_csv_reader(self):
        """Test that a standard CSV reader restores descriptions containing quotes."""
        rows = self.rows + [SageTransaction(date="03/06/2025", description='Invoice "A-17"', amount="0.10")]
        reader = csv.DictReader(io.StringIO(serialize_output(rows)))
        self.assertEqual(
            [SageTransaction.model_validate(record) for record in reader],
            rows
        )

    def test_generate_output_csv_alias(self):
        """Test the alternative function name."""
        self.assertIs(generate_output_csv, serialize_output)
