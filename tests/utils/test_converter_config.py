"""
Unit tests for converter configuration.
"""
import os
import unittest
from datetime import datetime
from unittest.mock import patch

from citisage.utils.converter_config import ConverterConfig


class TestConverterConfig(unittest.TestCase):
    def test_defaults(self):
        """Test default settings."""
        config = ConverterConfig()
        self.assertEqual(config.max_size_mb, 10)
        self.assertEqual(config.max_size_bytes, 10 * 1024 * 1024)
        self.assertEqual(config.allowed_extensions, ('.csv',))
        self.assertEqual(config.filename_template, '{originalName}_sage_{date}')

    @patch.dict(os.environ, {
        'CONVERTER_MAX_SIZE_MB': '2',
        'CONVERTER_ALLOWED_EXTENSIONS': '.CSV, .txt',
        'CONVERTER_FILENAME_TEMPLATE': 'sage_{datetime}',
        'CONVERTER_OUTPUT_ENCODING': 'utf-8-sig',
    })
    def test_from_environment(self):
        """Test loading settings from environment variables."""
        config = ConverterConfig.from_environment()
        self.assertEqual(config.max_size_mb, 2)
        self.assertEqual(config.allowed_extensions, ('.csv', '.txt'))
        self.assertEqual(config.filename_template, 'sage_{datetime}')
        self.assertEqual(config.output_encoding, 'utf-8-sig')

    @patch.dict(os.environ, {}, clear=True)
    def test_from_environment_defaults(self):
        """Test fallback to defaults when nothing is set."""
        self.assertEqual(ConverterConfig.from_environment(), ConverterConfig())

    def test_generate_output_filename(self):
        """Test placeholder substitution."""
        now = datetime(2025, 6, 30, 14, 5, 9)
        config = ConverterConfig()
        self.assertEqual(
            config.generate_output_filename("june.statement.csv", now),
            "june.statement_sage_2025-06-30.csv"
        )

        config = ConverterConfig(filename_template='{originalName}-{time}-{datetime}')
        self.assertEqual(
            config.generate_output_filename("/tmp/exports/june.csv", now),
            "june-14-05-09-2025-06-30_14-05-09.csv"
        )
