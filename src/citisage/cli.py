#!/usr/bin/env python3
"""
Command line converter for CitiBank CSV exports.

Usage:
    citisage statement.csv [--output out.csv | --output-dir DIR] [--validate-only] [--json]

Exit status is 0 when the conversion succeeded, 1 when too many rows failed
(or none converted) and 2 when the input file was rejected.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from citisage.models.processing_result import FileValidationResult
from citisage.services.csv_processor_service import process_document
from citisage.services.export_service import serialize_output
from citisage.utils.converter_config import ConverterConfig
from citisage.utils.file_validator import decode_content, validate_csv_structure, validate_file

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_PROCESSING_FAILED = 1
EXIT_INVALID_INPUT = 2


def _report_validation(validation: FileValidationResult) -> None:
    for warning in validation.warnings:
        logger.warning(warning)
    for error in validation.errors:
        print(f"Error: {error}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Convert a CitiBank CSV export to a Sage Bank Manager import file')
    parser.add_argument('input',
                       help='Path to the CitiBank CSV export')
    parser.add_argument('--output', '-o',
                       help='Output file path (default: name built from the filename template)')
    parser.add_argument('--output-dir',
                       help='Directory for the generated file (default: next to the input)')
    parser.add_argument('--validate-only', action='store_true',
                       help='Only check the file structure, do not convert')
    parser.add_argument('--json', action='store_true', dest='as_json',
                       help='Print the processing result as JSON')
    parser.add_argument('--log-level', type=str.upper,
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help='Logging level')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.log_level:
        logging.getLogger().setLevel(args.log_level)

    config = ConverterConfig.from_environment()
    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: {input_path} does not exist", file=sys.stderr)
        return EXIT_INVALID_INPUT

    output_dir = Path(args.output_dir) if args.output_dir else input_path.parent
    if args.output:
        output_dir = Path(args.output).parent
    if not output_dir.is_dir():
        print(f"Error: output directory {output_dir} does not exist", file=sys.stderr)
        return EXIT_INVALID_INPUT

    file_check = validate_file(input_path.name, input_path.stat().st_size, config)
    _report_validation(file_check)
    if not file_check.is_valid:
        return EXIT_INVALID_INPUT

    text_content = decode_content(input_path.read_bytes())

    if args.validate_only:
        structure = validate_csv_structure(text_content)
        _report_validation(structure)
        if args.as_json:
            print(json.dumps(structure.model_dump(by_alias=True), indent=2))
        elif structure.is_valid:
            print(f"{input_path.name}: structure OK")
        return EXIT_SUCCESS if structure.is_valid else EXIT_INVALID_INPUT

    result = process_document(text_content)

    output_path = None
    if result.data:
        output_path = Path(args.output) if args.output else output_dir / config.generate_output_filename(input_path.name)
        output_path.write_text(serialize_output(result.data), encoding=config.output_encoding)
        logger.info(f"Wrote {len(result.data)} transactions to {output_path}")

    if args.as_json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        statistics = result.statistics
        print(f"{statistics.processed_rows} processed, {statistics.error_rows} errors "
              f"({statistics.success_rate:.1f}% success)")
        for error in result.errors:
            print(f"  row {error.row} [{error.field}]: {error.message}", file=sys.stderr)
        if output_path is not None:
            print(f"Output: {output_path}")

    return EXIT_SUCCESS if result.success else EXIT_PROCESSING_FAILED


if __name__ == '__main__':
    sys.exit(main())
