"""
Pre-flight checks for uploaded CitiBank exports.
"""
import logging
import os
from typing import List, Optional

from citisage.models.processing_result import FileValidationResult
from citisage.utils.constants import ERROR_MESSAGES, REQUIRED_HEADERS
from citisage.utils.converter_config import ConverterConfig
from citisage.utils.transaction_parser import parse_csv_row, parse_document

logger = logging.getLogger(__name__)

SMALL_FILE_BYTES = 100
LARGE_FILE_BYTES = 5 * 1024 * 1024
FEW_ROWS_THRESHOLD = 5
MANY_METADATA_ROWS_THRESHOLD = 10


def _extension(file_name: str) -> str:
    _, extension = os.path.splitext(file_name)
    return extension.lower()


def check_file_type(file_name: str, config: Optional[ConverterConfig] = None) -> bool:
    """Check if the file extension is allowed."""
    config = config or ConverterConfig()
    return _extension(file_name) in config.allowed_extensions


def check_file_size(file_size: int, config: Optional[ConverterConfig] = None) -> bool:
    """Check if the file size is within limits."""
    config = config or ConverterConfig()
    return 0 < file_size <= config.max_size_bytes


def validate_file(file_name: str, file_size: int, config: Optional[ConverterConfig] = None) -> FileValidationResult:
    """
    Validate an uploaded file's name and size before reading it.

    Args:
        file_name: Name of the uploaded file
        file_size: Size of the file in bytes
        config: Upload limits, defaults to ConverterConfig()

    Returns:
        FileValidationResult with errors and warnings
    """
    config = config or ConverterConfig()
    errors: List[str] = []
    warnings: List[str] = []

    if not check_file_type(file_name, config):
        errors.append(ERROR_MESSAGES['INVALID_FILE_TYPE'])

    if file_size > config.max_size_bytes:
        errors.append(f"File size must be less than {config.max_size_mb}MB")

    if file_size == 0:
        errors.append(ERROR_MESSAGES['FILE_EMPTY'])

    if file_size < SMALL_FILE_BYTES:
        warnings.append('File appears to be very small. Please ensure it contains transaction data.')

    if file_size > LARGE_FILE_BYTES:
        warnings.append('Large file detected. Processing may take longer than usual.')

    if errors:
        logger.warning(f"File {file_name} failed validation: {errors}")
    return FileValidationResult.from_messages(errors, warnings)


def decode_content(content: bytes) -> str:
    """
    Decode uploaded bytes to text.

    UTF-8 is tried first (a leading BOM is dropped); anything else is read as latin-1.
    """
    try:
        return content.decode('utf-8-sig')
    except UnicodeDecodeError:
        logger.warning("Content is not valid UTF-8, decoding as latin-1")
        return content.decode('latin-1')


def validate_csv_structure(csv_content: str) -> FileValidationResult:
    """
    Validate the layout of a CitiBank export.

    Checks for a header row carrying all required column labels and at least
    one data line after it.
    """
    errors: List[str] = []
    warnings: List[str] = []

    if not csv_content or not csv_content.strip():
        errors.append(ERROR_MESSAGES['FILE_EMPTY'])
        return FileValidationResult.from_messages(errors, warnings)

    try:
        document = parse_document(csv_content)
        if not document.has_header:
            errors.append(ERROR_MESSAGES['MISSING_HEADERS'])
            return FileValidationResult.from_messages(errors, warnings)

        headers = parse_csv_row(document.lines[document.header_index])
        missing_headers = [
            required for required in REQUIRED_HEADERS
            if not any(header.strip() == required for header in headers)
        ]
        if missing_headers:
            errors.append(f"Missing required headers: {', '.join(missing_headers)}")

        if not document.data_lines:
            errors.append(ERROR_MESSAGES['NO_DATA_ROWS'])

        if len(document.data_lines) < FEW_ROWS_THRESHOLD:
            warnings.append('Very few transaction rows found. Please verify this is a complete export.')

        if document.header_index > MANY_METADATA_ROWS_THRESHOLD:
            warnings.append('Many metadata rows detected. File structure may be unusual.')

    except Exception as e:
        logger.error(f"Error validating CSV structure: {str(e)}")
        errors.append(ERROR_MESSAGES['MALFORMED_CSV'])

    return FileValidationResult.from_messages(errors, warnings)
