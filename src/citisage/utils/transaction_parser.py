"""
Parsing utilities for CitiBank statement exports.

A CitiBank export starts with a free-form preamble (search criteria, date
range, account list), followed by a header row and the transaction rows.
"""
import logging
import logging.config
import os
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from citisage.models.errors import StructureError
from citisage.models.transaction import CitiBankTransaction
from citisage.utils.constants import ERROR_MESSAGES, HEADER_MARKERS, METADATA_INDICATORS

# Configure logging
log_conf = os.environ.get('LOGGING_CONFIG')
if log_conf:
    logging.config.fileConfig(log_conf)
else:
    logging.basicConfig(
        level=os.environ.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

# Get logger for this module
logger = logging.getLogger(__name__)

__all__ = [
    'HEADER_NOT_FOUND',
    'ParsedDocument',
    'ParsedRow',
    'parse_csv_row',
    'split_lines',
    'find_header_row',
    'is_metadata_row',
    'parse_document',
    'parse_citibank_csv',
]

HEADER_NOT_FOUND = -1


class ParsedDocument(BaseModel):
    """Structure of a CitiBank export: where the header is and which lines carry data."""
    header_index: int = Field(alias="headerIndex")
    lines: List[str] = Field(default_factory=list)
    data_lines: List[str] = Field(default_factory=list, alias="dataLines")

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True
    )

    @property
    def has_header(self) -> bool:
        return self.header_index != HEADER_NOT_FOUND


class ParsedRow(BaseModel):
    """A complete transaction row together with its 1-based line number."""
    row_number: int
    record: CitiBankTransaction

    model_config = ConfigDict(
        frozen=True
    )


def parse_csv_row(row: str) -> List[str]:
    """
    Split one CSV line into trimmed fields.

    Commas inside a double-quoted span do not split. Quote characters only
    toggle the quoted state and are dropped from the output; an unterminated
    quote keeps the rest of the line in the current field.
    """
    result: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in row:
        if char == '"':
            in_quotes = not in_quotes
        elif char == ',' and not in_quotes:
            result.append(''.join(current).strip())
            current = []
        else:
            current.append(char)

    result.append(''.join(current).strip())
    return result


def split_lines(text_content: str) -> List[str]:
    """Split text on newlines and drop blank lines."""
    return [line for line in text_content.split('\n') if line.strip()]


def find_header_row(lines: List[str]) -> int:
    """Return the index of the first line naming both Account Number and Value Date."""
    for i, line in enumerate(lines):
        if all(marker in line for marker in HEADER_MARKERS):
            return i
    return HEADER_NOT_FOUND


def is_metadata_row(line: str) -> bool:
    """Check if a line belongs to the preamble/footer rather than the transaction data."""
    trimmed_line = line.strip()
    if trimmed_line == '' or trimmed_line == '""':
        return True
    return any(trimmed_line.startswith(indicator) for indicator in METADATA_INDICATORS)


def parse_document(raw_text: str) -> ParsedDocument:
    """
    Locate the header row and the data lines that follow it.

    Args:
        raw_text: Whole CSV export as text

    Returns:
        ParsedDocument; header_index is HEADER_NOT_FOUND when no header row exists
    """
    lines = split_lines(raw_text)
    header_index = find_header_row(lines)
    if header_index == HEADER_NOT_FOUND:
        logger.warning(f"No header row found in {len(lines)} lines")
        return ParsedDocument(header_index=HEADER_NOT_FOUND, lines=lines, data_lines=[])

    data_lines = [line for line in lines[header_index + 1:] if not is_metadata_row(line)]
    logger.debug(f"Header row at index {header_index}, {len(data_lines)} data lines")
    return ParsedDocument(header_index=header_index, lines=lines, data_lines=data_lines)


def parse_citibank_csv(raw_text: str, lines: Optional[List[str]] = None) -> List[ParsedRow]:
    """
    Extract the complete transaction rows from a CitiBank export.

    Rows with fewer than four fields, or without a Value Date or Amount, are
    not transactions and are dropped without being reported.

    Args:
        raw_text: Whole CSV export as text
        lines: Already split non-blank lines of raw_text, if the caller has them

    Returns:
        List of ParsedRow in file order

    Raises:
        StructureError: If the header row cannot be found
    """
    if lines is None:
        lines = split_lines(raw_text)

    header_index = find_header_row(lines)
    if header_index == HEADER_NOT_FOUND:
        raise StructureError(ERROR_MESSAGES['MISSING_HEADERS'])

    rows: List[ParsedRow] = []
    for index in range(header_index + 1, len(lines)):
        line = lines[index]
        if is_metadata_row(line):
            continue

        fields = parse_csv_row(line)
        if len(fields) < 4:
            logger.debug(f"Skipping incomplete line {index + 1}: {line}")
            continue

        record = CitiBankTransaction.from_fields(fields)
        if not record.value_date or not record.amount:
            logger.debug(f"Skipping line {index + 1} without date or amount")
            continue

        rows.append(ParsedRow(row_number=index + 1, record=record))

    logger.info(f"Found {len(rows)} transaction rows after header at index {header_index}")
    return rows
