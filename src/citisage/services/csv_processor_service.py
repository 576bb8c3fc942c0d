"""
CSV processing service for converting CitiBank exports to Sage Bank Manager rows.

process_document is the entry point: it locates the header row, runs every
transaction row through validation and transformation, and aggregates the
outcome. A bad row is recorded and skipped; only a missing header (or an
unexpected exception) stops the whole document.
"""
import logging
import traceback
from dataclasses import dataclass, field
from typing import List, Optional

from citisage.models.errors import ErrorField, StructureError
from citisage.models.processing_result import ProcessingResult, RowValidationError
from citisage.models.transaction import CitiBankTransaction, SageTransaction
from citisage.utils.constants import ERROR_MESSAGES, SUCCESS_RATE_THRESHOLD
from citisage.utils.field_transformer import transform_amount, transform_date, transform_description
from citisage.utils.field_validator import validate_field_value
from citisage.utils.transaction_parser import (
    HEADER_NOT_FOUND,
    find_header_row,
    parse_citibank_csv,
    split_lines,
)

logger = logging.getLogger(__name__)


@dataclass
class RowOutcome:
    """Result of running one row through the pipeline: a transaction or its errors."""
    transaction: Optional[SageTransaction] = None
    errors: List[RowValidationError] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.transaction is not None and not self.errors


def validate_row(row: CitiBankTransaction, row_number: int) -> List[RowValidationError]:
    """
    Validate every field of a CitiBank row.

    All failures are collected. The empty description rule is checked again
    after the field validators, so an empty Customer Reference is reported twice.
    """
    errors: List[RowValidationError] = []

    for field_name, value in row.field_items():
        for error_message in validate_field_value(field_name, value, row_number):
            errors.append(RowValidationError(
                row=row_number,
                field=field_name,
                value=value,
                message=error_message
            ))

    # Business rule: Sage rejects transactions without a description
    if len(row.customer_reference.strip()) == 0:
        errors.append(RowValidationError(
            row=row_number,
            field='Customer Reference',
            value=row.customer_reference,
            message='Description cannot be empty'
        ))

    return errors


def transform_row(row: CitiBankTransaction) -> SageTransaction:
    """Convert a validated CitiBank row to a Sage transaction."""
    return SageTransaction(
        date=transform_date(row.value_date),
        description=transform_description(row.customer_reference),
        amount=transform_amount(row.amount)
    )


def process_row(row: CitiBankTransaction, row_number: int) -> RowOutcome:
    """
    Validate and, if valid, transform one row.

    A row that fails validation is not transformed at all. A failure inside
    the transformation is reported against the "transformation" field.
    """
    validation_errors = validate_row(row, row_number)
    if validation_errors:
        logger.debug(f"Row {row_number} failed validation with {len(validation_errors)} errors")
        return RowOutcome(errors=validation_errors)

    try:
        return RowOutcome(transaction=transform_row(row))
    except Exception as e:
        logger.error(f"Error transforming row {row_number}: {str(e)}")
        return RowOutcome(errors=[RowValidationError(
            row=row_number,
            field=ErrorField.TRANSFORMATION.value,
            value=row.model_dump_json(by_alias=True),
            message=f"Transformation error: {str(e)}"
        )])


def calculate_success_rate(processed_rows: int, error_rows: int) -> float:
    """Percentage of examined rows that converted; 0 when nothing was examined."""
    examined_rows = processed_rows + error_rows
    if examined_rows == 0:
        return 0.0
    return (processed_rows / examined_rows) * 100


def _document_error(field_name: ErrorField, message: str) -> RowValidationError:
    return RowValidationError(row=0, field=field_name.value, value='', message=message)


def process_document(raw_text: str) -> ProcessingResult:
    """
    Convert a whole CitiBank export.

    Args:
        raw_text: CSV export as text

    Returns:
        ProcessingResult holding the converted rows, every error found and the
        statistics. success requires at least one converted row and a success
        rate of at least 50%.
    """
    result = ProcessingResult()
    statistics = result.statistics

    try:
        lines = split_lines(raw_text or '')
        statistics.total_rows = len(lines)

        if not lines:
            logger.warning("Document is empty")
            result.errors.append(_document_error(ErrorField.STRUCTURE, ERROR_MESSAGES['FILE_EMPTY']))
            return result

        header_index = find_header_row(lines)
        if header_index == HEADER_NOT_FOUND:
            logger.warning(f"No header row found in {len(lines)} lines")
            result.errors.append(_document_error(ErrorField.STRUCTURE, ERROR_MESSAGES['MISSING_HEADERS']))
            return result

        statistics.metadata_rows = header_index

        parsed_rows = parse_citibank_csv(raw_text, lines=lines)
        if not parsed_rows:
            logger.warning("Header row found but no transaction rows follow it")
            result.errors.append(_document_error(ErrorField.DATA, ERROR_MESSAGES['NO_DATA_ROWS']))
            return result

        for parsed_row in parsed_rows:
            outcome = process_row(parsed_row.record, parsed_row.row_number)
            if outcome.succeeded:
                result.data.append(outcome.transaction)
                statistics.processed_rows += 1
            else:
                result.errors.extend(outcome.errors)
                statistics.error_rows += 1

        statistics.success_rate = calculate_success_rate(statistics.processed_rows, statistics.error_rows)
        result.success = statistics.processed_rows > 0 and statistics.success_rate >= SUCCESS_RATE_THRESHOLD

        logger.info(
            f"Processed {statistics.processed_rows} rows with {statistics.error_rows} errors "
            f"({statistics.success_rate:.1f}% success)"
        )

    except StructureError as e:
        logger.warning(f"Structural error: {e.message}")
        result.errors.append(_document_error(ErrorField.STRUCTURE, e.message))
        result.success = False
    except Exception as e:
        logger.error(f"Error processing document: {str(e)}")
        logger.error(traceback.format_exc())
        result.errors.append(_document_error(ErrorField.PROCESSING, f"Processing error: {str(e)}"))
        result.success = False

    return result


process_csv_data = process_document
