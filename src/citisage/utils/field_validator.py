"""
Per-field validation for CitiBank transaction rows.
"""
import decimal
import logging
from decimal import Decimal
from typing import List, Optional

from citisage.utils.constants import AMOUNT_CLEANUP_PATTERN, ERROR_MESSAGES, INPUT_DATE_PATTERN

logger = logging.getLogger(__name__)


def parse_finite_decimal(text: str) -> Optional[Decimal]:
    """Parse text as a finite Decimal, returning None when it is not one."""
    # Decimal accepts any Unicode digit; the Sage Amount column is ASCII only
    if not text or not text.isascii() or '_' in text:
        return None
    try:
        value = Decimal(text)
    except decimal.InvalidOperation:
        return None
    return value if value.is_finite() else None


def is_valid_date(date_str: str) -> bool:
    """
    Check a Value Date against MM/DD/YYYY.

    Only the month (01-12) and day (01-31) ranges are checked; 02/31/2025 passes.
    """
    return bool(date_str) and INPUT_DATE_PATTERN.fullmatch(date_str) is not None


def is_valid_amount(amount_str: str) -> bool:
    """Check that an amount is a finite number once quotes, commas and spaces are removed."""
    if not amount_str:
        return False
    cleaned = AMOUNT_CLEANUP_PATTERN.sub('', amount_str)
    return parse_finite_decimal(cleaned) is not None


def validate_field_value(field: str, value: str, row_number: int) -> List[str]:
    """
    Validate one field of a CitiBank row.

    Args:
        field: Column name, e.g. "Value Date"
        value: Raw field value
        row_number: Row number used in the messages

    Returns:
        List of error messages, empty when the value is acceptable
    """
    errors: List[str] = []

    if field == 'Value Date':
        if not is_valid_date(value):
            errors.append(f"Row {row_number}: {ERROR_MESSAGES['INVALID_DATE_FORMAT']}")
    elif field == 'Amount':
        if not is_valid_amount(value):
            errors.append(f"Row {row_number}: {ERROR_MESSAGES['INVALID_AMOUNT_FORMAT']}")
    elif field in ('Customer Reference', 'Account Number'):
        if not value or not value.strip():
            errors.append(f"Row {row_number}: {field} is required")

    if errors:
        logger.debug(f"Field '{field}' failed validation with value '{value}': {errors}")
    return errors
