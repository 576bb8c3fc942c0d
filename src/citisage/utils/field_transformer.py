"""
Field conversions from the CitiBank export format to the Sage Bank Manager format.

Amounts are handled as strings from end to end. Passing them through float
would change trailing zeros and can introduce rounding artifacts.
"""
import logging
import re
from decimal import Decimal, ROUND_HALF_UP

from citisage.models.errors import TransformationError
from citisage.utils.constants import INPUT_DATE_PATTERN
from citisage.utils.field_validator import parse_finite_decimal

logger = logging.getLogger(__name__)

_QUOTES_AND_WHITESPACE = re.compile(r'["\'\s]')


def transform_date(input_date: str) -> str:
    """
    Convert MM/DD/YYYY to DD/MM/YYYY.

    Raises:
        TransformationError: If input_date is not MM/DD/YYYY
    """
    if not input_date or not INPUT_DATE_PATTERN.fullmatch(input_date):
        raise TransformationError(f"Invalid date format: {input_date}. Expected MM/DD/YYYY", input_date)

    month, day, year = input_date.split('/')
    return f"{day.zfill(2)}/{month.zfill(2)}/{year}"


def transform_amount(input_amount: str) -> str:
    """
    Clean a CitiBank amount into a plain decimal string.

    Examples:
        " -1,911,566.02" -> "-1911566.02"
        "1,750,000.00"   -> "1750000.00"

    The cleaned text is returned as-is so the sign and every decimal digit
    survive unchanged.

    Raises:
        TransformationError: If the cleaned text is not a finite number
    """
    if not input_amount or not isinstance(input_amount, str):
        raise TransformationError("Invalid amount input", str(input_amount))

    cleaned = _QUOTES_AND_WHITESPACE.sub('', input_amount)
    without_commas = cleaned.replace(',', '')

    if parse_finite_decimal(without_commas) is None:
        raise TransformationError(f"Invalid numeric amount: {input_amount}", input_amount)

    return without_commas


def transform_description(customer_reference: str) -> str:
    """Customer Reference becomes the Description, trimmed only."""
    return customer_reference.strip()


def validate_transformed_amount(amount: str) -> bool:
    """Check that a converted amount string is a finite number."""
    return parse_finite_decimal(amount) is not None


def format_amount_for_display(amount: str) -> str:
    """Format an amount string with thousands separators and two decimals, e.g. 1,750,000.00."""
    value = parse_finite_decimal(amount)
    if value is None:
        return amount
    return f"{value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):,.2f}"
