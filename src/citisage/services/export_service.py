"""
Export service for writing Sage Bank Manager import files.
"""
import logging
from typing import Iterable, List

from citisage.models.transaction import SAGE_COLUMNS, SageTransaction

logger = logging.getLogger(__name__)


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def serialize_output(rows: Iterable[SageTransaction]) -> str:
    """
    Render Sage transactions as CSV text.

    The header is always Date,Description,Amount. Description is quoted with
    embedded quotes doubled; Date and Amount are written as-is. Lines are
    joined with a newline and there is no trailing newline.
    """
    csv_rows: List[str] = [','.join(SAGE_COLUMNS)]
    for row in rows:
        csv_rows.append(','.join([row.date, _quote(row.description), row.amount]))

    logger.debug(f"Serialized {len(csv_rows) - 1} rows")
    return '\n'.join(csv_rows)


generate_output_csv = serialize_output
