"""
Models package for the statement converter.
"""

from .transaction import (
    CitiBankTransaction,
    SageTransaction,
    CITIBANK_COLUMNS,
    SAGE_COLUMNS,
)

from .processing_result import (
    RowValidationError,
    ProcessingStatistics,
    ProcessingResult,
    FileValidationResult,
)

from .errors import (
    ErrorCategory,
    ErrorField,
    ConversionError,
    StructureError,
    TransformationError,
)
