"""
Error taxonomy for the statement conversion pipeline.
"""
import enum
from typing import Optional


class ErrorCategory(str, enum.Enum):
    """Error categories for classification"""
    STRUCTURE = "structure"
    TRANSFORMATION = "transformation"
    PROCESSING = "processing"


class ErrorField(str, enum.Enum):
    """Pseudo-field names used when an error is not tied to a CSV column"""
    STRUCTURE = "structure"
    DATA = "data"
    TRANSFORMATION = "transformation"
    PROCESSING = "processing"


class ConversionError(ValueError):
    """Base class for errors raised by the conversion pipeline."""
    category: ErrorCategory = ErrorCategory.PROCESSING

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.value = value


class StructureError(ConversionError):
    """The document as a whole cannot be processed (no header row, empty file)."""
    category = ErrorCategory.STRUCTURE


class TransformationError(ConversionError):
    """A field value could not be converted to the output format."""
    category = ErrorCategory.TRANSFORMATION
