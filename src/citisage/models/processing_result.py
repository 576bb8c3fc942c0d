"""
Result models produced by the document processor.
"""
from typing import Any, Dict, List
from pydantic import BaseModel, Field, ConfigDict, field_validator

from citisage.models.transaction import SageTransaction


class RowValidationError(BaseModel):
    """A problem found with one row (or with the document structure when row is 0)."""
    row: int
    field: str
    value: str = ""
    message: str

    model_config = ConfigDict(
        frozen=True
    )


class ProcessingStatistics(BaseModel):
    """Counters gathered while processing one document."""
    total_rows: int = Field(default=0, alias="totalRows")
    metadata_rows: int = Field(default=0, alias="metadataRows")
    processed_rows: int = Field(default=0, alias="processedRows")
    error_rows: int = Field(default=0, alias="errorRows")
    success_rate: float = Field(default=0.0, alias="successRate")

    model_config = ConfigDict(
        populate_by_name=True
    )

    @field_validator('success_rate')
    @classmethod
    def check_success_rate(cls, v: float) -> float:
        if v < 0 or v > 100:
            raise ValueError(f"Success rate must be between 0 and 100, got {v}")
        return v

    @property
    def examined_rows(self) -> int:
        return self.processed_rows + self.error_rows


class ProcessingResult(BaseModel):
    """
    Aggregate outcome of converting one CitiBank export.

    success is True only when at least one row was converted and at least
    half of the examined rows were converted.
    """
    success: bool = False
    data: List[SageTransaction] = Field(default_factory=list)
    errors: List[RowValidationError] = Field(default_factory=list)
    statistics: ProcessingStatistics = Field(default_factory=ProcessingStatistics)

    model_config = ConfigDict(
        populate_by_name=True
    )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the wire (camelCase / column) names."""
        return self.model_dump(mode='json', by_alias=True)


class FileValidationResult(BaseModel):
    """Outcome of the pre-flight checks run on an uploaded file."""
    is_valid: bool = Field(alias="isValid")
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        populate_by_name=True
    )

    @classmethod
    def from_messages(cls, errors: List[str], warnings: List[str]) -> "FileValidationResult":
        return cls(is_valid=len(errors) == 0, errors=errors, warnings=warnings)
