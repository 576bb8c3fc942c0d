"""
Transaction record models for the CitiBank input and Sage Bank Manager output formats.
"""
from typing import Iterator, Tuple
from pydantic import BaseModel, Field, ConfigDict

ACCOUNT_NUMBER = "Account Number"
VALUE_DATE = "Value Date"
CUSTOMER_REFERENCE = "Customer Reference"
AMOUNT = "Amount"

# Column order of a CitiBank export data row
CITIBANK_COLUMNS = (ACCOUNT_NUMBER, VALUE_DATE, CUSTOMER_REFERENCE, AMOUNT)

# Column order of a Sage Bank Manager import file
SAGE_COLUMNS = ("Date", "Description", "Amount")


class CitiBankTransaction(BaseModel):
    """
    One tokenized data row of a CitiBank statement export.
    All values are kept as the trimmed strings found in the file.
    """
    account_number: str = Field(default="", alias="Account Number")
    value_date: str = Field(default="", alias="Value Date")  # MM/DD/YYYY
    customer_reference: str = Field(default="", alias="Customer Reference")
    amount: str = Field(default="", alias="Amount")  # e.g. " -1,911,566.02"

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True
    )

    @classmethod
    def from_fields(cls, fields: list) -> "CitiBankTransaction":
        """Build a record from tokenized fields in CitiBank column order."""
        padded = list(fields) + [""] * (len(CITIBANK_COLUMNS) - len(fields))
        return cls(
            account_number=padded[0].strip(),
            value_date=padded[1].strip(),
            customer_reference=padded[2].strip(),
            amount=padded[3].strip()
        )

    def field_items(self) -> Iterator[Tuple[str, str]]:
        """Yield (column name, value) pairs in column order."""
        for name, value in self.model_dump(by_alias=True).items():
            yield name, value


class SageTransaction(BaseModel):
    """
    One row of a Sage Bank Manager import file.
    Amount is the exact decimal string from the source, never a float.
    """
    date: str = Field(alias="Date")  # DD/MM/YYYY
    description: str = Field(alias="Description")
    amount: str = Field(alias="Amount")

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True
    )
