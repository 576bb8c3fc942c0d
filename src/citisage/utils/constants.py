"""
Constants shared by the conversion pipeline.
"""
import re

MAX_FILE_SIZE_MB = 10

REQUIRED_HEADERS = ['Account Number', 'Value Date', 'Customer Reference', 'Amount']

# Both labels must appear on the header row
HEADER_MARKERS = ('Account Number', 'Value Date')

METADATA_INDICATORS = (
    'Search Criteria:',
    'From Date:',
    'To Date:',
    'Accounts:',
)

ERROR_MESSAGES = {
    'INVALID_FILE_TYPE': 'File must be a CSV file with .csv extension',
    'FILE_TOO_LARGE': f'File size must be less than {MAX_FILE_SIZE_MB}MB',
    'FILE_EMPTY': 'File is empty',
    'MISSING_HEADERS': 'CSV file must contain required headers: Account Number, Value Date, Customer Reference, Amount',
    'NO_DATA_ROWS': 'CSV file contains no transaction data',
    'INVALID_DATE_FORMAT': 'Date must be in MM/DD/YYYY format',
    'INVALID_AMOUNT_FORMAT': 'Amount must be a valid number',
    'MALFORMED_CSV': 'CSV file is malformed or corrupted',
}

# MM/DD/YYYY with month 01-12 and day 01-31
INPUT_DATE_PATTERN = re.compile(r'^(0[1-9]|1[0-2])/(0[1-9]|[12][0-9]|3[01])/[0-9]{4}$')

# Quotes, thousands separators and whitespace around a CitiBank amount
AMOUNT_CLEANUP_PATTERN = re.compile(r'["\',\s]')

# A converted document is successful when at least this share of rows converted
SUCCESS_RATE_THRESHOLD = 50.0
