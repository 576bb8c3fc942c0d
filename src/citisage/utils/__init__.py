"""
Utils package.

Pure helpers used by the conversion services:
- transaction_parser: row tokenizing and header/metadata detection
- field_validator: per-field format checks
- field_transformer: CitiBank to Sage field conversions
- file_validator: pre-flight checks on uploaded files
"""
