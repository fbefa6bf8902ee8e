"""
Contract Validation Module

Валидация dict-представления integer-литерала по JSON Schema.
"""

from .validators import (
    SCHEMA_PATH,
    contract_errors,
    integer_literal_validator,
    is_valid_integer_literal,
    load_integer_literal_schema,
    validate_integer_literal,
)

__all__ = [
    "SCHEMA_PATH",
    "load_integer_literal_schema",
    "integer_literal_validator",
    "validate_integer_literal",
    "is_valid_integer_literal",
    "contract_errors",
]
