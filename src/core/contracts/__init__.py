"""
Contract Validation Module

Модуль для валидации и (де)сериализации JSON представлений Decimal и Difference.
"""

from .payloads import (
    decimal_from_payload,
    decimal_to_payload,
    difference_from_payload,
    difference_to_payload,
)
from .validators import (
    DECIMAL_SCHEMA,
    DIFFERENCE_SCHEMA,
    load_schema,
    validate_decimal_payload,
    validate_difference_payload,
)

__all__ = [
    # Schemas
    "DECIMAL_SCHEMA",
    "DIFFERENCE_SCHEMA",
    "load_schema",
    # Validation
    "validate_decimal_payload",
    "validate_difference_payload",
    # Payloads
    "decimal_to_payload",
    "decimal_from_payload",
    "difference_to_payload",
    "difference_from_payload",
]
