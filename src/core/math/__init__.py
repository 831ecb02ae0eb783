"""
Core math modules

Fixed-point десятичная арифметика и целочисленные примитивы под ней.
"""

# Scaled Integer
from src.core.math.scaled_integer import (
    # Scale constants
    CONVERSION_CHUNK_DIGITS,
    DIGITS,
    HALF_SCALED,
    MAX_POW_EXPONENT,
    MAX_UINT_256,
    PRECISION,
    # Division
    div_ceil,
    div_trunc,
    get_digits,
    rounded_mul,
    # Decimal strings
    decimal_string_to_int,
    int_to_decimal_string,
    # Raw big numbers
    parse_big_number,
    to_hex_string,
    # Validation
    validate_exponent,
    validate_non_negative_int,
)

# Fixed-Point Decimal
from src.core.math.fixed_point import (
    AUTO_SIGNIFICANT_DIGITS,
    INFINITY_SYMBOL,
    MAGNITUDES,
    MONEY_EXTRA_DIGITS_BELOW_ONE,
    MONEY_PRECISION,
    SMART_PRECISION_BELOW_ONE,
    THOUSANDS_SEPARATOR,
    Decimal,
    Decimalish,
)

__all__ = [
    # Scaled Integer — Scale constants
    "CONVERSION_CHUNK_DIGITS",
    "DIGITS",
    "HALF_SCALED",
    "MAX_POW_EXPONENT",
    "MAX_UINT_256",
    "PRECISION",
    # Scaled Integer — Division
    "div_ceil",
    "div_trunc",
    "get_digits",
    "rounded_mul",
    # Scaled Integer — Decimal strings
    "decimal_string_to_int",
    "int_to_decimal_string",
    # Scaled Integer — Raw big numbers
    "parse_big_number",
    "to_hex_string",
    # Scaled Integer — Validation
    "validate_exponent",
    "validate_non_negative_int",
    # Fixed-Point Decimal
    "AUTO_SIGNIFICANT_DIGITS",
    "INFINITY_SYMBOL",
    "MAGNITUDES",
    "MONEY_EXTRA_DIGITS_BELOW_ONE",
    "MONEY_PRECISION",
    "SMART_PRECISION_BELOW_ONE",
    "THOUSANDS_SEPARATOR",
    "Decimal",
    "Decimalish",
]
