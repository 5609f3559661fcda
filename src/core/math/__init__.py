"""
Core math modules для BigInt

Цифровая арифметика над магнитудами (десятичные цифры, младшая первой).
"""

# Digits (магнитуды)
from src.core.math.digits import (
    # Constants
    BASE,
    DIGIT_CHARS,
    INT64_MAX,
    INT64_MIN,
    NEGATIVE_SIGN,
    ONE_MAGNITUDE,
    REASON_EMPTY,
    REASON_INVALID_CHARACTER,
    REASON_NO_DIGITS,
    ZERO_MAGNITUDE,
    # Exceptions
    InvalidFormatError,
    # Normalization
    is_zero_magnitude,
    normalize_magnitude,
    validate_magnitude,
    # Arithmetic
    add_magnitudes,
    compare_magnitudes,
    mul_magnitudes,
    sub_magnitudes,
    # Conversions
    magnitude_from_int,
    magnitude_to_int,
    magnitude_to_str,
    parse_decimal,
)

__all__ = [
    # Digits — Constants
    "BASE",
    "DIGIT_CHARS",
    "INT64_MAX",
    "INT64_MIN",
    "NEGATIVE_SIGN",
    "ONE_MAGNITUDE",
    "REASON_EMPTY",
    "REASON_INVALID_CHARACTER",
    "REASON_NO_DIGITS",
    "ZERO_MAGNITUDE",
    # Digits — Exceptions
    "InvalidFormatError",
    # Digits — Normalization
    "is_zero_magnitude",
    "normalize_magnitude",
    "validate_magnitude",
    # Digits — Arithmetic
    "add_magnitudes",
    "compare_magnitudes",
    "mul_magnitudes",
    "sub_magnitudes",
    # Digits — Conversions
    "magnitude_from_int",
    "magnitude_to_int",
    "magnitude_to_str",
    "parse_decimal",
]
