"""
Radix — позиционные системы счисления.

Валидация основания и цифр, value ⇄ digits, строковое представление.
"""

from src.core.radix.positional import (
    DECIMAL_CHUNK_DIGITS,
    DEFAULT_BASE,
    DIGIT_ALPHABET,
    MAX_RENDER_BASE,
    MIN_BASE,
    digits_to_value,
    format_decimal,
    format_digits,
    is_integer,
    is_valid_digit,
    parse_decimal,
    validate_base,
    validate_digit,
    validate_index,
    validate_value,
    value_to_digits,
)

__all__ = [
    # Constants
    "DECIMAL_CHUNK_DIGITS",
    "DEFAULT_BASE",
    "DIGIT_ALPHABET",
    "MAX_RENDER_BASE",
    "MIN_BASE",
    # Validation
    "is_integer",
    "is_valid_digit",
    "validate_base",
    "validate_digit",
    "validate_index",
    "validate_value",
    # Conversions
    "digits_to_value",
    "format_decimal",
    "format_digits",
    "parse_decimal",
    "value_to_digits",
]
