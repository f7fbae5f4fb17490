"""
Тесты для Positional — позиционная запись чисел

Проверяемые инварианты:
1. value_to_digits(0, b) == [] для любого основания
2. Round-trip: digits_to_value(value_to_digits(v, b), b) == v
3. Валидация основания и цифр (bool не цифра)
4. Строгий разбор десятичной строки
"""

import pytest

from src.core.errors import DecimalFormatError, DigitDomainError
from src.core.radix import (
    DEFAULT_BASE,
    MAX_RENDER_BASE,
    DECIMAL_CHUNK_DIGITS,
    digits_to_value,
    format_decimal,
    format_digits,
    is_valid_digit,
    parse_decimal,
    validate_base,
    validate_digit,
    validate_value,
    value_to_digits,
)


# =============================================================================
# ТЕСТЫ: Validation
# =============================================================================


class TestValidation:
    """Тесты валидации основания, цифр и значения."""

    def test_default_base_is_binary(self):
        assert DEFAULT_BASE == 2

    def test_valid_bases(self):
        assert validate_base(2) == 2
        assert validate_base(10) == 10
        assert validate_base(1000) == 1000

    def test_base_below_two_rejected(self):
        """base < 2 → DigitDomainError."""
        for base in (1, 0, -5):
            with pytest.raises(DigitDomainError, match="must be >= 2"):
                validate_base(base)

    def test_non_integer_base_rejected(self):
        with pytest.raises(DigitDomainError, match="must be an integer"):
            validate_base(2.0)
        with pytest.raises(DigitDomainError, match="must be an integer"):
            validate_base(True)

    def test_custom_name_in_message(self):
        with pytest.raises(DigitDomainError, match="new_base"):
            validate_base(1, "new_base")

    def test_digit_range(self):
        assert validate_digit(0, 2) == 0
        assert validate_digit(1, 2) == 1
        with pytest.raises(DigitDomainError, match="out of range for base 2"):
            validate_digit(2, 2)
        with pytest.raises(DigitDomainError, match="out of range"):
            validate_digit(-1, 10)

    def test_bool_is_not_a_digit(self):
        """bool является подклассом int, но цифрой не считается."""
        assert is_valid_digit(True, 2) is False
        with pytest.raises(DigitDomainError):
            validate_digit(True, 2)

    def test_is_valid_digit(self):
        assert is_valid_digit(7, 8) is True
        assert is_valid_digit(8, 8) is False
        assert is_valid_digit("1", 8) is False

    def test_value_must_be_non_negative(self):
        assert validate_value(0) == 0
        with pytest.raises(DigitDomainError, match="non-negative"):
            validate_value(-1)


# =============================================================================
# ТЕСТЫ: Conversions
# =============================================================================


class TestValueToDigits:
    """Тесты value_to_digits / digits_to_value."""

    def test_thirteen_binary(self):
        assert value_to_digits(13, 2) == [1, 1, 0, 1]

    def test_thirteen_ternary(self):
        assert value_to_digits(13, 3) == [1, 1, 1]

    def test_zero_is_empty_in_every_base(self):
        """Ноль = пустая последовательность, не [0]."""
        for base in (2, 3, 10, 16, 36, 257):
            assert value_to_digits(0, base) == []

    def test_powers_of_base(self):
        assert value_to_digits(1000, 10) == [1, 0, 0, 0]
        assert value_to_digits(256, 16) == [1, 0, 0]

    def test_large_base(self):
        """Основание больше алфавита допустимо для цифр."""
        assert value_to_digits(1000, 1000) == [1, 0]

    @pytest.mark.parametrize("base", [2, 3, 7, 10, 16, 36, 100])
    def test_round_trip(self, base):
        for value in (0, 1, 2, 13, 255, 10 ** 30 + 7, 2 ** 200 - 1):
            assert digits_to_value(value_to_digits(value, base), base) == value

    def test_leading_zeros_do_not_change_value(self):
        assert digits_to_value([0, 0, 1, 1, 0, 1], 2) == 13

    def test_empty_digits_is_zero(self):
        assert digits_to_value([], 7) == 0

    def test_negative_value_rejected(self):
        with pytest.raises(DigitDomainError):
            value_to_digits(-13, 2)


# =============================================================================
# ТЕСТЫ: Formatting & parsing
# =============================================================================


class TestFormatDigits:
    """Тесты format_digits."""

    def test_binary(self):
        assert format_digits([1, 1, 0, 1], 2) == "1101"

    def test_hex_alphabet(self):
        assert format_digits([15, 15], 16) == "ff"
        assert format_digits([35], 36) == "z"

    def test_empty_renders_zero(self):
        assert format_digits([], 2) == "0"

    def test_all_zero_renders_zero(self):
        assert format_digits([0, 0, 0], 3) == "0"

    def test_leading_zeros_stripped(self):
        assert format_digits([0, 1, 0], 2) == "10"

    def test_base_above_alphabet_rejected(self):
        with pytest.raises(DigitDomainError, match=f"maximum is {MAX_RENDER_BASE}"):
            format_digits([1], MAX_RENDER_BASE + 1)


class TestParseDecimal:
    """Тесты parse_decimal."""

    def test_plain(self):
        assert parse_decimal("13") == 13

    def test_whitespace_trimmed(self):
        assert parse_decimal("  42\n") == 42

    def test_leading_zeros(self):
        assert parse_decimal("0013") == 13

    def test_huge_value(self):
        text = "9" * 100
        assert parse_decimal(text) == int(text)

    def test_beyond_int_str_digit_limit(self):
        assert parse_decimal("1" + "0" * 5000) == 10 ** 5000
        assert parse_decimal("7" * 5000) == digits_to_value([7] * 5000, 10)

    def test_leading_zeros_across_chunks(self):
        text = "0" * (DECIMAL_CHUNK_DIGITS + 3) + "42"
        assert parse_decimal(text) == 42

    @pytest.mark.parametrize("text", ["", "   ", "-13", "+13", "1_000", "12a", "1.5", "١٢"])
    def test_invalid_rejected(self, text):
        with pytest.raises(DecimalFormatError):
            parse_decimal(text)

    def test_non_string_rejected(self):
        with pytest.raises(DecimalFormatError, match="must be a string"):
            parse_decimal(13)

    def test_decimal_format_error_is_domain_error(self):
        with pytest.raises(DigitDomainError):
            parse_decimal("abc")


class TestFormatDecimal:
    """Тесты format_decimal."""

    def test_small_values(self):
        assert format_decimal(0) == "0"
        assert format_decimal(13) == "13"
        assert format_decimal(10 ** 30 + 13) == "1" + "0" * 28 + "13"

    def test_beyond_int_str_digit_limit(self):
        assert format_decimal(10 ** 5000) == "1" + "0" * 5000

    def test_inner_chunks_zero_padded(self):
        value = 10 ** (2 * DECIMAL_CHUNK_DIGITS + 500) + 7
        text = format_decimal(value)
        assert len(text) == 2 * DECIMAL_CHUNK_DIGITS + 501
        assert text == "1" + "0" * (2 * DECIMAL_CHUNK_DIGITS + 499) + "7"

    def test_chunk_boundary(self):
        assert format_decimal(10 ** DECIMAL_CHUNK_DIGITS) == "1" + "0" * DECIMAL_CHUNK_DIGITS
        assert format_decimal(10 ** DECIMAL_CHUNK_DIGITS - 1) == "9" * DECIMAL_CHUNK_DIGITS

    def test_parse_inverse(self):
        value = digits_to_value([3, 1, 4, 1, 5] * 1200, 10)
        assert parse_decimal(format_decimal(value)) == value
