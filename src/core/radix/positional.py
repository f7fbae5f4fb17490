"""
Positional — Позиционная запись неотрицательных целых чисел

Модуль обеспечивает:
- Валидацию основания (base >= 2) и цифр (0 <= d < base)
- Преобразование value → digits (старший разряд первым)
- Преобразование digits → value свёрткой v = v * base + d
- Отображение цифр в строку алфавитом 0-9a-z
- Строгий разбор десятичной строки

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. value_to_digits(0, base) == [] (ноль = пустая последовательность, не [0])
2. digits_to_value(value_to_digits(v, b), b) == v для любых v >= 0, b >= 2
3. bool не считается цифрой, хотя является подклассом int
"""

import re
from typing import Final, Iterable, List

from src.core.errors import DecimalFormatError, DigitDomainError, DigitRangeError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание по умолчанию для новых чисел и результатов binary operation
DEFAULT_BASE: Final[int] = 2

# Минимально допустимое основание
MIN_BASE: Final[int] = 2

# Алфавит цифр для строкового представления
DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

# Максимальное основание, для которого определено строковое представление
MAX_RENDER_BASE: Final[int] = len(DIGIT_ALPHABET)

_DECIMAL_PATTERN: Final = re.compile(r"[0-9]+")

# Размер блока десятичных цифр для int ⇄ str без лимита CPython
# на длину строкового представления (4300 цифр)
DECIMAL_CHUNK_DIGITS: Final[int] = 1000

_DECIMAL_CHUNK_BASE: Final[int] = 10 ** DECIMAL_CHUNK_DIGITS


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_integer(value: object) -> bool:
    """True для int, но не для bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_digit(digit: object, base: int) -> bool:
    """
    Проверка цифры без exception.

    Args:
        digit: Проверяемое значение
        base: Текущее основание

    Returns:
        True если digit целое в [0, base)
    """
    return is_integer(digit) and 0 <= digit < base


def validate_base(base: object, name: str = "base") -> int:
    """
    Валидация основания системы счисления.

    Args:
        base: Проверяемое основание
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        base без изменений

    Raises:
        DigitDomainError: Если base не целое или base < 2
    """
    if not is_integer(base):
        raise DigitDomainError(f"{name} must be an integer, got {base!r}")

    if base < MIN_BASE:
        raise DigitDomainError(f"{name} must be >= {MIN_BASE}, got {base}")

    return base


def validate_digit(digit: object, base: int) -> int:
    """
    Валидация цифры для основания base.

    Raises:
        DigitDomainError: Если digit не целое или вне [0, base)
    """
    if not is_integer(digit):
        raise DigitDomainError(f"Digit must be an integer, got {digit!r}")

    if not 0 <= digit < base:
        raise DigitDomainError(f"Digit {digit} is out of range for base {base}")

    return digit


def validate_index(index: object) -> int:
    """
    Валидация типа позиции (диапазон проверяет DigitRing).

    Raises:
        DigitRangeError: Если index не целое (bool тоже отклоняется)
    """
    if not is_integer(index):
        raise DigitRangeError(f"index must be an integer, got {index!r}")

    return index


def validate_value(value: object, name: str = "value") -> int:
    """
    Валидация значения числа: целое, неотрицательное.

    Raises:
        DigitDomainError: Если value не целое или value < 0
    """
    if not is_integer(value):
        raise DigitDomainError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise DigitDomainError(f"{name} must be non-negative")

    return value


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def value_to_digits(value: int, base: int) -> List[int]:
    """
    Разложение значения на цифры в основании base.

    Args:
        value: Неотрицательное целое
        base: Основание (>= 2)

    Returns:
        Цифры от старшего разряда к младшему; [] для value == 0

    Examples:
        >>> value_to_digits(13, 2)
        [1, 1, 0, 1]
        >>> value_to_digits(13, 3)
        [1, 1, 1]
        >>> value_to_digits(0, 10)
        []
    """
    validate_value(value)
    validate_base(base)

    digits: List[int] = []
    while value:
        value, digit = divmod(value, base)
        digits.append(digit)
    digits.reverse()
    return digits


def digits_to_value(digits: Iterable[int], base: int) -> int:
    """
    Свёртка цифр (старший разряд первым) в значение.

    Пустая последовательность даёт 0. Ведущие нули не влияют на результат.

    Examples:
        >>> digits_to_value([1, 1, 0, 1], 2)
        13
        >>> digits_to_value([], 2)
        0
    """
    value = 0
    for digit in digits:
        value = value * base + digit
    return value


def format_digits(digits: Iterable[int], base: int) -> str:
    """
    Строковое представление цифр в алфавите 0-9a-z.

    Ведущие нули не выводятся; пустая (или нулевая) последовательность даёт "0".

    Raises:
        DigitDomainError: Если base > 36 (нет алфавита)
    """
    validate_base(base)
    if base > MAX_RENDER_BASE:
        raise DigitDomainError(
            f"Cannot render digits for base {base}: maximum is {MAX_RENDER_BASE}"
        )

    text = "".join(DIGIT_ALPHABET[digit] for digit in digits).lstrip("0")
    return text or "0"


def parse_decimal(text: object) -> int:
    """
    Строгий разбор неотрицательной десятичной строки.

    Пробелы по краям допускаются; знак, разделители и не-ASCII цифры не допускаются.

    Args:
        text: Строка вида "42", " 0013 \\n"

    Returns:
        Значение как int

    Raises:
        DecimalFormatError: Если строка пустая или содержит недопустимые символы
    """
    if not isinstance(text, str):
        raise DecimalFormatError(f"Decimal value must be a string, got {type(text).__name__}")

    stripped = text.strip()
    if not _DECIMAL_PATTERN.fullmatch(stripped):
        raise DecimalFormatError(f"Not a non-negative decimal number: {text!r}")

    value = 0
    for start in range(0, len(stripped), DECIMAL_CHUNK_DIGITS):
        chunk = stripped[start:start + DECIMAL_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_decimal(value: int) -> str:
    """
    Десятичная запись неотрицательного значения любой длины.

    Значение раскладывается на блоки по DECIMAL_CHUNK_DIGITS цифр, каждый
    блок кроме старшего дополняется нулями слева.

    Examples:
        >>> format_decimal(0)
        '0'
        >>> format_decimal(13)
        '13'
    """
    chunks = value_to_digits(value, _DECIMAL_CHUNK_BASE)
    if not chunks:
        return "0"
    head, *tail = chunks
    return str(head) + "".join(str(chunk).zfill(DECIMAL_CHUNK_DIGITS) for chunk in tail)
