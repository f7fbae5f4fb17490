"""
NumberListConfig — конфигурация варианта number list

Вариант определяет целевое основание для change_scale() и операцию для
additional_operation(). Оба выбираются по номеру зачётной книжки из
фиксированных закрытых таблиц:

- основание: record_book % 5 → {0: 3, 1: 8, 2: 10, 3: 16, 4: 2}
- операция:  record_book % 7 → {0: ADD, 1: SUBTRACT, 2: MULTIPLY,
                                 3: DIVIDE, 4: MODULO, 5: AND, 6: OR}

Номер 4220 даёт вариант "двоичная → троичная, OR".
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from src.core.radix import DEFAULT_BASE, validate_base
from src.number.operations import BinaryOperation

DEFAULT_RECORD_BOOK_NUMBER: Final[int] = 4220

TARGET_BASE_TABLE: Final[Mapping[int, int]] = MappingProxyType({
    0: 3,
    1: 8,
    2: 10,
    3: 16,
    4: 2,
})

OPERATION_TABLE: Final[Mapping[int, BinaryOperation]] = MappingProxyType({
    0: BinaryOperation.ADD,
    1: BinaryOperation.SUBTRACT,
    2: BinaryOperation.MULTIPLY,
    3: BinaryOperation.DIVIDE,
    4: BinaryOperation.MODULO,
    5: BinaryOperation.AND,
    6: BinaryOperation.OR,
})


@dataclass(frozen=True)
class NumberListConfig:
    """Конфигурация варианта.

    - default_base: основание новых чисел и результатов операций
    - target_base: основание для change_scale()
    - operation: операция для additional_operation()
    """
    default_base: int = DEFAULT_BASE
    target_base: int = 3
    operation: BinaryOperation = BinaryOperation.OR

    def __post_init__(self):
        validate_base(self.default_base, "default_base")
        validate_base(self.target_base, "target_base")
        object.__setattr__(self, "operation", BinaryOperation(self.operation))


def config_for_record_book(record_book_number: int = DEFAULT_RECORD_BOOK_NUMBER) -> NumberListConfig:
    """
    Конфигурация по номеру зачётной книжки.

    Args:
        record_book_number: Номер зачётной книжки (неотрицательный)

    Returns:
        NumberListConfig с основанием и операцией из таблиц

    Examples:
        >>> config_for_record_book(4220)
        NumberListConfig(default_base=2, target_base=3, operation=<BinaryOperation.OR: 'OR'>)
    """
    if record_book_number < 0:
        raise ValueError(f"record_book_number must be non-negative, got {record_book_number}")

    return NumberListConfig(
        target_base=TARGET_BASE_TABLE[record_book_number % len(TARGET_BASE_TABLE)],
        operation=OPERATION_TABLE[record_book_number % len(OPERATION_TABLE)],
    )
