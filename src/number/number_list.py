"""
NumberList — число как digit ring + значение

Число хранится одновременно в двух представлениях:
- value: неотрицательный int (единственный источник истины)
- digit ring: кольцевой двусвязный список цифр в основании base,
  head: старший разряд

Value Synchronizer:
- rebuild_digits_from_value(): value + base → digit ring
- recompute_value_from_digits(): digit ring + base → value

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. В любой наблюдаемой извне точке digits_to_value(ring, base) == value
2. Каждая мутация вызывает ровно одну из двух операций синхронизации
3. Все структурные мутации проходят через _mutation(), который
   безусловно пересчитывает value после правки
4. Вся валидация (индекс, цифра, основание) выполняется ДО правки
5. Перестроение из value == 0 даёт пустое кольцо, а не кольцо из нулей

Мутации на уровне цифр сохраняют позиционную форму: после insert(0, 0)
или вращения в head может оказаться 0, value от этого не меняется,
а to_base_string() ведущие нули не выводит.
"""

import logging
from contextlib import contextmanager
from typing import Final, Iterable, Iterator, List, Optional

from src.core.domain import NumberSnapshot
from src.core.errors import DigitDomainError
from src.core.radix import (
    DEFAULT_BASE,
    digits_to_value,
    format_decimal,
    format_digits,
    is_integer,
    parse_decimal,
    validate_base,
    validate_digit,
    validate_value,
    value_to_digits,
)
from src.core.ring import DigitRing
from src.number.config import NumberListConfig
from src.number.operations import BinaryOperation, apply_operation

logger = logging.getLogger(__name__)

SNAPSHOT_SCHEMA_VERSION: Final[str] = "1"


class NumberList:
    """
    Неотрицательное целое, хранимое как кольцо цифр в основании base.

    Examples:
        >>> number = NumberList(13)
        >>> number.to_list()
        [1, 1, 0, 1]
        >>> number.to_base_string()
        '1101'
        >>> number.convert_to_base(3).to_base_string()
        '111'
    """

    def __init__(self, value: int = 0, base: int = DEFAULT_BASE):
        """
        Args:
            value: Неотрицательное начальное значение (default 0 → пустое кольцо)
            base: Основание системы счисления (default 2)

        Raises:
            DigitDomainError: Если value < 0 или base < 2
        """
        self._base = validate_base(base)
        self._value = validate_value(value)
        self._ring = DigitRing()
        self.rebuild_digits_from_value()

    # =========================================================================
    # ALTERNATIVE CONSTRUCTORS
    # =========================================================================

    @classmethod
    def from_decimal_string(cls, text: str, base: int = DEFAULT_BASE) -> "NumberList":
        """
        Создание из десятичной строки.

        Raises:
            DecimalFormatError: Если строка не является неотрицательным числом
        """
        return cls(parse_decimal(text), base)

    @classmethod
    def from_digits(cls, digits: Iterable[int], base: int = DEFAULT_BASE) -> "NumberList":
        """
        Создание из последовательности цифр (старший разряд первым).

        Форма кольца сохраняется как есть, включая ведущие нули.

        Raises:
            DigitDomainError: Если любая цифра вне [0, base)
        """
        number = cls(0, base)
        number.add_all(digits)
        return number

    @classmethod
    def from_snapshot(cls, snapshot: NumberSnapshot) -> "NumberList":
        """
        Восстановление из snapshot с проверкой согласованности digits и value.

        Raises:
            DigitDomainError: Если digits не декодируются в decimal_value
        """
        number = cls.from_digits(snapshot.digits, snapshot.base)
        if number.to_decimal_string() != snapshot.decimal_value:
            raise DigitDomainError(
                f"Snapshot digits decode to {number.to_decimal_string()}, "
                f"expected {snapshot.decimal_value}"
            )
        return number

    # =========================================================================
    # VALUE SYNCHRONIZER
    # =========================================================================

    def rebuild_digits_from_value(self) -> None:
        """Очистка кольца и заполнение цифрами value в текущем base."""
        self._ring.clear()
        for digit in value_to_digits(self._value, self._base):
            self._ring.append(digit)
        logger.debug(
            "Rebuilt digit ring: bits=%d base=%d size=%d",
            self._value.bit_length(), self._base, self._ring.size,
        )

    def recompute_value_from_digits(self) -> None:
        """Свёртка кольца head → tail: value = value * base + digit."""
        self._value = digits_to_value(self._ring, self._base)

    @contextmanager
    def _mutation(self) -> Iterator[DigitRing]:
        """
        Единственная точка структурных правок.

        После выхода из блока value безусловно пересчитывается из кольца.
        """
        try:
            yield self._ring
        finally:
            self.recompute_value_from_digits()

    def _reset(self, value: int, base: int) -> None:
        self._value = value
        self._base = base
        self.rebuild_digits_from_value()

    # =========================================================================
    # READ-ONLY ACCESSORS
    # =========================================================================

    @property
    def value(self) -> int:
        return self._value

    @property
    def base(self) -> int:
        return self._base

    @property
    def size(self) -> int:
        return self._ring.size

    @property
    def is_empty(self) -> bool:
        return self._ring.is_empty

    def __len__(self) -> int:
        return self._ring.size

    def __iter__(self) -> Iterator[int]:
        return iter(self._ring)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._ring)

    def __contains__(self, digit: object) -> bool:
        return self.contains(digit)

    def __getitem__(self, index: int) -> int:
        if not is_integer(index):
            raise TypeError(f"NumberList indices must be integers, not {type(index).__name__}")
        return self.digit_at(index)

    def digit_at(self, index: int) -> int:
        """
        Raises:
            DigitRangeError: Если index вне [0, size)
        """
        return self._ring.digit_at(index)

    def index_of(self, digit: object) -> int:
        if not is_integer(digit):
            return -1
        return self._ring.index_of(digit)

    def last_index_of(self, digit: object) -> int:
        if not is_integer(digit):
            return -1
        return self._ring.last_index_of(digit)

    def contains(self, digit: object) -> bool:
        return self.index_of(digit) != -1

    def contains_all(self, digits: Iterable[object]) -> bool:
        return all(self.contains(digit) for digit in digits)

    def to_list(self) -> List[int]:
        return self._ring.to_list()

    # =========================================================================
    # DIGIT MUTATIONS
    # =========================================================================

    def add(self, digit: int) -> bool:
        """Добавление цифры в хвост (младший разряд)."""
        self.insert(self.size, digit)
        return True

    def insert(self, index: int, digit: int) -> None:
        """
        Вставка цифры на позицию index (0 <= index <= size).

        Raises:
            DigitDomainError: Если digit вне [0, base)
            DigitRangeError: Если index вне [0, size]
        """
        validate_digit(digit, self._base)
        self._ring.check_insert_index(index)
        with self._mutation() as ring:
            ring.insert(index, digit)

    def add_all(self, digits: Iterable[int], index: Optional[int] = None) -> bool:
        """
        Вставка нескольких цифр подряд (в хвост или начиная с index).

        Все цифры валидируются до первой вставки; value пересчитывается один раз.

        Returns:
            True если кольцо изменилось
        """
        digits = list(digits)
        for digit in digits:
            validate_digit(digit, self._base)
        position = self.size if index is None else index
        self._ring.check_insert_index(position)

        if not digits:
            return False

        with self._mutation() as ring:
            for offset, digit in enumerate(digits):
                ring.insert(position + offset, digit)
        return True

    def remove_at(self, index: int) -> int:
        """
        Удаление цифры на позиции index.

        Returns:
            Удалённая цифра

        Raises:
            DigitRangeError: Если index вне [0, size)
        """
        self._ring.check_index(index)
        with self._mutation() as ring:
            return ring.remove_at(index)

    def remove_value(self, digit: object) -> bool:
        """
        Удаление первой (head → tail) цифры digit.

        Returns:
            False если цифры нет (не ошибка)
        """
        if not self.contains(digit):
            return False
        with self._mutation() as ring:
            return ring.remove_value(digit)

    def remove_all(self, digits: Iterable[object]) -> bool:
        """Удаление всех вхождений каждой из цифр digits."""
        targets = {digit for digit in digits if is_integer(digit)}
        if not any(digit in targets for digit in self._ring):
            return False
        with self._mutation() as ring:
            ring.remove_if(lambda digit: digit in targets)
        return True

    def retain_all(self, digits: Iterable[object]) -> bool:
        """Удаление всех цифр, не входящих в digits."""
        keep = {digit for digit in digits if is_integer(digit)}
        if all(digit in keep for digit in self._ring):
            return False
        with self._mutation() as ring:
            ring.remove_if(lambda digit: digit not in keep)
        return True

    def set(self, index: int, digit: int) -> int:
        """
        Замена цифры на позиции index.

        Returns:
            Предыдущая цифра

        Raises:
            DigitDomainError: Если digit вне [0, base)
            DigitRangeError: Если index вне [0, size)
        """
        validate_digit(digit, self._base)
        self._ring.check_index(index)
        with self._mutation() as ring:
            return ring.set(index, digit)

    def swap(self, first: int, second: int) -> bool:
        """
        Обмен цифр на двух позициях.

        Returns:
            False если любой индекс вне диапазона (не ошибка), True иначе
        """
        if not (is_integer(first) and is_integer(second)):
            return False
        if not (0 <= first < self.size and 0 <= second < self.size):
            return False
        with self._mutation() as ring:
            return ring.swap(first, second)

    def sort_ascending(self) -> None:
        with self._mutation() as ring:
            ring.sort()

    def sort_descending(self) -> None:
        with self._mutation() as ring:
            ring.sort(descending=True)

    def rotate_left(self) -> None:
        """Сдвиг head на следующий узел; value пересчитывается."""
        with self._mutation() as ring:
            ring.rotate_left()

    def rotate_right(self) -> None:
        """Сдвиг head на предыдущий узел; value пересчитывается."""
        with self._mutation() as ring:
            ring.rotate_right()

    shift_left = rotate_left
    shift_right = rotate_right

    def clear(self) -> None:
        """Сброс к пустому числу (value 0, основание по умолчанию)."""
        self._reset(0, DEFAULT_BASE)

    # =========================================================================
    # BASE CONVERSION & OPERATIONS
    # =========================================================================

    def convert_to_base(self, new_base: int) -> "NumberList":
        """
        То же значение в основании new_base; self не изменяется.

        Raises:
            DigitDomainError: Если new_base < 2
        """
        validate_base(new_base, "new_base")
        converted = NumberList(self._value, new_base)
        logger.debug(
            "Converted %d-bit value from base %d to base %d",
            self._value.bit_length(), self._base, new_base,
        )
        return converted

    def change_scale(self, config: Optional[NumberListConfig] = None) -> "NumberList":
        """Перевод в target_base из конфигурации варианта."""
        config = config or NumberListConfig()
        return self.convert_to_base(config.target_base)

    def additional_operation(
        self,
        other: "NumberList",
        config: Optional[NumberListConfig] = None,
    ) -> "NumberList":
        """Операция варианта над self и other; операнды не изменяются."""
        config = config or NumberListConfig()
        return combine(self, other, config.operation, base=config.default_base)

    # =========================================================================
    # REPRESENTATIONS
    # =========================================================================

    def to_decimal_string(self) -> str:
        """Каноническая десятичная запись, "0" для нуля."""
        return format_decimal(self._value)

    def to_base_string(self) -> str:
        """
        Цифры в текущем основании (алфавит 0-9a-z), "0" для нуля.

        Raises:
            DigitDomainError: Если base > 36
        """
        return format_digits(self._ring, self._base)

    def to_snapshot(self) -> NumberSnapshot:
        return NumberSnapshot(
            schema_version=SNAPSHOT_SCHEMA_VERSION,
            decimal_value=self.to_decimal_string(),
            base=self._base,
            digits=self.to_list(),
        )

    def __str__(self) -> str:
        return self.to_base_string()

    def __repr__(self) -> str:
        return f"NumberList(value={self.to_decimal_string()}, base={self._base}, digits={self.to_list()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberList):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)


def combine(
    left: NumberList,
    right: NumberList,
    operation: BinaryOperation,
    base: int = DEFAULT_BASE,
) -> NumberList:
    """
    Новое число как результат операции над значениями left и right.

    Основания операндов не учитываются; результат строится в base.

    Args:
        left: Левый операнд
        right: Правый операнд
        operation: Операция из BinaryOperation
        base: Основание результата (default 2)

    Raises:
        TypeError: Если операнд не NumberList
        OperandDivisionByZero: DIVIDE/MODULO при right.value == 0
        NegativeResultError: SUBTRACT при left.value < right.value
    """
    if not isinstance(left, NumberList) or not isinstance(right, NumberList):
        raise TypeError("Unsupported operand type: both operands must be NumberList")

    result = apply_operation(left.value, right.value, operation)
    logger.debug(
        "Combined %s: %d-bit and %d-bit operands, %d-bit result",
        BinaryOperation(operation).value,
        left.value.bit_length(), right.value.bit_length(), result.bit_length(),
    )
    return NumberList(result, base)
