"""
Errors — Таксономия ошибок digit ring

Все ошибки обнаруживаются ДО структурного изменения (fail-fast):
наблюдаемое извне состояние никогда не бывает частично изменённым.

- DigitRangeError: индекс вне [0, size) (или [0, size] для вставки)
- DigitDomainError: цифра вне [0, base), base < 2, нецелая цифра
- NegativeResultError: вычитание с отрицательным результатом
- OperandDivisionByZero: деление / остаток на ноль в binary operation
- DecimalFormatError: невалидная десятичная строка
- PersistenceError: ошибка чтения/записи файла

Not-found (поиск/удаление отсутствующей цифры) ошибкой НЕ является.
"""


class DigitRingError(Exception):
    """Базовый класс всех ошибок пакета."""
    pass


class DigitRangeError(DigitRingError, IndexError):
    """
    Индекс вне допустимого диапазона.

    Никогда не clamp'ится молча: всегда пробрасывается вызывающему.
    """
    pass


class DigitDomainError(DigitRingError, ValueError):
    """Цифра вне [0, base) или недопустимое основание (base < 2)."""
    pass


class NegativeResultError(DigitDomainError):
    """
    Результат операции вышел за пределы неотрицательной модели значения.

    Значение number list всегда >= 0, поэтому SUBTRACT с a < b отклоняется,
    а не заворачивается по модулю.
    """
    pass


class OperandDivisionByZero(DigitRingError, ZeroDivisionError):
    """Деление или остаток от деления на операнд со значением 0."""
    pass


class DecimalFormatError(DigitDomainError):
    """Строка не является неотрицательным десятичным числом."""
    pass


class PersistenceError(DigitRingError):
    """Ошибка записи/чтения числа во внешнее хранилище (файл)."""
    pass
