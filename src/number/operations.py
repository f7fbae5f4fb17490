"""
Binary Operations — производная операция над значениями двух чисел

Операция выбирается из фиксированного закрытого набора и передаётся явным
параметром (BinaryOperation), а не читается из глобальной константы.

Операнды интерпретируются только через их значения (int >= 0), независимо
от основания и формы digit ring.

СЕМАНТИКА:
- ADD, MULTIPLY, AND, OR: тотальны на неотрицательных операндах
- SUBTRACT: a - b; при a < b → NegativeResultError (без заворачивания)
- DIVIDE: целочисленное деление a // b; b == 0 → OperandDivisionByZero
- MODULO: a % b; b == 0 → OperandDivisionByZero
"""

from enum import Enum

from src.core.errors import NegativeResultError, OperandDivisionByZero


class BinaryOperation(str, Enum):
    """Производная бинарная операция."""

    ADD = "ADD"
    SUBTRACT = "SUBTRACT"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"
    MODULO = "MODULO"
    AND = "AND"
    OR = "OR"


def apply_operation(left: int, right: int, operation: BinaryOperation) -> int:
    """
    Применение операции к двум неотрицательным значениям.

    Args:
        left: Значение левого операнда
        right: Значение правого операнда
        operation: Операция из BinaryOperation

    Returns:
        Неотрицательный результат

    Raises:
        OperandDivisionByZero: DIVIDE/MODULO при right == 0
        NegativeResultError: SUBTRACT при left < right
        ValueError: Неизвестная операция

    Examples:
        >>> apply_operation(13, 5, BinaryOperation.OR)
        13
        >>> apply_operation(13, 5, BinaryOperation.DIVIDE)
        2
    """
    operation = BinaryOperation(operation)

    if operation == BinaryOperation.ADD:
        return left + right

    if operation == BinaryOperation.SUBTRACT:
        if left < right:
            raise NegativeResultError(
                "Subtraction result would be negative: left operand is smaller"
            )
        return left - right

    if operation == BinaryOperation.MULTIPLY:
        return left * right

    if operation == BinaryOperation.DIVIDE:
        if right == 0:
            raise OperandDivisionByZero("Division by zero")
        return left // right

    if operation == BinaryOperation.MODULO:
        if right == 0:
            raise OperandDivisionByZero("Modulo by zero")
        return left % right

    if operation == BinaryOperation.AND:
        return left & right

    # BinaryOperation.OR
    return left | right
