"""
Number Files — хранение чисел во внешних файлах

Два формата:
1. Decimal file: одна строка с десятичным значением.
   - save_number(): запись to_decimal_string()
   - load_number(): отсутствующий / пустой / невалидный файл → пустое число
     (value 0), с WARNING в лог
2. Snapshot file: JSON снапшот (NumberSnapshot), валидируемый контрактом
   number_snapshot.json до записи и после чтения.

Ошибки ввода-вывода при записи оборачиваются в PersistenceError.
"""

import json
import logging
from pathlib import Path
from typing import Union

from src.core.contracts import validate_number_snapshot
from src.core.domain import NumberSnapshot
from src.core.errors import DecimalFormatError, PersistenceError
from src.core.radix import DEFAULT_BASE
from src.number import NumberList

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# =============================================================================
# DECIMAL FILE
# =============================================================================


def save_number(path: PathLike, number: NumberList) -> None:
    """
    Запись числа в файл в десятичной записи.

    Raises:
        PersistenceError: Если файл не удалось записать
    """
    path = Path(path)
    try:
        path.write_text(number.to_decimal_string(), encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"Cannot save number to {path}") from e


def load_number(path: PathLike, base: int = DEFAULT_BASE) -> NumberList:
    """
    Чтение числа из файла с десятичной записью.

    Args:
        path: Путь к файлу
        base: Основание результата (default 2)

    Returns:
        NumberList; пустой (value 0), если файл отсутствует, не читается,
        пуст или содержит не десятичное число
    """
    path = Path(path)
    if not path.is_file():
        logger.warning("Number file not found: %s", path)
        return NumberList(0, base)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("Cannot read number file %s: %s", path, e)
        return NumberList(0, base)

    if not text.strip():
        return NumberList(0, base)

    try:
        return NumberList.from_decimal_string(text, base)
    except DecimalFormatError as e:
        logger.warning("Invalid number in %s: %s", path, e)
        return NumberList(0, base)


# =============================================================================
# SNAPSHOT FILE
# =============================================================================


def save_snapshot(path: PathLike, number: NumberList) -> None:
    """
    Запись JSON снапшота числа.

    Raises:
        ValidationError: Если снапшот не соответствует контракту
        PersistenceError: Если файл не удалось записать
    """
    path = Path(path)
    data = number.to_snapshot().model_dump()
    validate_number_snapshot(data)

    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        raise PersistenceError(f"Cannot save snapshot to {path}") from e


def load_snapshot(path: PathLike) -> NumberList:
    """
    Чтение JSON снапшота числа.

    Raises:
        PersistenceError: Если файл не удалось прочитать или он не JSON
        ValidationError: Если данные не соответствуют контракту
        DigitDomainError: Если digits не декодируются в decimal_value
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise PersistenceError(f"Cannot load snapshot from {path}") from e

    validate_number_snapshot(data)
    return NumberList.from_snapshot(NumberSnapshot.model_validate(data))
