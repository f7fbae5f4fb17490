"""
Number — число как кольцо цифр, синхронизированное со значением.

Содержит NumberList, производные бинарные операции, конфигурацию варианта
и адаптер к протоколу MutableSequence.
"""

from src.number.collection import DigitSequence
from src.number.config import (
    DEFAULT_RECORD_BOOK_NUMBER,
    OPERATION_TABLE,
    TARGET_BASE_TABLE,
    NumberListConfig,
    config_for_record_book,
)
from src.number.number_list import SNAPSHOT_SCHEMA_VERSION, NumberList, combine
from src.number.operations import BinaryOperation, apply_operation

__all__ = [
    # Number list
    "NumberList",
    "SNAPSHOT_SCHEMA_VERSION",
    "combine",
    # Operations
    "BinaryOperation",
    "apply_operation",
    # Config
    "DEFAULT_RECORD_BOOK_NUMBER",
    "OPERATION_TABLE",
    "TARGET_BASE_TABLE",
    "NumberListConfig",
    "config_for_record_book",
    # Adapter
    "DigitSequence",
]
