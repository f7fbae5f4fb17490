"""
Contract Validation Module

Модуль для валидации JSON контрактов (снапшотов чисел).
"""

from .validators import SCHEMA_DIR, load_schema, validate_number_snapshot

__all__ = [
    "SCHEMA_DIR",
    "load_schema",
    "validate_number_snapshot",
]
