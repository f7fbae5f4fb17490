"""
NumberSnapshot — Снапшот числа для хранения и обмена

Immutable Pydantic модель, представляющая число как пару
(decimal_value, base, digits). Полная совместимость с JSON Schema
(contracts/schema/number_snapshot.json).

digits хранит форму кольца как есть (head → tail), включая возможные
ведущие нули после мутаций на уровне цифр.
"""

from typing import List

from pydantic import BaseModel, Field, model_validator


class NumberSnapshot(BaseModel):
    """
    Снапшот NumberList.

    Immutable модель (frozen=True):
    - schema_version: версия схемы для tracking совместимости
    - decimal_value: каноническая десятичная строка значения
    - base: основание digits
    - digits: цифры от старшего разряда к младшему
    """

    schema_version: str = Field(
        ..., pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    decimal_value: str = Field(
        ...,
        pattern="^(0|[1-9][0-9]*)$",
        description="Значение в десятичной записи без ведущих нулей",
    )
    base: int = Field(..., ge=2, description="Основание системы счисления")
    digits: List[int] = Field(
        default_factory=list, description="Цифры head → tail (0 <= d < base)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_digits_in_base(self) -> "NumberSnapshot":
        """Каждая цифра должна лежать в [0, base)."""
        for digit in self.digits:
            if not 0 <= digit < self.base:
                raise ValueError(f"digit {digit} is out of range for base {self.base}")
        return self
