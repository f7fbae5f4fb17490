"""
DigitSequence — адаптер NumberList к протоколу MutableSequence

Тонкая обёртка: каждое действие делегируется примитивам NumberList, поэтому
инвариант синхронизации value/digits сохраняется автоматически.

Не поддерживается (явная ошибка, а не молчаливое поведение):
- срезы (sub-range views): TypeError
- отрицательные индексы: DigitRangeError, как и в NumberList

reverse() наследуется от MutableSequence и работает через __setitem__.
clear() сбрасывает основание к 2, как NumberList.clear().
"""

from collections.abc import MutableSequence
from typing import Iterator, Optional

from src.number.number_list import NumberList


def _reject_slice(index: object) -> None:
    if isinstance(index, slice):
        raise TypeError("DigitSequence does not support slices (sub-range views)")


class DigitSequence(MutableSequence):
    """MutableSequence поверх NumberList."""

    def __init__(self, number: NumberList):
        self._number = number

    @property
    def number(self) -> NumberList:
        return self._number

    def __len__(self) -> int:
        return len(self._number)

    def __iter__(self) -> Iterator[int]:
        return iter(self._number)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._number)

    def __contains__(self, digit: object) -> bool:
        return self._number.contains(digit)

    def __getitem__(self, index: int) -> int:
        _reject_slice(index)
        return self._number[index]

    def __setitem__(self, index: int, digit: int) -> None:
        _reject_slice(index)
        self._number.set(index, digit)

    def __delitem__(self, index: int) -> None:
        _reject_slice(index)
        self._number.remove_at(index)

    def insert(self, index: int, digit: int) -> None:
        self._number.insert(index, digit)

    def index(self, digit: object, start: int = 0, stop: Optional[int] = None) -> int:
        if start != 0 or stop is not None:
            raise TypeError("DigitSequence.index does not support start/stop bounds")
        position = self._number.index_of(digit)
        if position == -1:
            raise ValueError(f"{digit!r} is not in sequence")
        return position

    def pop(self, index: Optional[int] = None) -> int:
        """Удаление и возврат цифры; по умолчанию младшего разряда (tail)."""
        return self._number.remove_at(len(self._number) - 1 if index is None else index)

    def remove(self, digit: object) -> None:
        if not self._number.remove_value(digit):
            raise ValueError(f"{digit!r} is not in sequence")

    def clear(self) -> None:
        self._number.clear()

    def __repr__(self) -> str:
        return f"DigitSequence({self._number!r})"
