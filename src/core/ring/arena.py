"""
NodeArena — хранилище узлов кольцевого двусвязного списка

Узлы не являются объектами с указателями друг на друга: каждый узел является
слот арены, адресуемый стабильным индексом. Ссылки next/prev хранятся как
индексы соседних слотов в параллельных списках.

- allocate(): O(1), переиспользует освобождённые слоты (free list)
- release(): O(1), слот возвращается в free list
- link(a, b): O(1) склейка a.next = b, b.prev = a

Арена не знает ни о head, ни о size: это забота DigitRing.
"""

from typing import List


class NodeArena:
    """Арена слотов: digit / next / prev по индексу слота."""

    def __init__(self):
        self._digits: List[int] = []
        self._next: List[int] = []
        self._prev: List[int] = []
        self._free: List[int] = []

    def allocate(self, digit: int) -> int:
        """
        Выделение слота под новый узел.

        Новый узел замкнут сам на себя (next == prev == slot), т.е. является
        кольцом из одного элемента до явной склейки.

        Returns:
            Индекс слота
        """
        if self._free:
            slot = self._free.pop()
            self._digits[slot] = digit
            self._next[slot] = slot
            self._prev[slot] = slot
            return slot

        slot = len(self._digits)
        self._digits.append(digit)
        self._next.append(slot)
        self._prev.append(slot)
        return slot

    def release(self, slot: int) -> None:
        """Возврат слота в free list."""
        self._free.append(slot)

    def clear(self) -> None:
        """Освобождение всех узлов разом."""
        self._digits.clear()
        self._next.clear()
        self._prev.clear()
        self._free.clear()

    def digit(self, slot: int) -> int:
        return self._digits[slot]

    def set_digit(self, slot: int, digit: int) -> None:
        self._digits[slot] = digit

    def next(self, slot: int) -> int:
        return self._next[slot]

    def prev(self, slot: int) -> int:
        return self._prev[slot]

    def link(self, first: int, second: int) -> None:
        """Склейка: first.next = second, second.prev = first."""
        self._next[first] = second
        self._prev[second] = first

    @property
    def live_count(self) -> int:
        """Количество занятых слотов."""
        return len(self._digits) - len(self._free)
