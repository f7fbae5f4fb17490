"""
DigitRing — кольцевой двусвязный список цифр

Структурный контейнер без числового значения: хранит последовательность
цифр, head (старший разряд) и size. Основанием и синхронизацией со значением
занимается NumberList (src.number.number_list).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. size == 0 ⇔ head is None
2. Из head ровно size шагов по next возвращают в head (один цикл длины size)
3. tail == prev(head); next(tail) == head
4. Ни один индекс слота не выдаётся наружу: доступ только по позиции
   или по значению цифры

СЛОЖНОСТЬ:
- node_at: O(size / 2), обход от head вперёд или от tail назад
- insert/remove в голову или хвост: O(1) + поиск позиции
- rotate: O(1)
- sort: O(size²) (пузырёк по кольцу, цифр обычно немного)
"""

from typing import Callable, Iterable, Iterator, List, Optional

from src.core.errors import DigitRangeError
from src.core.radix import is_integer, validate_index
from src.core.ring.arena import NodeArena


class DigitRing:
    """
    Кольцевая последовательность цифр поверх NodeArena.

    Позиция 0 = head (старший разряд), позиция size - 1 = tail.
    """

    def __init__(self, digits: Iterable[int] = ()):
        self._arena = NodeArena()
        self._head: Optional[int] = None
        self._size = 0

        for digit in digits:
            self.append(digit)

    # -------------------------------------------------------------------------
    # Read-only accessors
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    @property
    def size(self) -> int:
        return self._size

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    def __iter__(self) -> Iterator[int]:
        """Ленивый обход head → tail; ровно size цифр."""
        slot = self._head
        for _ in range(self._size):
            yield self._arena.digit(slot)
            slot = self._arena.next(slot)

    def __reversed__(self) -> Iterator[int]:
        """Ленивый обход tail → head."""
        if self._head is None:
            return
        slot = self._arena.prev(self._head)
        for _ in range(self._size):
            yield self._arena.digit(slot)
            slot = self._arena.prev(slot)

    def __repr__(self) -> str:
        return f"DigitRing({list(self)!r})"

    def digit_at(self, index: int) -> int:
        return self._arena.digit(self.node_at(index))

    def index_of(self, digit: int) -> int:
        """Первая позиция digit при обходе head → tail, -1 если нет."""
        for index, current in enumerate(self):
            if current == digit:
                return index
        return -1

    def last_index_of(self, digit: int) -> int:
        """Первая позиция digit при обходе tail → head, -1 если нет."""
        for offset, current in enumerate(reversed(self)):
            if current == digit:
                return self._size - 1 - offset
        return -1

    def contains(self, digit: int) -> bool:
        return self.index_of(digit) != -1

    def to_list(self) -> List[int]:
        return list(self)

    # -------------------------------------------------------------------------
    # Positioning
    # -------------------------------------------------------------------------

    def check_index(self, index: int) -> None:
        """
        Проверка позиции элемента.

        Raises:
            DigitRangeError: Если index не целое или вне [0, size)
        """
        validate_index(index)
        if not 0 <= index < self._size:
            raise DigitRangeError(f"index: {index}, size: {self._size}")

    def check_insert_index(self, index: int) -> None:
        """
        Проверка позиции вставки.

        Raises:
            DigitRangeError: Если index не целое или вне [0, size]
        """
        validate_index(index)
        if not 0 <= index <= self._size:
            raise DigitRangeError(f"insert index: {index}, size: {self._size}")

    def node_at(self, index: int) -> int:
        """
        Слот узла на позиции index.

        Направление обхода выбирается по близости: от head вперёд для первой
        половины, от tail назад для второй.

        Raises:
            DigitRangeError: Если index не целое или вне [0, size)
        """
        self.check_index(index)

        if index < self._size // 2:
            slot = self._head
            for _ in range(index):
                slot = self._arena.next(slot)
        else:
            slot = self._arena.prev(self._head)
            for _ in range(self._size - 1 - index):
                slot = self._arena.prev(slot)
        return slot

    # -------------------------------------------------------------------------
    # Structural mutations (значение НЕ пересчитывается здесь)
    # -------------------------------------------------------------------------

    def append(self, digit: int) -> None:
        """Добавление цифры в хвост."""
        self._splice_before_head(self._arena.allocate(digit))

    def insert(self, index: int, digit: int) -> None:
        """
        Вставка цифры так, чтобы она оказалась на позиции index.

        Args:
            index: Позиция в [0, size]
            digit: Цифра (валидируется вызывающим)

        Raises:
            DigitRangeError: Если index не целое или вне [0, size]
        """
        self.check_insert_index(index)

        if self._size == 0 or index == self._size:
            # Пустое кольцо или хвост: новый узел встаёт перед head
            self._splice_before_head(self._arena.allocate(digit))
            return

        if index == 0:
            self._splice_before_head(self._arena.allocate(digit))
            self._head = self._arena.prev(self._head)
            return

        current = self.node_at(index)
        slot = self._arena.allocate(digit)
        self._arena.link(self._arena.prev(current), slot)
        self._arena.link(slot, current)
        self._size += 1

    def remove_at(self, index: int) -> int:
        """
        Удаление узла на позиции index.

        Returns:
            Удалённая цифра

        Raises:
            DigitRangeError: Если index не целое или вне [0, size)
        """
        slot = self.node_at(index)
        digit = self._arena.digit(slot)
        self._detach(slot)
        return digit

    def remove_value(self, digit: int) -> bool:
        """
        Удаление первого узла с цифрой digit (head → tail).

        Returns:
            True если узел найден и удалён, False иначе (не ошибка)
        """
        slot = self._head
        for _ in range(self._size):
            if self._arena.digit(slot) == digit:
                self._detach(slot)
                return True
            slot = self._arena.next(slot)
        return False

    def remove_if(self, predicate: Callable[[int], bool]) -> int:
        """
        Удаление всех узлов, цифра которых удовлетворяет predicate.

        Returns:
            Количество удалённых узлов
        """
        removed = 0
        slot = self._head
        for _ in range(self._size):
            following = self._arena.next(slot)
            if predicate(self._arena.digit(slot)):
                self._detach(slot)
                removed += 1
            slot = following
        return removed

    def set(self, index: int, digit: int) -> int:
        """
        Замена цифры на позиции index.

        Returns:
            Предыдущая цифра
        """
        slot = self.node_at(index)
        previous = self._arena.digit(slot)
        self._arena.set_digit(slot, digit)
        return previous

    def swap(self, first: int, second: int) -> bool:
        """
        Обмен цифр (не узлов) на двух позициях.

        Returns:
            False если любой индекс вне диапазона, True иначе
            (включая first == second)
        """
        if not (is_integer(first) and is_integer(second)):
            return False
        if not (0 <= first < self._size and 0 <= second < self._size):
            return False
        if first == second:
            return True

        slot_a = self.node_at(first)
        slot_b = self.node_at(second)
        digit_a = self._arena.digit(slot_a)
        self._arena.set_digit(slot_a, self._arena.digit(slot_b))
        self._arena.set_digit(slot_b, digit_a)
        return True

    def rotate_left(self) -> None:
        """head → head.next; цифры и узлы не меняются."""
        if self._head is not None:
            self._head = self._arena.next(self._head)

    def rotate_right(self) -> None:
        """head → head.prev; цифры и узлы не меняются."""
        if self._head is not None:
            self._head = self._arena.prev(self._head)

    def sort(self, descending: bool = False) -> None:
        """
        Пузырьковая сортировка цифр на месте.

        Проходы от head до tail со сравнением соседей повторяются, пока проход
        не завершится без обменов. Равные цифры не меняются местами
        (сортировка устойчива).
        """
        if self._size < 2:
            return

        arena = self._arena
        swapped = True
        while swapped:
            swapped = False
            slot = self._head
            for _ in range(self._size - 1):
                following = arena.next(slot)
                current, neighbour = arena.digit(slot), arena.digit(following)
                out_of_order = current < neighbour if descending else current > neighbour
                if out_of_order:
                    arena.set_digit(slot, neighbour)
                    arena.set_digit(following, current)
                    swapped = True
                slot = following

    def clear(self) -> None:
        """Удаление всех узлов; кольцо становится пустым."""
        self._arena.clear()
        self._head = None
        self._size = 0

    # -------------------------------------------------------------------------
    # Internal splicing
    # -------------------------------------------------------------------------

    def _splice_before_head(self, slot: int) -> None:
        """Склейка узла между tail и head (т.е. в хвост)."""
        if self._head is None:
            self._head = slot
            self._size = 1
            return

        tail = self._arena.prev(self._head)
        self._arena.link(tail, slot)
        self._arena.link(slot, self._head)
        self._size += 1

    def _detach(self, slot: int) -> None:
        """Отсоединение узла: соседи склеиваются, head сдвигается при необходимости."""
        if self._size == 1:
            self.clear()
            return

        following = self._arena.next(slot)
        self._arena.link(self._arena.prev(slot), following)
        if slot == self._head:
            self._head = following
        self._arena.release(slot)
        self._size -= 1
