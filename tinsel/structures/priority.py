"""Priority-ordered queue and stack.

Both containers hand out the lowest priority value first. They differ only in
how they order items sharing a priority: the queue is first-in first-out, the
stack last-in first-out.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Generic, Iterable, List, Tuple, TypeVar


T = TypeVar("T")


class _PriorityContainer(Generic[T]):
    # Heap entries are (priority, sequence, value); ``sequence`` orders equal
    # priorities and keeps values from ever being compared.
    _sign = 1

    def __init__(self, values: Iterable[Tuple[T, int]] = ()) -> None:
        self._heap: List[Tuple[int, int, T]] = []
        self._counter = count()
        for value, priority in values:
            self._add(value, priority)

    def _add(self, value: T, priority: int) -> None:
        heappush(self._heap, (priority, self._sign * next(self._counter), value))

    def _take(self) -> T:
        if not self._heap:
            raise IndexError(f"{type(self).__name__} is empty")
        return heappop(self._heap)[2]

    def _top(self) -> T:
        if not self._heap:
            raise IndexError(f"{type(self).__name__} is empty")
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class PriorityQueue(_PriorityContainer[T]):
    """Lowest priority first, FIFO among equal priorities."""

    def enqueue(self, value: T, priority: int) -> None:
        self._add(value, priority)

    def dequeue(self) -> T:
        return self._take()

    def peek(self) -> T:
        return self._top()


class PriorityStack(_PriorityContainer[T]):
    """Lowest priority first, LIFO among equal priorities."""

    _sign = -1

    def push(self, value: T, priority: int) -> None:
        self._add(value, priority)

    def pop(self) -> T:
        return self._take()

    def peek(self) -> T:
        return self._top()


__all__ = ["PriorityQueue", "PriorityStack"]
