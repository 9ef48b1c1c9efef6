"""A first-in, first-out queue and an interleaving merge."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class Queue:
    """A FIFO queue; iteration runs from front to back."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: deque[Any] = deque(items) if items is not None else deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def front(self) -> Any:
        """Return the first value without removing it."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def back(self) -> Any:
        """Return the last value without removing it."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[-1]

    def push(self, value: Any) -> None:
        """Add a value at the back."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the value at the front."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def swap(self, other: Queue) -> None:
        """Exchange contents with another queue."""
        self._items, other._items = other._items, self._items

    def copy(self) -> Queue:
        """Return an independent copy."""
        return Queue(self._items)


def merge(first: Queue, second: Queue) -> Queue:
    """Drain both queues into a new one, taking from each in turn."""
    result = Queue()
    while first or second:
        if first:
            result.push(first.pop())
        if second:
            result.push(second.pop())
    return result