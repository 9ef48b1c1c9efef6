"""A growable array with explicit, observable capacity management."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Vector:
    """A dynamic array whose capacity grows as ``2 * size + 1`` when full."""

    def __init__(
        self,
        items: Iterable[Any] | None = None,
        *,
        size: int = 0,
        fill: Any = None,
    ) -> None:
        if size < 0:
            raise ValueError("size can't be negative")
        if items is not None:
            if size:
                raise ValueError("give either items or size, not both")
            self._items = list(items)
        else:
            self._items = [fill] * size
        self._fill = fill
        self._capacity = len(self._items) * 2 + 1

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError("vector indices must be integers")
        if not 0 <= index < len(self._items):
            raise IndexError("index out of range")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._items[self._check_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._check_index(index)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def resize(self, new_capacity: int) -> None:
        """Set the capacity, truncating the contents if it shrinks below the size."""
        if new_capacity < 0:
            raise ValueError("capacity can't be negative")
        self._capacity = new_capacity
        del self._items[new_capacity:]

    def append(self, value: Any) -> None:
        """Add a value at the end, growing the capacity when full."""
        if len(self._items) == self._capacity:
            self.resize(len(self._items) * 2 + 1)
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the last value."""
        if not self._items:
            raise IndexError("pop from empty vector")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every value, keeping the capacity."""
        self._items.clear()

    def insert(self, pos: int, value: Any) -> None:
        """Insert a value before the existing element at ``pos``."""
        self._check_index(pos)
        self.append(value)
        self._items.insert(pos, self._items.pop())

    def erase(self, pos: int) -> Any:
        """Remove and return the element at ``pos``."""
        return self._items.pop(self._check_index(pos))

    def info(self) -> str:
        """Describe the size and capacity."""
        return f"Size: {len(self._items)} , Capacity: {self._capacity}"