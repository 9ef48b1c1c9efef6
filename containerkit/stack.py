"""A last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Stack:
    """A LIFO stack; iteration runs from bottom to top."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = list(items) if items is not None else []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("stack is empty, there is no top element")
        return self._items[-1]

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("stack is empty, nothing to pop")
        return self._items.pop()

    def swap(self, other: Stack) -> None:
        """Exchange contents with another stack."""
        self._items, other._items = other._items, self._items

    def copy(self) -> Stack:
        """Return an independent copy."""
        return Stack(self._items)