"""A doubly linked list with positional insertion and removal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    value: Any
    prev: _Node | None = None
    next: _Node | None = None


class LinkedList:
    """A doubly linked list; positions are zero-based and non-negative."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        if items is not None:
            for item in items:
                self.append(item)

    @classmethod
    def filled(cls, count: int = 0, fill: Any = None) -> LinkedList:
        """Return a list of ``count`` copies of ``fill``."""
        if count < 0:
            raise ValueError("count can't be negative")
        return cls(fill for _ in range(count))

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def _node_at(self, index: int) -> _Node:
        if not isinstance(index, int):
            raise TypeError("list indices must be integers")
        if not 0 <= index < self._size:
            raise IndexError("index out of range")
        if index <= self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def __getitem__(self, index: int) -> Any:
        return self._node_at(index).value

    def __setitem__(self, index: int, value: Any) -> None:
        self._node_at(index).value = value

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def appendleft(self, value: Any) -> None:
        """Add a value at the front."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def pop(self) -> Any:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("list is empty, nothing to pop")
        return self._unlink(self._tail)

    def popleft(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("list is empty, nothing to pop")
        return self._unlink(self._head)

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` before the existing element at ``index``."""
        target = self._node_at(index)
        if target.prev is None:
            self.appendleft(value)
            return
        node = _Node(value, prev=target.prev, next=target)
        target.prev.next = node
        target.prev = node
        self._size += 1

    def erase(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        return self._unlink(self._node_at(index))

    def erase_range(self, start: int, stop: int) -> None:
        """Remove the elements from ``start`` up to, not including, ``stop``."""
        if not 0 <= start <= stop <= self._size:
            raise IndexError("range out of bounds")
        if start == stop:
            return
        node = self._node_at(start)
        for _ in range(stop - start):
            following = node.next
            self._unlink(node)
            node = following

    def copy(self) -> LinkedList:
        """Return an independent copy."""
        return LinkedList(self)