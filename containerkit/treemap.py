"""An ordered map backed by an unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    key: Any
    value: Any
    parent: _Node | None = None
    left: _Node | None = None
    right: _Node | None = None


class TreeMap:
    """A map kept in key order.

    With a ``default_factory``, reading a missing key inserts and returns a
    fresh default value; without one, reading a missing key raises KeyError.
    """

    def __init__(self, default_factory: Callable[[], Any] | None = None) -> None:
        self.default_factory = default_factory
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node]:
        pending: list[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node
            node = node.right

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._nodes())

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        return ((node.key, node.value) for node in self._nodes())

    def _find(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node
        return None

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def _insert(self, key: Any, value: Any) -> _Node:
        parent: _Node | None = None
        node = self._root
        while node is not None:
            parent = node
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                node.value = value
                return node
        created = _Node(key, value, parent=parent)
        if parent is None:
            self._root = created
        elif key < parent.key:
            parent.left = created
        else:
            parent.right = created
        self._size += 1
        return created

    def __getitem__(self, key: Any) -> Any:
        node = self._find(key)
        if node is not None:
            return node.value
        if self.default_factory is None:
            raise KeyError(key)
        return self._insert(key, self.default_factory()).value

    def __setitem__(self, key: Any, value: Any) -> None:
        self._insert(key, value)

    def _replace(self, node: _Node, child: _Node | None) -> None:
        parent = node.parent
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent

    def erase(self, key: Any) -> bool:
        """Remove ``key``; return whether it was present."""
        node = self._find(key)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            node = successor
        self._replace(node, node.left if node.left is not None else node.right)
        node.parent = node.left = node.right = None
        self._size -= 1
        return True

    def __delitem__(self, key: Any) -> None:
        if not self.erase(key):
            raise KeyError(key)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"TreeMap({{{body}}})"

    def swap(self, other: TreeMap) -> None:
        """Exchange contents with another map."""
        self._root, other._root = other._root, self._root
        self._size, other._size = other._size, self._size

    def clear(self) -> None:
        """Remove every entry."""
        self._root = None
        self._size = 0

    def lower_bound(self, key: Any) -> tuple[Any, Any] | None:
        """Return the first ``(key, value)`` whose key is not less than ``key``, or None."""
        candidate: _Node | None = None
        node = self._root
        while node is not None:
            if node.key < key:
                node = node.right
            elif key < node.key:
                candidate = node
                node = node.left
            else:
                return node.key, node.value
        return None if candidate is None else (candidate.key, candidate.value)

    def copy(self) -> TreeMap:
        """Return an independent copy with the same shape and default factory."""
        result = TreeMap(self.default_factory)
        if self._root is None:
            return result
        result._root = _Node(self._root.key, self._root.value)
        pending = [(self._root, result._root)]
        while pending:
            source, target = pending.pop()
            if source.left is not None:
                target.left = _Node(source.left.key, source.left.value, parent=target)
                pending.append((source.left, target.left))
            if source.right is not None:
                target.right = _Node(source.right.key, source.right.value, parent=target)
                pending.append((source.right, target.right))
        result._size = self._size
        return result