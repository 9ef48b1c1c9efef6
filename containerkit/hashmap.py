"""An unordered map using separate chaining and doubling rehash."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

_DEFAULT_BUCKETS = 7
_MAX_LOAD = 4


class HashMap:
    """A hash map whose bucket count doubles once it holds four entries per bucket.

    With a ``default_factory``, reading a missing key inserts and returns a
    fresh default value; without one, reading a missing key raises KeyError.
    """

    def __init__(
        self,
        bucket_count: int = _DEFAULT_BUCKETS,
        default_factory: Callable[[], Any] | None = None,
    ) -> None:
        if bucket_count <= 0:
            raise ValueError("bucket count must be positive")
        self.default_factory = default_factory
        self._buckets: list[list[list[Any]]] = [[] for _ in range(bucket_count)]
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def bucket_count(self) -> int:
        """Return the number of buckets currently in use."""
        return len(self._buckets)

    def _bucket(self, key: Any) -> list[list[Any]]:
        return self._buckets[hash(key) % len(self._buckets)]

    def _entry(self, key: Any) -> list[Any] | None:
        for entry in self._bucket(key):
            if entry[0] == key:
                return entry
        return None

    def _rehash(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(len(old) * 2)]
        for bucket in old:
            for entry in bucket:
                self._bucket(entry[0]).append(entry)

    def _add(self, key: Any, value: Any) -> list[Any]:
        entry = [key, value]
        self._bucket(key).append(entry)
        self._size += 1
        if self._size >= _MAX_LOAD * len(self._buckets):
            self._rehash()
        return entry

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.items())

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in bucket order."""
        for bucket in self._buckets:
            for key, value in bucket:
                yield key, value

    def __contains__(self, key: Any) -> bool:
        return self._entry(key) is not None

    def __getitem__(self, key: Any) -> Any:
        entry = self._entry(key)
        if entry is not None:
            return entry[1]
        if self.default_factory is None:
            raise KeyError(key)
        return self._add(key, self.default_factory())[1]

    def __setitem__(self, key: Any, value: Any) -> None:
        entry = self._entry(key)
        if entry is not None:
            entry[1] = value
        else:
            self._add(key, value)

    def find(self, key: Any) -> tuple[Any, Any] | None:
        """Return the ``(key, value)`` pair for ``key``, or None if absent."""
        entry = self._entry(key)
        return None if entry is None else (entry[0], entry[1])

    def insert(self, key: Any, value: Any) -> bool:
        """Add ``key`` with ``value`` unless present; return whether it was added."""
        if self._entry(key) is not None:
            return False
        self._add(key, value)
        return True

    def erase(self, key: Any) -> bool:
        """Remove ``key``; return whether it was present."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                self._size -= 1
                return True
        return False

    def __delitem__(self, key: Any) -> None:
        if not self.erase(key):
            raise KeyError(key)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"HashMap({{{body}}})"

    def swap(self, other: HashMap) -> None:
        """Exchange contents with another map."""
        self._buckets, other._buckets = other._buckets, self._buckets
        self._size, other._size = other._size, self._size

    def clear(self) -> None:
        """Remove every entry, keeping the bucket count."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def copy(self) -> HashMap:
        """Return an independent copy with the same buckets and default factory."""
        result = HashMap(len(self._buckets), self.default_factory)
        result._buckets = [[list(entry) for entry in bucket] for bucket in self._buckets]
        result._size = self._size
        return result