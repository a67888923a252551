"""A growable array that tracks its own capacity, doubling when full."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 8


class Vector:
    """Sequence with explicit capacity: starts at 8 slots and doubles on demand."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._capacity = 0

    @property
    def capacity(self) -> int:
        """Number of slots reserved."""
        return self._capacity

    def reserve(self, capacity: int) -> None:
        """Make room for at least ``capacity`` elements; never shrinks."""
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = max(self._capacity, capacity)

    def _expand(self) -> None:
        if self._capacity == 0:
            self._capacity = DEFAULT_CAPACITY
        elif len(self._items) == self._capacity:
            self._capacity *= 2

    def push_back(self, value: Any) -> None:
        """Append ``value``, growing the capacity if needed."""
        self._expand()
        self._items.append(value)

    def insert_at(self, pos: int, value: Any) -> None:
        """Insert ``value`` before index ``pos``; ``pos`` may equal the length."""
        if not 0 <= pos <= len(self._items):
            raise IndexError(f"insert position {pos} out of range")
        self._expand()
        self._items.insert(pos, value)

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError("front of an empty vector")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("back of an empty vector")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"