"""Singly linked list with positional insertion, removal and reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice


@dataclass(eq=False)
class Node:
    """A list cell; nodes compare by identity."""

    data: int
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list addressed through its head node."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, data: int) -> Node:
        """Add ``data`` at the tail and return its node."""
        new = Node(data)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self.head = new
        else:
            last.next = new
        return new

    def insert_after(self, data: int, pos: int) -> Node:
        """Insert ``data`` right after the node at index ``pos``."""
        node = self.entry(pos)
        if node is None:
            raise IndexError(f"no node at position {pos}")
        new = Node(data, node.next)
        node.next = new
        return new

    def entry(self, pos: int) -> Node | None:
        """Return the node at index ``pos``, or None past the end."""
        if pos < 0:
            return None
        return next(islice(self._nodes(), pos, None), None)

    def remove(self, node: Node) -> None:
        """Unlink ``node`` from the list."""
        prev: Node | None = None
        for current in self._nodes():
            if current is node:
                if prev is None:
                    self.head = current.next
                else:
                    prev.next = current.next
                current.next = None
                return
            prev = current
        raise ValueError("node is not in the list")

    def push_front(self, data: int) -> Node:
        """Add ``data`` at the head and return its node."""
        self.head = Node(data, self.head)
        return self.head

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Node | None = None
        current = self.head
        while current is not None:
            current.next, prev, current = prev, current, current.next
        self.head = prev

    def clear(self) -> None:
        """Drop every node."""
        current = self.head
        self.head = None
        while current is not None:
            current.next, current = None, current.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return " -> ".join(str(value) for value in self)