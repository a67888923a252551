"""Operations on bare singly linked nodes: group reversal and rotation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """A list cell; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = field(default=None, repr=False)


def _walk(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def _link(nodes: list[ListNode]) -> ListNode | None:
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    if nodes:
        nodes[-1].next = None
        return nodes[0]
    return None


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a list from ``values`` and return its head."""
    return _link([ListNode(value) for value in values])


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _walk(head)]


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each run of ``k`` nodes; a shorter trailing run stays as is."""
    if k < 1:
        raise ValueError(f"group size must be positive, got {k}")
    nodes = list(_walk(head))
    full = len(nodes) - len(nodes) % k
    order: list[ListNode] = []
    for start in range(0, full, k):
        order.extend(reversed(nodes[start : start + k]))
    order.extend(nodes[full:])
    return _link(order)


def rotate_right(head: ListNode | None, k: int) -> ListNode:
    """Rotate the list ``k`` places to the right and return the new head."""
    nodes = list(_walk(head))
    if not nodes:
        raise ValueError("cannot rotate an empty list")
    size = len(nodes)
    k %= size
    if k == 0:
        return nodes[0]
    nodes[-1].next = nodes[0]
    nodes[size - k - 1].next = None
    return nodes[size - k]