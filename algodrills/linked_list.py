"""A singly linked list of nodes and the classic operations on it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Compare = Callable[[Any, Any], int]


def _natural_compare(value: Any, other: Any) -> int:
    return (value > other) - (value < other)


@dataclass(eq=False)
class ListNode:
    """A list node holding a value and a link to the next node."""

    value: Any
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[ListNode]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def values(node: ListNode | None) -> list[Any]:
    """Return the values from ``node`` to the end of the list."""
    return [] if node is None else [item.value for item in node]


def length(node: ListNode | None) -> int:
    """Return the number of nodes from ``node`` to the end of the list."""
    return 0 if node is None else sum(1 for _ in node)


def insert_front(node: ListNode, value: Any) -> ListNode:
    """Insert ``value`` directly after ``node`` and return the new node."""
    node.next = ListNode(value, node.next)
    return node.next


def insert_after(node: ListNode | None, after: Any, value: Any) -> ListNode | None:
    """Insert ``value`` after the first node whose value equals ``after``.

    Returns the new node, or ``None`` when no node matches.
    """
    if node is None:
        return None
    for item in node:
        if item.value == after:
            return insert_front(item, value)
    return None


def insert_last(node: ListNode, value: Any) -> ListNode:
    """Append ``value`` at the end of the list and return the new node."""
    last = node
    while last.next is not None:
        last = last.next
    return insert_front(last, value)


def nth_from_end(node: ListNode | None, n: int) -> ListNode:
    """Return the ``n``-th node counted from the end, the last one being 1.

    Raises ``IndexError`` when the list has fewer than ``n`` nodes or ``n`` < 1.
    """
    if n < 1:
        raise IndexError(f"position {n} from the end is out of range")
    lead = node
    for _ in range(n - 1):
        if lead is None:
            break
        lead = lead.next
    if lead is None or node is None:
        raise IndexError(f"position {n} from the end is out of range")
    trail = node
    while lead.next is not None:
        lead = lead.next
        trail = trail.next
    return trail


def reverse(node: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    previous: ListNode | None = None
    while node is not None:
        following = node.next
        node.next = previous
        previous = node
        node = following
    return previous


def _merge(first: ListNode | None, second: ListNode | None, cmp: Compare) -> ListNode | None:
    anchor = ListNode(None)
    tail = anchor
    while first is not None and second is not None:
        if cmp(first.value, second.value) < 0:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def sort(node: ListNode | None, compare: Compare | None = None) -> ListNode | None:
    """Merge-sort the list in place and return its new head.

    ``compare(a, b)`` returns a negative number when ``a`` sorts before ``b``.
    """
    cmp = compare or _natural_compare
    count = length(node)
    if count <= 1:
        return node
    middle = node
    for _ in range((count - 1) // 2):
        middle = middle.next
    right = middle.next
    middle.next = None
    left = sort(node, cmp)
    right = sort(right, cmp)
    if cmp(left.value, right.value) <= 0:
        return _merge(left, right, cmp)
    return _merge(right, left, cmp)