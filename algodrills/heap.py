"""A bounded binary max-heap ordered by a comparison function."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

Compare = Callable[[Any, Any], int]


def _natural_compare(value: Any, other: Any) -> int:
    return (value > other) - (value < other)


class Heap:
    """A max-heap with a fixed capacity.

    ``compare(a, b)`` returns a negative number when ``a`` ranks below ``b``,
    zero when they are equal and a positive number otherwise; the highest
    ranked element sits at the root. The initial items are not arranged
    until :meth:`build` is called.
    """

    def __init__(
        self,
        items: Iterable[Any] = (),
        capacity: Optional[int] = None,
        compare: Optional[Compare] = None,
    ) -> None:
        self._items = list(items)
        self.capacity = len(self._items) if capacity is None else capacity
        if len(self._items) > self.capacity:
            raise ValueError(
                f"{len(self._items)} items do not fit in a capacity of {self.capacity}"
            )
        self._compare = compare or _natural_compare

    def __len__(self) -> int:
        return len(self._items)

    def _swap(self, first: int, second: int) -> None:
        items = self._items
        items[first], items[second] = items[second], items[first]

    def _sift_down(self, parent: int, limit: int) -> None:
        items, cmp = self._items, self._compare
        while True:
            left = 2 * parent + 1
            right = left + 1
            largest = parent
            if left < limit and cmp(items[largest], items[left]) < 0:
                largest = left
            if right < limit and cmp(items[largest], items[right]) < 0:
                largest = right
            if largest == parent:
                return
            self._swap(parent, largest)
            parent = largest

    def _sift_up(self, index: int) -> None:
        items, cmp = self._items, self._compare
        while index > 0:
            parent = (index - 1) // 2
            if cmp(items[parent], items[index]) >= 0:
                return
            self._swap(parent, index)
            index = parent

    def build(self) -> None:
        """Arrange all items into heap order."""
        for index in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(index, len(self._items))

    def heapify(self, parent: int) -> None:
        """Sift the item at zero-based position ``parent`` down into place."""
        if not 0 <= parent < len(self._items):
            raise IndexError(f"heap position {parent} is out of range")
        self._sift_down(parent, len(self._items))

    def pop_root(self) -> Any:
        """Remove and return the highest ranked item."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        self._swap(0, len(self._items) - 1)
        root = self._items.pop()
        if self._items:
            self._sift_down(0, len(self._items))
        return root

    def insert(self, value: Any) -> None:
        """Add ``value``, raising ``OverflowError`` when the heap is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError(f"heap is full at capacity {self.capacity}")
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def remove(self, value: Any) -> Any:
        """Remove and return the first item that compares equal to ``value``.

        Raises ``ValueError`` when no item matches.
        """
        for index, item in enumerate(self._items):
            if self._compare(value, item) == 0:
                break
        else:
            raise ValueError(f"{value!r} is not in the heap")
        last = len(self._items) - 1
        self._swap(index, last)
        removed = self._items.pop()
        if index < len(self._items):
            self._sift_down(index, len(self._items))
            self._sift_up(index)
        return removed

    def sort(self) -> list[Any]:
        """Sort the items in place from lowest to highest rank and return them.

        The items keep their count but are no longer in heap order; call
        :meth:`build` before using the heap again.
        """
        self.build()
        for end in range(len(self._items) - 1, 0, -1):
            self._swap(0, end)
            self._sift_down(0, end)
        return list(self._items)