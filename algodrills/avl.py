"""A self-balancing binary search tree kept in shape by rotations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]


def _natural_compare(value: Any, other: Any) -> int:
    return (value > other) - (value < other)


@dataclass(eq=False)
class AVLNode:
    """A tree node with a value, two children and a parent link."""

    value: Any
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    parent: Optional[AVLNode] = field(default=None, repr=False)

    def in_order(self) -> Iterator[Any]:
        """Yield the values of the subtree rooted here in in-order sequence."""
        stack: list[AVLNode] = []
        current: Optional[AVLNode] = self
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.value
            current = current.right


def subtree_height(node: AVLNode | None) -> int:
    """Return the number of nodes on the longest downward path from ``node``."""
    if node is None:
        return 0
    return max(subtree_height(node.left), subtree_height(node.right)) + 1


def _replace_in_parent(node: AVLNode, replacement: AVLNode | None) -> None:
    parent = node.parent
    if parent is None:
        return
    if parent.left is node:
        parent.left = replacement
    else:
        parent.right = replacement


def _rotate_left(node: AVLNode) -> AVLNode:
    _replace_in_parent(node, node.right)
    pivot = node.right
    if pivot is None:
        return node
    pivot.parent = node.parent
    inner = pivot.left
    pivot.left = node
    node.parent = pivot
    node.right = inner
    if inner is not None:
        inner.parent = node
    return pivot


def _rotate_right(node: AVLNode) -> AVLNode:
    _replace_in_parent(node, node.left)
    pivot = node.left
    if pivot is None:
        return node
    pivot.parent = node.parent
    inner = pivot.right
    pivot.right = node
    node.parent = pivot
    node.left = inner
    if inner is not None:
        inner.parent = node
    return pivot


def insert(root: AVLNode | None, value: Any, compare: Compare | None = None) -> AVLNode:
    """Insert ``value`` below ``root`` and return the subtree's new root.

    ``compare(value, other)`` returns a positive number when ``value`` sorts
    after ``other``; values that do not sort after go to the left. When a
    subtree's heights differ by more than one, it is rotated once.
    """
    cmp = compare or _natural_compare
    if root is None:
        return AVLNode(value)

    if cmp(value, root.value) > 0:
        if root.right is None:
            root.right = AVLNode(value, parent=root)
            return root
        root.right = insert(root.right, value, cmp)
    else:
        if root.left is None:
            root.left = AVLNode(value, parent=root)
            return root
        root.left = insert(root.left, value, cmp)

    diff = subtree_height(root.left) - subtree_height(root.right)
    if diff < -1:
        root = _rotate_left(root)
    elif diff > 1:
        root = _rotate_right(root)
    return root