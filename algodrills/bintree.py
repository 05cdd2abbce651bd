"""Binary tree nodes and the helpers shared by the tree exercises."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence


@dataclass(eq=False)
class BTNode:
    """A binary tree node holding a value, two children and a parent link."""

    value: Any
    left: BTNode | None = None
    right: BTNode | None = None
    parent: BTNode | None = field(default=None, repr=False)


def create_bst(values: Sequence[Any]) -> BTNode | None:
    """Build a height-balanced tree from ``values``, which should already be sorted.

    The middle element of each range becomes the root of that range's subtree.
    Returns ``None`` for an empty sequence.
    """

    def build(start: int, end: int) -> BTNode | None:
        if start >= end:
            return None
        middle = (start + end) // 2
        node = BTNode(values[middle])
        node.left = build(start, middle)
        if node.left is not None:
            node.left.parent = node
        node.right = build(middle + 1, end)
        if node.right is not None:
            node.right.parent = node
        return node

    return build(0, len(values))


def node_count(node: BTNode | None) -> int:
    """Return the number of nodes in the tree rooted at ``node``."""
    if node is None:
        return 0
    return 1 + node_count(node.left) + node_count(node.right)


def height(node: BTNode | None) -> int:
    """Return the number of edges on the longest downward path from ``node``.

    An empty tree and a lone leaf both have height 0.
    """
    if node is None:
        return 0
    has_child = node.left is not None or node.right is not None
    return max(height(node.left), height(node.right)) + (1 if has_child else 0)


def in_order(node: BTNode | None) -> Iterator[Any]:
    """Yield the values of the tree in in-order sequence."""
    if node is None:
        return
    yield from in_order(node.left)
    yield node.value
    yield from in_order(node.right)


def rightmost(node: BTNode) -> BTNode:
    """Return the node reached by following right links from ``node``."""
    while node.right is not None:
        node = node.right
    return node


def find_node(node: BTNode | None, value: Any) -> BTNode | None:
    """Return the first node in pre-order whose value equals ``value``, or ``None``."""
    if node is None:
        return None
    if node.value == value:
        return node
    found = find_node(node.left, value)
    if found is not None:
        return found
    return find_node(node.right, value)


def format_levels(node: BTNode | None) -> str:
    """Render the tree level by level, preceded by its node count."""
    lines = [f"\nNode Count: {node_count(node)}"]
    queue: deque[BTNode] = deque([node] if node is not None else [])
    level = 0
    while queue:
        current = [queue.popleft() for _ in range(len(queue))]
        for item in current:
            if item.left is not None:
                queue.append(item.left)
            if item.right is not None:
                queue.append(item.right)
        lines.append(f"[{level}]: " + ", ".join(str(item.value) for item in current))
        level += 1
    if len(lines) == 1:
        return lines[0] + "\n"
    return "\n".join(lines)