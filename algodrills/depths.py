"""Lists of a binary tree's nodes grouped by depth."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from algodrills.bintree import BTNode


def depth_lists_bfs(node: BTNode | None) -> list[list[BTNode]]:
    """Group the tree's nodes by depth using a level-by-level queue walk.

    Each inner list holds one depth's nodes from left to right; the root's
    level comes first. An empty tree gives an empty list.
    """
    levels: list[list[BTNode]] = []
    queue: deque[BTNode] = deque([node] if node is not None else [])
    while queue:
        level = [queue.popleft() for _ in range(len(queue))]
        levels.append(level)
        for item in level:
            if item.left is not None:
                queue.append(item.left)
            if item.right is not None:
                queue.append(item.right)
    return levels


def pre_order_with_depth(node: BTNode | None) -> Iterator[tuple[BTNode, int]]:
    """Yield ``(node, depth)`` pairs in pre-order, the root being at depth 0."""
    stack: list[tuple[BTNode, int]] = [(node, 0)] if node is not None else []
    while stack:
        current, depth = stack.pop()
        yield current, depth
        if current.right is not None:
            stack.append((current.right, depth + 1))
        if current.left is not None:
            stack.append((current.left, depth + 1))


def depth_lists_preorder(node: BTNode | None) -> list[list[BTNode]]:
    """Group the tree's nodes by depth using a pre-order walk.

    Pre-order is needed because a depth's list is created the first time
    that depth is reached, and every shallower depth must already exist.
    """
    levels: list[list[BTNode]] = []
    for current, depth in pre_order_with_depth(node):
        if len(levels) < depth + 1:
            levels.append([current])
        else:
            levels[depth].append(current)
    return levels