"""First common ancestor of two nodes in a tree with parent links."""

from __future__ import annotations

from algodrills.bintree import BTNode


def depth(node: BTNode | None) -> int:
    """Return the number of parent links between ``node`` and its root."""
    steps = 0
    while node is not None and node.parent is not None:
        node = node.parent
        steps += 1
    return steps


def move_up(node: BTNode, steps: int) -> BTNode:
    """Follow ``steps`` parent links from ``node``.

    Raises ``ValueError`` if the root is passed before all steps are taken.
    """
    current: BTNode | None = node
    for _ in range(steps):
        if current is None:
            break
        current = current.parent
    if current is None:
        raise ValueError(f"cannot climb {steps} steps from node {node.value!r}")
    return current


def contains(tree: BTNode | None, node: BTNode | None) -> bool:
    """Return whether ``node`` itself (by identity) is part of ``tree``."""
    if tree is None:
        return False
    if tree is node:
        return True
    return contains(tree.left, node) or contains(tree.right, node)


def common_ancestor(tree: BTNode | None, first: BTNode, second: BTNode) -> BTNode:
    """Return the common ancestor of two nodes by climbing their parent links.

    Both nodes are first brought to the same depth, then climbed together
    until they share a parent; that parent is returned, or the node itself
    when it is a root.
    """
    first_depth = depth(first)
    second_depth = depth(second)
    if second_depth > first_depth:
        second = move_up(second, second_depth - first_depth)
    elif first_depth > second_depth:
        first = move_up(first, first_depth - second_depth)
    while first.parent is not second.parent:
        first = first.parent
        second = second.parent
    return first.parent if first.parent is not None else first