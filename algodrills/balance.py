"""Checks whether a binary tree is height-balanced."""

from __future__ import annotations

from algodrills.bintree import BTNode, height


def is_balanced_naive(node: BTNode | None) -> bool:
    """Check balance by recomputing subtree heights at every node."""
    if node is None:
        return True
    return (
        abs(height(node.left) - height(node.right)) <= 1
        and is_balanced_naive(node.left)
        and is_balanced_naive(node.right)
    )


def _height_and_balance(node: BTNode | None) -> tuple[int, bool]:
    if node is None:
        return 0, True
    left_height, left_ok = _height_and_balance(node.left)
    right_height, right_ok = _height_and_balance(node.right)
    has_child = node.left is not None or node.right is not None
    node_height = max(left_height, right_height) + (1 if has_child else 0)
    balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
    return node_height, balanced


def is_balanced(node: BTNode | None) -> bool:
    """Check balance in a single pass that carries heights upwards."""
    return _height_and_balance(node)[1]