"""Checks whether one binary tree appears as a subtree of another."""

from __future__ import annotations

from typing import Iterator

from algodrills.bintree import BTNode

_EMPTY_MARK = "X"


def _walk_with_empties(node: BTNode | None) -> Iterator[str]:
    if node is None:
        yield _EMPTY_MARK
        return
    yield from _walk_with_empties(node.left)
    yield str(node.value)
    yield from _walk_with_empties(node.right)


def pre_order_signature(node: BTNode | None) -> str:
    """Concatenate the tree's values in left, node, right order.

    Every empty child, and an empty tree itself, contributes an ``X`` marker.
    Values are joined without separators.
    """
    return "".join(_walk_with_empties(node))


def is_subtree_by_string(tree: BTNode | None, sub: BTNode | None) -> bool:
    """Decide containment by searching for ``sub``'s signature inside ``tree``'s."""
    return pre_order_signature(sub) in pre_order_signature(tree)


def trees_match(first: BTNode | None, second: BTNode | None) -> bool:
    """Compare two trees by their values along the left links.

    Two empty trees match and an empty tree never matches a non-empty one.
    Right subtrees are not compared.
    """
    while first is not None and second is not None:
        if first.value != second.value:
            return False
        first, second = first.left, second.left
    return first is second


def _nodes_in_order(node: BTNode | None) -> Iterator[BTNode]:
    if node is None:
        return
    yield from _nodes_in_order(node.left)
    yield node
    yield from _nodes_in_order(node.right)


def is_subtree(tree: BTNode | None, sub: BTNode | None) -> bool:
    """Decide containment by matching ``sub`` against each node of ``tree``.

    An empty ``sub`` is always contained.
    """
    if sub is None:
        return True
    return any(
        node.value == sub.value and trees_match(node, sub)
        for node in _nodes_in_order(tree)
    )