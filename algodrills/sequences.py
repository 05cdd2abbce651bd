"""Insertion orders that produce a given binary search tree."""

from __future__ import annotations

from typing import Any, Sequence

from algodrills.bintree import BTNode, node_count


def swap_sequences(node: BTNode | None) -> list[list[Any]]:
    """Generate sequences by recursively swapping the order of two subtrees.

    This only swaps whole subtrees, so it does not produce every possible
    sequence; :func:`bst_sequences` does.
    """
    total = node_count(node)
    results: list[list[Any]] = []
    sequence: list[Any] = []

    def visit(current: BTNode | None) -> None:
        if current is None:
            return
        sequence.append(current.value)
        mark = len(sequence)
        if mark == total:
            results.append(list(sequence))
            return
        visit(current.left)
        visit(current.right)
        if current.left is not None and current.right is not None:
            del sequence[mark:]
            visit(current.right)
            visit(current.left)

    visit(node)
    return results


def weaves(first: Sequence[Any], second: Sequence[Any]) -> list[list[Any]]:
    """Return every interleaving of two sequences that keeps each one's order."""
    target = len(first) + len(second)
    results: list[list[Any]] = []
    buffer: list[Any] = []

    def weave(index1: int, index2: int) -> None:
        if len(buffer) >= target:
            results.append(list(buffer))
            return
        for i in range(index1, len(first)):
            buffer.append(first[i])
            weave(i + 1, index2)
            buffer.pop()
        for i in range(index2, len(second)):
            buffer.append(second[i])
            weave(index1, i + 1)
            buffer.pop()

    weave(0, 0)
    return results


def bst_sequences(node: BTNode | None) -> list[list[Any]]:
    """Return every insertion order that builds exactly the tree at ``node``."""
    if node is None:
        return [[]]
    left = bst_sequences(node.left)
    right = bst_sequences(node.right)
    return [
        [node.value, *woven]
        for left_seq in left
        for right_seq in right
        for woven in weaves(left_seq, right_seq)
    ]