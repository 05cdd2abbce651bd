import random

import pytest

from algodrills.balance import is_balanced, is_balanced_naive
from algodrills.bintree import BTNode, create_bst, rightmost

SOURCE_VALUES = sorted([100, 2, 3, 4, 0, 45, 32, 56, 7, 8, 10, -1, 2, -4])
CHECKS = [is_balanced_naive, is_balanced]


def _insert(root, value):
    if root is None:
        return BTNode(value)
    node = root
    while True:
        if value <= node.value:
            if node.left is None:
                node.left = BTNode(value, parent=node)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = BTNode(value, parent=node)
                return root
            node = node.right


@pytest.mark.parametrize("check", CHECKS)
def test_built_bst_is_balanced(check):
    assert check(create_bst(SOURCE_VALUES)) is True


@pytest.mark.parametrize("check", CHECKS)
def test_empty_and_single_are_balanced(check):
    assert check(None) is True
    assert check(BTNode(1)) is True


@pytest.mark.parametrize("check", CHECKS)
def test_appended_chain_is_unbalanced(check):
    root = create_bst(SOURCE_VALUES)
    node = rightmost(root)
    for value in (2355, 5443, -443, -6490):
        node.right = BTNode(value, parent=node)
        node = node.right
    assert check(root) is False


@pytest.mark.parametrize("check", CHECKS)
def test_long_chain_is_unbalanced(check):
    root = None
    for value in range(6):
        root = _insert(root, value)
    assert check(root) is False


def test_both_checks_agree_on_random_trees():
    rng = random.Random(7)
    for _ in range(200):
        root = None
        for _ in range(rng.randint(0, 12)):
            root = _insert(root, rng.randint(-20, 20))
        assert is_balanced(root) == is_balanced_naive(root)