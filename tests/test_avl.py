import pytest

from algodrills.avl import AVLNode, insert, subtree_height

SOURCE_INSERTS = [
    100, 200, 300, 400, 500, 600, 700, 800, 900, 1000,
    -1000, -2000, 3000, 4000, 5000,
]


def _build(values, compare=None):
    root = None
    for value in values:
        root = insert(root, value, compare)
    return root


def _check_links(node):
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
            _check_links(child)


def test_insert_into_empty_creates_root():
    root = insert(None, 5)
    assert root.value == 5
    assert root.left is None and root.right is None
    assert root.parent is None


def test_subtree_height_of_empty_and_leaf():
    assert subtree_height(None) == 0
    assert subtree_height(AVLNode(1)) == 1


def test_three_ascending_inserts_rotate_left():
    root = _build([100, 200, 300])
    assert root.value == 200
    assert root.left.value == 100
    assert root.right.value == 300
    assert subtree_height(root) == 2


def test_three_descending_inserts_rotate_right():
    root = _build([300, 200, 100])
    assert root.value == 200
    assert root.left.value == 100
    assert root.right.value == 300


def test_source_sequence_keeps_order():
    root = _build(SOURCE_INSERTS)
    assert list(root.in_order()) == sorted(SOURCE_INSERTS)


def test_source_sequence_parent_links_consistent():
    root = _build(SOURCE_INSERTS)
    assert root.parent is None
    _check_links(root)


def test_source_sequence_shorter_than_a_chain():
    root = _build(SOURCE_INSERTS)
    assert subtree_height(root) < len(SOURCE_INSERTS)


def test_custom_compare_reverses_order():
    values = [5, 1, 9, 3, 7]
    root = _build(values, compare=lambda a, b: (b > a) - (b < a))
    assert list(root.in_order()) == sorted(values, reverse=True)


@pytest.mark.parametrize("values", [[4, 4, 4], [2, 1, 2, 1, 3]])
def test_duplicates_are_kept(values):
    root = _build(values)
    assert list(root.in_order()) == sorted(values)


def test_in_order_of_subtree():
    root = _build([100, 200, 300])
    assert list(root.right.in_order()) == [300]