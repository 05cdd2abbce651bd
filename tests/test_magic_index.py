import random

from algodrills.magic_index import (
    magic_index_divide,
    magic_index_linear,
    magic_index_pruned,
)

WITH_MAGIC = [-4, -2, 1, 0, 4, 5, 12, 12, 54, 65, 100]
WITHOUT_MAGIC = [-4, -3, 100, 200]


def test_found_index_is_magic():
    for index in (
        magic_index_linear(WITH_MAGIC),
        magic_index_divide(WITH_MAGIC),
        magic_index_pruned(WITH_MAGIC),
    ):
        assert index in range(len(WITH_MAGIC))
        assert WITH_MAGIC[index] == index


def test_linear_returns_first_magic_index():
    index = magic_index_linear(WITH_MAGIC)
    assert index == 4
    assert all(WITH_MAGIC[i] != i for i in range(index))


def test_divide_checks_middle_first():
    assert magic_index_divide(WITH_MAGIC) == 5


def test_no_magic_index():
    assert magic_index_linear(WITHOUT_MAGIC) is None
    assert magic_index_divide(WITHOUT_MAGIC) is None
    assert magic_index_pruned(WITHOUT_MAGIC) is None


def test_empty_input():
    assert magic_index_linear([]) is None
    assert magic_index_divide([]) is None
    assert magic_index_pruned([]) is None


def test_searches_agree_on_sorted_distinct_values():
    rng = random.Random(1234)
    for _ in range(300):
        size = rng.randrange(0, 15)
        values = sorted(rng.sample(range(-20, 40), size))
        linear = magic_index_linear(values)
        for found in (magic_index_divide(values), magic_index_pruned(values)):
            assert (found is None) == (linear is None)
            if found is not None:
                assert values[found] == found


def test_divide_handles_unsorted_values():
    rng = random.Random(99)
    for _ in range(200):
        values = [rng.randrange(-5, 12) for _ in range(rng.randrange(0, 12))]
        found = magic_index_divide(values)
        assert (found is None) == (magic_index_linear(values) is None)