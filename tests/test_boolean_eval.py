import math

import pytest

from algodrills.boolean_eval import count_ways, count_ways_memo

EXPRESSIONS = [
    "0&0&0&1^1|0",
    "1^0|0|1",
    "1|0",
    "0^0&1",
]


def _catalan(n):
    return math.comb(2 * n, n) // (n + 1)


@pytest.mark.parametrize("solve", [count_ways, count_ways_memo])
def test_worked_example(solve):
    assert solve("1^0|0|1") == (3, 2)


@pytest.mark.parametrize("solve", [count_ways, count_ways_memo])
def test_single_operands(solve):
    assert solve("0") == (0, 1)
    assert solve("1") == (1, 0)
    assert solve("") == (0, 0)


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_total_is_number_of_parenthesizations(expression):
    operators = sum(ch not in "01" for ch in expression)
    ways_true, ways_false = count_ways(expression)
    assert ways_true + ways_false == _catalan(operators)


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_memo_agrees_with_recursion(expression):
    assert count_ways_memo(expression) == count_ways(expression)


def test_long_expression_memo_total():
    expression = "0&0&0&1^1|0|0^1&1&0|1^0^0^0^0|1&1"
    operators = sum(ch not in "01" for ch in expression)
    ways_true, ways_false = count_ways_memo(expression)
    assert ways_true + ways_false == _catalan(operators)


@pytest.mark.parametrize("solve", [count_ways, count_ways_memo])
def test_single_operator_truth_tables(solve):
    assert solve("1|0") == (1, 0)
    assert solve("0|0") == (0, 1)
    assert solve("1&0") == (0, 1)
    assert solve("1&1") == (1, 0)
    assert solve("1^1") == (0, 1)
    assert solve("1^0") == (1, 0)