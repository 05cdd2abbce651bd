"""Counting parenthesizations of a boolean expression by its result.

An expression is a string of ``0`` and ``1`` operands joined by ``|``, ``&``
and ``^``. Results are ``(ways_true, ways_false)`` pairs.
"""

from __future__ import annotations

from typing import Callable

Counts = tuple[int, int]


def _leaf(expression: str) -> Counts | None:
    if not expression:
        return 0, 0
    if len(expression) == 1:
        return (0, 1) if expression == "0" else (1, 0)
    return None


def _combine(op: str, left: Counts, right: Counts) -> Counts:
    lt, lf = left
    rt, rf = right
    if op == "|":
        return lt * rt + lt * rf + rt * lf, lf * rf
    if op == "&":
        return lt * rt, lf * rf + lf * rt + rf * lt
    if op == "^":
        return lt * rf + rt * lf, lt * rt + lf * rf
    return 0, 0


def _split(expression: str, solve: Callable[[str], Counts]) -> Counts:
    ways_true = ways_false = 0
    for i, ch in enumerate(expression):
        if ch in "01":
            continue
        t, f = _combine(ch, solve(expression[:i]), solve(expression[i + 1:]))
        ways_true += t
        ways_false += f
    return ways_true, ways_false


def count_ways(expression: str) -> Counts:
    """Count parenthesizations evaluating to true and to false, by plain recursion."""
    leaf = _leaf(expression)
    if leaf is not None:
        return leaf
    return _split(expression, count_ways)


def count_ways_memo(expression: str) -> Counts:
    """Count like :func:`count_ways`, remembering each sub-expression's result."""
    memo: dict[str, Counts] = {}

    def solve(part: str) -> Counts:
        leaf = _leaf(part)
        if leaf is not None:
            return leaf
        if part not in memo:
            memo[part] = _split(part, solve)
        return memo[part]

    return solve(expression)