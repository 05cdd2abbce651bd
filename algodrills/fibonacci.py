"""Three ways of computing Fibonacci numbers."""

from __future__ import annotations


def _check(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")


def fib_recursive(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain recursion."""
    _check(n)
    if n < 2:
        return n
    return fib_recursive(n - 1) + fib_recursive(n - 2)


def fib_memo(n: int) -> int:
    """Return the ``n``-th Fibonacci number by recursion with memoization."""
    _check(n)
    memo: dict[int, int] = {0: 0, 1: 1}

    def solve(k: int) -> int:
        if k not in memo:
            memo[k] = solve(k - 1) + solve(k - 2)
        return memo[k]

    return solve(n)


def fib_iterative(n: int) -> int:
    """Return the ``n``-th Fibonacci number with a simple loop."""
    _check(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a