"""Ways of making an amount from unlimited coins of given values."""

from __future__ import annotations

from typing import Sequence

Way = list[tuple[int, int]]


def coin_combinations(total: int, coins: Sequence[int]) -> list[Way]:
    """Return every way to make ``total`` from ``coins``.

    Each way is a list of ``(coin, count)`` pairs in the order the coins are
    given, leaving out coins used zero times. A total of zero has one way,
    the empty one.
    """
    if total < 0:
        raise ValueError(f"total must not be negative, got {total}")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")

    limits = [total // coin for coin in coins]
    ways: list[Way] = []
    buffer: Way = []

    def search(remaining: int, index: int) -> None:
        if remaining == 0:
            ways.append(list(buffer))
            return
        if index >= len(coins):
            return
        coin = coins[index]
        for times in range(limits[index] + 1):
            if times * coin > remaining:
                continue
            if times:
                buffer.append((coin, times))
            search(remaining - times * coin, index + 1)
            if times:
                buffer.pop()

    search(total, 0)
    return ways