"""Finding an index whose value equals the index itself."""

from __future__ import annotations

from typing import Optional, Sequence


def magic_index_linear(values: Sequence[int]) -> Optional[int]:
    """Return the first index ``i`` with ``values[i] == i``, or ``None``."""
    return next((index for index, value in enumerate(values) if value == index), None)


def _divide(values: Sequence[int], start: int, end: int) -> Optional[int]:
    if start >= end:
        return None
    middle = (start + end) // 2
    if values[middle] == middle:
        return middle
    found = _divide(values, start, middle)
    if found is not None:
        return found
    return _divide(values, middle + 1, end)


def magic_index_divide(values: Sequence[int]) -> Optional[int]:
    """Search both halves around the middle, checking the middle first.

    Every position is examined if needed, so the input need not be sorted.
    Returns ``None`` when there is no magic index.
    """
    return _divide(values, 0, len(values))


def _pruned(values: Sequence[int], start: int, end: int) -> Optional[int]:
    if start >= end:
        return None
    middle = (start + end) // 2
    if values[middle] == middle:
        return middle
    found = _pruned(values, start, middle)
    if found is not None:
        return found
    if values[middle] < middle:
        return _pruned(values, middle + 1, end)
    return None


def magic_index_pruned(values: Sequence[int]) -> Optional[int]:
    """Search like :func:`magic_index_divide`, skipping right halves that cannot match.

    The right half is only searched when the middle value is below its
    index, which is sound for sorted values without duplicates.
    """
    return _pruned(values, 0, len(values))