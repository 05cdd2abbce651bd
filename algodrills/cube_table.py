"""A table of cubes and their first, second and third differences."""

from __future__ import annotations

import argparse
import math
from typing import NamedTuple, Optional, Sequence

COUNT = 100
HEADERS = ("n", "cubes", "first diff", "second diff", "third diff")


class CubeRow(NamedTuple):
    """One table row; a difference is ``None`` until enough cubes precede it."""

    n: int
    cube: int
    first: Optional[int]
    second: Optional[int]
    third: Optional[int]


def num_digits(value: int) -> int:
    """Return ``floor(log10(value + 1)) + 1``, the column width used for ``value``."""
    return int(math.log10(value + 1)) + 1


def cube_rows(count: int) -> list[CubeRow]:
    """Return the rows for ``n`` from 1 to ``count``."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    rows: list[CubeRow] = []
    previous_cube = previous_first = previous_second = None
    for n in range(1, count + 1):
        cube = n ** 3
        first = second = third = None
        if previous_cube is not None:
            first = cube - previous_cube
            if previous_first is not None:
                second = first - previous_first
                if previous_second is not None:
                    third = second - previous_second
                previous_second = second
            previous_first = first
        previous_cube = cube
        rows.append(CubeRow(n, cube, first, second, third))
    return rows


def format_table(count: int = COUNT) -> str:
    """Render the header and rows, each line ending in a newline."""
    rows = cube_rows(count)
    digits = num_digits(count)
    cube_digits = num_digits(count ** 3)
    minimums = (digits, cube_digits, cube_digits, cube_digits, cube_digits)
    widths = [max(len(name), width) for name, width in zip(HEADERS, minimums)]

    def line(cells: Sequence[object]) -> str:
        return "".join(
            f" {'' if cell is None else cell:>{width}} |"
            for cell, width in zip(cells, widths)
        )

    lines = [line(HEADERS), *(line(row) for row in rows)]
    return "".join(text + "\n" for text in lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the table of cubes."""
    parser = argparse.ArgumentParser(description="Print cubes and their differences.")
    parser.add_argument("count", nargs="?", type=int, default=COUNT)
    args = parser.parse_args(argv)
    print(format_table(args.count))
    return 0