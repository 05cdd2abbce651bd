"""Huffman compression over a compact, growable list of bits."""

from __future__ import annotations

import heapq
from collections import Counter
from dataclasses import dataclass
from itertools import count
from typing import Iterable, Iterator, Optional


class BitList:
    """A sequence of bits packed eight to a byte, lowest bit first."""

    __slots__ = ("_bytes", "_size")

    def __init__(self, bits: Iterable[bool] = ()) -> None:
        self._bytes = bytearray()
        self._size = 0
        self.extend(bits)

    def append(self, bit: bool) -> None:
        """Add one bit at the end."""
        if self._size == len(self._bytes) * 8:
            self._bytes.append(0)
        if bit:
            self._bytes[-1] |= 1 << (self._size % 8)
        self._size += 1

    def extend(self, bits: Iterable[bool]) -> None:
        """Add every bit of ``bits`` at the end, in order."""
        for bit in list(bits):
            self.append(bool(bit))

    def pop(self) -> bool:
        """Remove and return the last bit; raises ``IndexError`` when empty."""
        if self._size == 0:
            raise IndexError("pop from an empty BitList")
        last = self._size - 1
        bit = self[last]
        self[last] = False
        self._size = last
        if (self._size + 7) >> 3 < len(self._bytes):
            del self._bytes[-1]
        return bit

    def clear(self) -> None:
        """Remove all bits."""
        self._bytes.clear()
        self._size = 0

    def num_bytes(self) -> int:
        """Return the number of bytes used to store the bits."""
        return len(self._bytes)

    def _position(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("BitList index out of range")
        return index

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> bool:
        index = self._position(index)
        return bool(self._bytes[index >> 3] & (1 << (index % 8)))

    def __setitem__(self, index: int, value: bool) -> None:
        index = self._position(index)
        mask = 1 << (index % 8)
        if value:
            self._bytes[index >> 3] |= mask
        else:
            self._bytes[index >> 3] &= ~mask & 0xFF

    def __iter__(self) -> Iterator[bool]:
        for index in range(self._size):
            yield self[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitList):
            return NotImplemented
        return self._size == other._size and self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash((self._size, bytes(self._bytes)))

    def __str__(self) -> str:
        return "".join("1" if bit else "0" for bit in self)

    def __repr__(self) -> str:
        return f"BitList('{self}')"


@dataclass
class _Node:
    frequency: int
    char: Optional[str] = None
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _build_tree(text: str) -> _Node:
    order = count()
    queue = [
        (freq, next(order), _Node(freq, char))
        for char, freq in Counter(text).items()
    ]
    heapq.heapify(queue)
    while len(queue) > 1:
        freq1, _, first = heapq.heappop(queue)
        freq2, _, second = heapq.heappop(queue)
        merged = _Node(freq1 + freq2, left=first, right=second)
        heapq.heappush(queue, (merged.frequency, next(order), merged))
    return queue[0][2]


def _codewords(root: _Node) -> dict[str, BitList]:
    table: dict[str, BitList] = {}
    buffer = BitList([False])

    def walk(node: _Node) -> None:
        if node.left is None and node.right is None:
            table[node.char] = BitList(buffer)
            return
        buffer.append(True)
        walk(node.right)
        buffer.pop()
        buffer.append(False)
        walk(node.left)
        buffer.pop()

    walk(root)
    return table


def compress(text: str) -> tuple[BitList, dict[str, BitList]]:
    """Huffman-encode ``text`` and return the bits with the codeword table.

    Every codeword starts with a ``0`` bit; the branch towards the more
    frequent subtree adds a ``1``.
    """
    if not text:
        return BitList(), {}
    table = _codewords(_build_tree(text))
    bits = BitList()
    for char in text:
        bits.extend(table[char])
    return bits, table


def decompress(bits: BitList, table: dict[str, BitList]) -> str:
    """Decode ``bits`` with a codeword table produced by :func:`compress`.

    Raises ``ValueError`` when trailing bits do not form a codeword.
    """
    inverse = {BitList(code): char for char, code in table.items()}
    chars: list[str] = []
    buffer = BitList()
    for bit in bits:
        buffer.append(bit)
        char = inverse.get(buffer)
        if char is not None:
            chars.append(char)
            buffer = BitList()
    if len(buffer):
        raise ValueError(f"failed to decompress all bits: {len(buffer)} left over")
    return "".join(chars)