"""Data-structure and algorithm exercises: trees, heaps, lists, Huffman coding, dynamic programming and simulations."""

__version__ = "0.1.0"