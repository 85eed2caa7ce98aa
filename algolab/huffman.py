"""Huffman coding: greedily merge the two rarest subtrees."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class HuffmanNode:
    """A tree node; leaves carry a character, inner nodes only a frequency."""

    frequency: int
    char: Optional[str] = None
    left: Optional[HuffmanNode] = None
    right: Optional[HuffmanNode] = None

    def is_leaf(self) -> bool:
        """Return True for a node with no children."""
        return self.left is None and self.right is None


@dataclass(frozen=True)
class CompressionStats:
    """Size of the text at 8 bits per character and after Huffman coding."""

    original_bits: int
    compressed_bits: int

    @property
    def ratio(self) -> float:
        """Percentage of bits saved."""
        if self.original_bits == 0:
            return 0.0
        return (1 - self.compressed_bits / self.original_bits) * 100


def char_frequencies(text: str) -> dict[str, int]:
    """Count each character, keyed in code-point order."""
    counts = Counter(text)
    return {ch: counts[ch] for ch in sorted(counts)}


def build_huffman_tree(frequencies: Mapping[str, int]) -> HuffmanNode:
    """Build the Huffman tree; characters with zero frequency are left out."""
    order = itertools.count()
    heap: list[tuple[int, int, HuffmanNode]] = []
    for ch in sorted(frequencies):
        freq = frequencies[ch]
        if freq < 0:
            raise ValueError(f"frequency of {ch!r} is negative")
        if freq > 0:
            heap.append((freq, next(order), HuffmanNode(freq, ch)))
    if not heap:
        raise ValueError("cannot build a Huffman tree without characters")
    heapq.heapify(heap)

    while len(heap) > 1:
        f1, _, left = heapq.heappop(heap)
        f2, _, right = heapq.heappop(heap)
        parent = HuffmanNode(f1 + f2, None, left, right)
        heapq.heappush(heap, (parent.frequency, next(order), parent))
    return heap[0][2]


def huffman_codes(root: HuffmanNode) -> dict[str, str]:
    """Map every leaf character to its code: 0 for a left edge, 1 for a right one."""
    codes: dict[str, str] = {}

    def _walk(node: HuffmanNode, code: str) -> None:
        if node.left:
            _walk(node.left, code + "0")
        if node.right:
            _walk(node.right, code + "1")
        if node.is_leaf():
            codes[node.char] = code

    _walk(root, "")
    return codes


def compression_stats(text: str, root: HuffmanNode) -> CompressionStats:
    """Compare 8 bits per character with the frequency-weighted code lengths."""
    compressed = 0

    def _count(node: HuffmanNode | None, depth: int) -> None:
        nonlocal compressed
        if node is None:
            return
        if node.is_leaf():
            compressed += node.frequency * depth
        _count(node.left, depth + 1)
        _count(node.right, depth + 1)

    _count(root, 0)
    return CompressionStats(len(text) * 8, compressed)