"""Huffman tree nodes, a frequency-ordered min-heap and tree construction."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

INTERNAL = -1
"""Symbol value carried by internal (non-leaf) nodes."""


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a symbol, internal nodes carry -1."""

    ch: int
    frequency: int
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None


class MinPriorityQueue:
    """Binary min-heap of nodes ordered by frequency alone.

    Ties are resolved purely by heap position, so the order in which nodes
    are pushed determines the shape of the resulting tree.
    """

    def __init__(self) -> None:
        self._heap: list[HuffmanNode] = []

    def push(self, node: HuffmanNode) -> None:
        """Insert a node, keeping the heap property."""
        heap = self._heap
        heap.append(node)
        index = len(heap) - 1
        while index > 0:
            parent = (index - 1) // 2
            if heap[parent].frequency <= heap[index].frequency:
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def pop(self) -> HuffmanNode:
        """Remove and return the node with the lowest frequency."""
        heap = self._heap
        if not heap:
            raise IndexError("pop from an empty priority queue")
        smallest = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._sift_down(0)
        return smallest

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and heap[left].frequency < heap[smallest].frequency:
                smallest = left
            if right < size and heap[right].frequency < heap[smallest].frequency:
                smallest = right
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def __len__(self) -> int:
        return len(self._heap)


def build_tree(frequencies: Mapping[int, int]) -> Optional[HuffmanNode]:
    """Build a Huffman tree from a symbol-to-count mapping.

    Symbols are inserted in ascending order; symbols with a zero count are
    ignored. Returns None when no symbol occurs.
    """
    queue = MinPriorityQueue()
    for ch in sorted(frequencies):
        count = frequencies[ch]
        if count < 0:
            raise ValueError(f"negative frequency {count} for symbol {ch}")
        if count > 0:
            queue.push(HuffmanNode(ch, count))

    if not queue:
        return None

    while len(queue) > 1:
        left = queue.pop()
        right = queue.pop()
        queue.push(HuffmanNode(INTERNAL, left.frequency + right.frequency, left, right))

    return queue.pop()