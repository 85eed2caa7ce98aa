"""A B-tree of integer keys with proactive node splitting on insert."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort_right
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class BTreeNode:
    """A node holding sorted keys and, unless it is a leaf, one more child."""

    keys: list[int] = field(default_factory=list)
    children: list[BTreeNode] = field(default_factory=list)
    leaf: bool = True


@dataclass(frozen=True)
class BTreeStats:
    """Node count, key count and height (root at height 0) of a B-tree."""

    total_nodes: int
    total_keys: int
    height: int

    @property
    def average_keys(self) -> float:
        return self.total_keys / self.total_nodes


class BTree:
    """B-tree holding at most ``max_keys`` keys per node; duplicates are kept."""

    def __init__(self, max_keys: int = 3) -> None:
        if max_keys < 3 or max_keys % 2 == 0:
            raise ValueError(f"max_keys must be an odd number of at least 3, got {max_keys}")
        self.max_keys = max_keys
        self._min_keys = max_keys // 2
        self.root = BTreeNode()

    def _split_child(self, parent: BTreeNode, index: int) -> None:
        child = parent.children[index]
        m = self._min_keys
        sibling = BTreeNode(
            keys=child.keys[m + 1 :],
            children=child.children[m + 1 :],
            leaf=child.leaf,
        )
        median = child.keys[m]
        del child.keys[m:]
        del child.children[m + 1 :]
        parent.children.insert(index + 1, sibling)
        parent.keys.insert(index, median)

    def _is_full(self, node: BTreeNode) -> bool:
        return len(node.keys) == self.max_keys

    def _insert_non_full(self, node: BTreeNode, key: int) -> None:
        while not node.leaf:
            i = bisect_right(node.keys, key)
            if self._is_full(node.children[i]):
                self._split_child(node, i)
                if key > node.keys[i]:
                    i += 1
            node = node.children[i]
        insort_right(node.keys, key)

    def insert(self, key: int) -> None:
        """Insert ``key``, splitting full nodes on the way down."""
        if not self._is_full(self.root):
            self._insert_non_full(self.root, key)
            return
        new_root = BTreeNode(children=[self.root], leaf=False)
        self._split_child(new_root, 0)
        self.root = new_root
        target = 1 if new_root.keys[0] < key else 0
        self._insert_non_full(new_root.children[target], key)

    def search(self, key: int) -> int | None:
        """Return the depth (root is 1) of the node holding ``key``, or None."""
        node = self.root
        depth = 1
        while True:
            i = bisect_left(node.keys, key)
            if i < len(node.keys) and node.keys[i] == key:
                return depth
            if node.leaf:
                return None
            node = node.children[i]
            depth += 1

    def levels(self) -> list[tuple[int, list[int]]]:
        """Return ``(level, keys)`` for every node in pre-order, root at level 0."""
        out: list[tuple[int, list[int]]] = []

        def _visit(node: BTreeNode, level: int) -> None:
            out.append((level, list(node.keys)))
            for child in node.children:
                _visit(child, level + 1)

        _visit(self.root, 0)
        return out

    def stats(self) -> BTreeStats:
        """Count nodes and keys and measure the height of the tree."""
        entries = self.levels()
        return BTreeStats(
            total_nodes=len(entries),
            total_keys=sum(len(keys) for _, keys in entries),
            height=max(level for level, _ in entries),
        )

    def __iter__(self) -> Iterator[int]:
        def _walk(node: BTreeNode) -> Iterator[int]:
            if node.leaf:
                yield from node.keys
                return
            for child, key in zip(node.children, node.keys):
                yield from _walk(child)
                yield key
            yield from _walk(node.children[-1])

        return _walk(self.root)