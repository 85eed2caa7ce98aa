"""AVL tree of distinct integer keys with rebalancing on insert and delete."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Optional

Trace = Callable[[str], None]


@dataclass(eq=False)
class AVLNode:
    """A node storing its key and the height of its subtree (a leaf has 0)."""

    key: int
    height: int = 0
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None


def _height(node: AVLNode | None) -> int:
    return node.height if node else -1


def _balance(node: AVLNode | None) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _update(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _find_min(node: AVLNode) -> AVLNode:
    while node.left:
        node = node.left
    return node


class AVLTree:
    """Self-balancing binary search tree; duplicate keys are ignored."""

    def __init__(self, trace: Trace | None = None) -> None:
        self._trace = trace
        self.root: AVLNode | None = None
        self._size = 0

    def _emit(self, message: str) -> None:
        if self._trace:
            self._trace(message)

    def insert(self, key: int) -> bool:
        """Insert ``key``; return False when it was already present."""
        inserted = False

        def _insert(node: AVLNode | None) -> AVLNode:
            nonlocal inserted
            if node is None:
                inserted = True
                return AVLNode(key)
            if key < node.key:
                node.left = _insert(node.left)
            elif key > node.key:
                node.right = _insert(node.right)
            else:
                return node

            _update(node)
            balance = _balance(node)
            self._emit(f"After inserting {key}: node {node.key}, balance {balance}")

            if balance > 1 and key < node.left.key:
                self._emit(f"LL rotation at node {node.key}")
                return _rotate_right(node)
            if balance < -1 and key > node.right.key:
                self._emit(f"RR rotation at node {node.key}")
                return _rotate_left(node)
            if balance > 1 and key > node.left.key:
                self._emit(f"LR rotation at node {node.key}")
                node.left = _rotate_left(node.left)
                return _rotate_right(node)
            if balance < -1 and key < node.right.key:
                self._emit(f"RL rotation at node {node.key}")
                node.right = _rotate_right(node.right)
                return _rotate_left(node)
            return node

        self.root = _insert(self.root)
        if inserted:
            self._size += 1
        return inserted

    def delete(self, key: int) -> bool:
        """Remove ``key``; return False when it was not present."""
        removed = False

        def _delete(node: AVLNode | None, target: int) -> AVLNode | None:
            nonlocal removed
            if node is None:
                return None
            if target < node.key:
                node.left = _delete(node.left, target)
            elif target > node.key:
                node.right = _delete(node.right, target)
            elif node.left is None or node.right is None:
                removed = True
                node = node.left or node.right
                if node is None:
                    return None
            else:
                successor = _find_min(node.right)
                node.key = successor.key
                node.right = _delete(node.right, successor.key)

            _update(node)
            balance = _balance(node)
            self._emit(f"After deleting {target}: node {node.key}, balance {balance}")

            if balance > 1:
                if _balance(node.left) >= 0:
                    self._emit(f"LL rotation at node {node.key}")
                    return _rotate_right(node)
                self._emit(f"LR rotation at node {node.key}")
                node.left = _rotate_left(node.left)
                return _rotate_right(node)
            if balance < -1:
                if _balance(node.right) <= 0:
                    self._emit(f"RR rotation at node {node.key}")
                    return _rotate_left(node)
                self._emit(f"RL rotation at node {node.key}")
                node.right = _rotate_right(node.right)
                return _rotate_left(node)
            return node

        self.root = _delete(self.root, key)
        if removed:
            self._size -= 1
        return removed

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __iter__(self) -> Iterator[int]:
        stack: list[AVLNode] = []
        node = self.root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Return the height of the tree: -1 when empty, 0 for a single node."""
        return _height(self.root)

    def render(self) -> str:
        """Draw the tree sideways: right subtree on top, four spaces per level."""
        lines: list[str] = []

        def _draw(node: AVLNode | None, level: int) -> None:
            if node is None:
                return
            _draw(node.right, level + 1)
            lines.append(f"{'    ' * level}{node.key}")
            _draw(node.left, level + 1)

        _draw(self.root, 0)
        return "\n".join(lines)