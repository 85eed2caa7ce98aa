"""Red-black tree of integer keys with insertion fix-up and property checks."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Optional

Trace = Callable[[str], None]


class Color(enum.Enum):
    """Colour of a red-black tree node."""

    RED = "R"
    BLACK = "B"


@dataclass(eq=False)
class RBNode:
    """A tree node; leaves point at the tree's shared black sentinel."""

    key: Optional[int]
    color: Color = Color.RED
    left: Optional[RBNode] = None
    right: Optional[RBNode] = None
    parent: Optional[RBNode] = None


class RedBlackTree:
    """Red-black tree; equal keys are kept and go to the right subtree."""

    def __init__(self, trace: Trace | None = None) -> None:
        self._trace = trace
        self.nil = RBNode(None, Color.BLACK)
        self.root: RBNode = self.nil
        self._size = 0

    def _emit(self, message: str) -> None:
        if self._trace:
            self._trace(message)

    def _left_rotate(self, x: RBNode) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self.nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self.nil:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y
        self._emit(f"Left rotation at node {x.key}")

    def _right_rotate(self, y: RBNode) -> None:
        x = y.left
        y.left = x.right
        if x.right is not self.nil:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is self.nil:
            self.root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x
        self._emit(f"Right rotation at node {y.key}")

    def _insert_fixup(self, z: RBNode) -> None:
        while z.parent.color is Color.RED:
            grand = z.parent.parent
            parent_is_left = z.parent is grand.left
            uncle = grand.right if parent_is_left else grand.left
            if uncle.color is Color.RED:
                z.parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grand.color = Color.RED
                z = grand
                self._emit(f"Case 1 applied (node {z.key})")
            else:
                inner = z.parent.right if parent_is_left else z.parent.left
                if z is inner:
                    z = z.parent
                    if parent_is_left:
                        self._left_rotate(z)
                    else:
                        self._right_rotate(z)
                    self._emit(f"Case 2 applied (node {z.key})")
                z.parent.color = Color.BLACK
                z.parent.parent.color = Color.RED
                if parent_is_left:
                    self._right_rotate(z.parent.parent)
                else:
                    self._left_rotate(z.parent.parent)
                self._emit(f"Case 3 applied (node {z.key})")
            if z is self.root:
                break
        self.root.color = Color.BLACK

    def insert(self, key: int) -> None:
        """Insert ``key`` and restore the red-black properties."""
        z = RBNode(key, Color.RED, self.nil, self.nil, self.nil)
        y = self.nil
        x = self.root
        while x is not self.nil:
            y = x
            x = x.left if key < x.key else x.right
        z.parent = y
        if y is self.nil:
            self.root = z
        elif key < y.key:
            y.left = z
        else:
            y.right = z
        self._size += 1
        self._emit(f"Inserted node {key}")
        self._insert_fixup(z)

    def __iter__(self) -> Iterator[int]:
        stack: list[RBNode] = []
        node = self.root
        while stack or node is not self.nil:
            while node is not self.nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size

    def black_height(self) -> int | None:
        """Return the number of black nodes on every root-to-leaf path, or None if they differ."""

        def _height(node: RBNode) -> int | None:
            if node is self.nil:
                return 0
            left = _height(node.left)
            right = _height(node.right)
            if left is None or right is None or left != right:
                return None
            return left + (1 if node.color is Color.BLACK else 0)

        return _height(self.root)

    def _no_red_red(self, node: RBNode) -> bool:
        if node is self.nil:
            return True
        if node.color is Color.RED and (
            node.left.color is Color.RED or node.right.color is Color.RED
        ):
            return False
        return self._no_red_red(node.left) and self._no_red_red(node.right)

    def validate(self) -> str | None:
        """Return a description of the first violated property, or None if all hold."""
        if self.root.color is not Color.BLACK:
            return "property 2 violated: the root is red"
        if not self._no_red_red(self.root):
            return "property 4 violated: a red node has a red child"
        if self.black_height() is None:
            return "property 5 violated: black heights differ"
        return None

    def render(self) -> str:
        """Draw the tree sideways: right subtree on top, four spaces per level."""
        lines: list[str] = []

        def _draw(node: RBNode, level: int) -> None:
            if node is self.nil:
                return
            _draw(node.right, level + 1)
            lines.append(f"{'    ' * level}{node.key}({node.color.value})")
            _draw(node.left, level + 1)

        _draw(self.root, 0)
        return "\n".join(lines)