"""Red-black tree with parent links, in-order stepping and a text view."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterator, Optional


class Color(IntEnum):
    RED = 0
    BLACK = 1


class RBNode:
    """A tree node. A node that belongs to no tree is its own parent."""

    __slots__ = ("key", "color", "parent", "left", "right")

    def __init__(self, key: Any, color: Color = Color.RED) -> None:
        self.key = key
        self.color = color
        self.parent: Optional[RBNode] = self
        self.left: Optional[RBNode] = None
        self.right: Optional[RBNode] = None

    def __repr__(self) -> str:
        return f"RBNode({self.key!r}, {self.color.name})"

    def _clear(self) -> None:
        self.parent = self
        self.left = None
        self.right = None

    def next(self) -> Optional["RBNode"]:
        """Return the in-order successor, or None."""
        if self.parent is self:
            return None
        node = self
        if node.right is not None:
            node = node.right
            while node.left is not None:
                node = node.left
            return node
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return parent

    def prev(self) -> Optional["RBNode"]:
        """Return the in-order predecessor, or None."""
        if self.parent is self:
            return None
        node = self
        if node.left is not None:
            node = node.left
            while node.right is not None:
                node = node.right
            return node
        parent = node.parent
        while parent is not None and node is parent.left:
            node, parent = parent, parent.parent
        return parent


def _is_red(node: Optional[RBNode]) -> bool:
    return node is not None and node.color is Color.RED


def _is_black(node: Optional[RBNode]) -> bool:
    return node is None or node.color is Color.BLACK


class RBTree:
    """Ordered set of keys kept balanced by red-black rules."""

    def __init__(self, keys=()) -> None:
        self.root: Optional[RBNode] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def _set_child(self, parent: Optional[RBNode], old: RBNode, new: Optional[RBNode]) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, node: RBNode) -> None:
        right = node.right
        parent = node.parent
        node.right = right.left
        if right.left is not None:
            right.left.parent = node
        right.left = node
        right.parent = parent
        self._set_child(parent, node, right)
        node.parent = right

    def _rotate_right(self, node: RBNode) -> None:
        left = node.left
        parent = node.parent
        node.left = left.right
        if left.right is not None:
            left.right.parent = node
        left.right = node
        left.parent = parent
        self._set_child(parent, node, left)
        node.parent = left

    def _insert_color(self, node: RBNode) -> None:
        while True:
            parent = node.parent
            if parent is None or not _is_red(parent):
                break
            gparent = parent.parent
            if parent is gparent.left:
                uncle = gparent.right
                if _is_red(uncle):
                    uncle.color = Color.BLACK
                    parent.color = Color.BLACK
                    gparent.color = Color.RED
                    node = gparent
                    continue
                if parent.right is node:
                    self._rotate_left(parent)
                    parent, node = node, parent
                parent.color = Color.BLACK
                gparent.color = Color.RED
                self._rotate_right(gparent)
            else:
                uncle = gparent.left
                if _is_red(uncle):
                    uncle.color = Color.BLACK
                    parent.color = Color.BLACK
                    gparent.color = Color.RED
                    node = gparent
                    continue
                if parent.left is node:
                    self._rotate_right(parent)
                    parent, node = node, parent
                parent.color = Color.BLACK
                gparent.color = Color.RED
                self._rotate_left(gparent)
        self.root.color = Color.BLACK

    def insert(self, key: Any) -> bool:
        """Add key; return False and change nothing if it is already present."""
        parent: Optional[RBNode] = None
        node = self.root
        went_left = False
        while node is not None:
            parent = node
            if key < node.key:
                node, went_left = node.left, True
            elif key > node.key:
                node, went_left = node.right, False
            else:
                return False
        new = RBNode(key)
        new.parent = parent
        if parent is None:
            self.root = new
        elif went_left:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        self._insert_color(new)
        return True

    def search(self, key: Any) -> Optional[RBNode]:
        """Return the node holding key, or None."""
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def _erase_color(self, node: Optional[RBNode], parent: Optional[RBNode]) -> None:
        while _is_black(node) and node is not self.root:
            if parent.left is node:
                other = parent.right
                if _is_red(other):
                    other.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    other = parent.right
                if _is_black(other.left) and _is_black(other.right):
                    other.color = Color.RED
                    node = parent
                    parent = node.parent
                else:
                    if _is_black(other.right):
                        if other.left is not None:
                            other.left.color = Color.BLACK
                        other.color = Color.RED
                        self._rotate_right(other)
                        other = parent.right
                    other.color = parent.color
                    parent.color = Color.BLACK
                    if other.right is not None:
                        other.right.color = Color.BLACK
                    self._rotate_left(parent)
                    node = self.root
                    break
            else:
                other = parent.left
                if _is_red(other):
                    other.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    other = parent.left
                if _is_black(other.left) and _is_black(other.right):
                    other.color = Color.RED
                    node = parent
                    parent = node.parent
                else:
                    if _is_black(other.left):
                        if other.right is not None:
                            other.right.color = Color.BLACK
                        other.color = Color.RED
                        self._rotate_left(other)
                        other = parent.left
                    other.color = parent.color
                    parent.color = Color.BLACK
                    if other.left is not None:
                        other.left.color = Color.BLACK
                    self._rotate_right(parent)
                    node = self.root
                    break
        if node is not None:
            node.color = Color.BLACK

    def remove_node(self, node: RBNode) -> None:
        """Unlink node from the tree and rebalance."""
        if node.parent is node:
            raise ValueError("node is not in a tree")
        old = node
        if node.left is None or node.right is None:
            child = node.right if node.left is None else node.left
            parent = node.parent
            color = node.color
            if child is not None:
                child.parent = parent
            self._set_child(parent, node, child)
        else:
            node = old.right
            while node.left is not None:
                node = node.left
            child = node.right
            parent = node.parent
            color = node.color
            if child is not None:
                child.parent = parent
            if parent is old:
                parent.right = child
                parent = node
            else:
                parent.left = child
            node.parent = old.parent
            node.color = old.color
            node.right = old.right
            node.left = old.left
            self._set_child(old.parent, old, node)
            old.left.parent = node
            if old.right is not None:
                old.right.parent = node
        self._size -= 1
        old._clear()
        if color is Color.BLACK:
            self._erase_color(child, parent)

    def erase(self, key: Any) -> None:
        """Remove key; raise KeyError if it is absent."""
        node = self.search(key)
        if node is None:
            raise KeyError(key)
        self.remove_node(node)

    def replace_node(self, victim: RBNode, new: RBNode) -> None:
        """Put new in victim's place without rebalancing.

        new must sort exactly where victim did.
        """
        if victim.parent is victim:
            raise ValueError("victim is not in a tree")
        parent = victim.parent
        self._set_child(parent, victim, new)
        if victim.left is not None:
            victim.left.parent = new
        if victim.right is not None:
            victim.right.parent = new
        new.parent = parent
        new.left = victim.left
        new.right = victim.right
        new.color = victim.color
        victim._clear()

    def first(self) -> Optional[RBNode]:
        node = self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def last(self) -> Optional[RBNode]:
        node = self.root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self.first()
        while node is not None:
            yield node.key
            node = node.next()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def render(self) -> str:
        """Draw the tree: one row per depth, one column per in-order position.

        Black nodes appear as [k], red nodes as <k>.
        """
        cells: list[tuple[int, int, RBNode]] = []

        def walk(node: Optional[RBNode], depth: int) -> None:
            if node is None:
                return
            walk(node.left, depth + 1)
            cells.append((depth, len(cells), node))
            walk(node.right, depth + 1)

        walk(self.root, 0)
        if not cells:
            return ""
        height = max(depth for depth, _, _ in cells) + 1
        grid = [["    "] * len(cells) for _ in range(height)]
        for depth, column, node in cells:
            text = f"{node.key!s:>2}"
            grid[depth][column] = f"[{text}]" if node.color is Color.BLACK else f"<{text}>"
        return "\n".join("".join(row) for row in grid)