"""Unbalanced binary search tree with rebalancing and a text view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Sequence


@dataclass(eq=False)
class Node:
    """A tree node holding a key and two optional children."""

    key: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def render_tree(root: Optional[Node]) -> str:
    """Draw a tree: one row per depth, one four-wide column per in-order position."""
    cells: list[tuple[int, Any]] = []

    def walk(node: Optional[Node], depth: int) -> None:
        if node is None:
            return
        walk(node.left, depth + 1)
        cells.append((depth, node.key))
        walk(node.right, depth + 1)

    walk(root, 0)
    if not cells:
        return ""
    height = max(depth for depth, _ in cells) + 1
    grid = [["    "] * len(cells) for _ in range(height)]
    for column, (depth, key) in enumerate(cells):
        grid[depth][column] = f"{key!s:>4}"
    return "\n".join("".join(row) for row in grid)


def _build(keys: Sequence[Any]) -> Optional[Node]:
    if not keys:
        return None
    mid = len(keys) // 2
    return Node(keys[mid], _build(keys[:mid]), _build(keys[mid + 1:]))


class BinarySearchTree:
    """Binary search tree of distinct keys: smaller keys left, larger right."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: Optional[Node] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Add key as a leaf; return False and change nothing if it is present."""
        parent: Optional[Node] = None
        node = self.root
        while node is not None:
            parent = node
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return False
        new = Node(key)
        if parent is None:
            self.root = new
        elif key < parent.key:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        return True

    def search(self, key: Any) -> Optional[Node]:
        """Return the node holding key, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if node.key > key else node.right
        return node

    def in_order(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def balance(self) -> None:
        """Rebuild the tree so each subtree is rooted at its middle key."""
        self.root = _build(list(self.in_order()))

    def render(self) -> str:
        return render_tree(self.root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None