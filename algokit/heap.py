"""Array-backed binary heap used as a priority queue."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional


class BinaryHeap:
    """Priority queue that pops the largest key first, or the smallest with min_heap."""

    def __init__(
        self,
        values: Iterable[Any] = (),
        key: Optional[Callable[[Any], Any]] = None,
        min_heap: bool = False,
    ) -> None:
        self._items: list[Any] = []
        self._key = key
        self._min = min_heap
        for value in values:
            self.push(value)

    def _higher(self, a: Any, b: Any) -> bool:
        if self._key is None:
            ka, kb = a, b
        else:
            ka, kb = self._key(a), self._key(b)
        return ka < kb if self._min else ka > kb

    def push(self, value: Any) -> None:
        items = self._items
        items.append(value)
        k = len(items) - 1
        while k > 0:
            parent = (k - 1) // 2
            if self._higher(items[parent], value):
                break
            items[k] = items[parent]
            k = parent
        items[k] = value

    def _downheap(self, k: int) -> None:
        items = self._items
        n = len(items)
        value = items[k]
        while k < n // 2:
            child = 2 * k + 1
            if child + 1 < n and self._higher(items[child + 1], items[child]):
                child += 1
            if self._higher(value, items[child]):
                break
            items[k] = items[child]
            k = child
        items[k] = value

    def pop(self) -> Any:
        """Remove and return the item with the highest priority."""
        if not self._items:
            raise IndexError("pop from empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._downheap(0)
        return top

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)