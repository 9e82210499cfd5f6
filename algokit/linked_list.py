"""Circular linked lists built around a sentinel head node."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class _SNode:
    __slots__ = ("value", "next")

    def __init__(self, value: Any = None, next: Optional["_SNode"] = None) -> None:
        self.value = value
        self.next = next


class SinglyLinkedList:
    """Singly linked circular list; new values go to the front."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head = _SNode()
        self._head.next = self._head
        self._size = 0
        for value in values:
            self.push_front(value)

    def push_front(self, value: Any) -> None:
        self._head.next = _SNode(value, self._head.next)
        self._size += 1

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        prev = self._head
        curr = self._head.next
        while curr is not self._head:
            curr.next, prev, curr = prev, curr, curr.next
        self._head.next = prev

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._head:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        body = "".join(f"->[{value}]" for value in self)
        return f"[head]{body}->[head]"


class _DNode:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: "_DNode" = self
        self.prev: "_DNode" = self


def _label(value: Any) -> str:
    if isinstance(value, tuple):
        return ", ".join(str(part) for part in value)
    return str(value)


class DoublyLinkedList:
    """Doubly linked circular list with insertion at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head = _DNode()
        self._size = 0
        for value in values:
            self.add_tail(value)

    def _link(self, node: _DNode, prev: _DNode, next: _DNode) -> None:
        node.next = next
        prev.next = node
        node.prev = prev
        next.prev = node
        self._size += 1

    def add(self, value: Any) -> None:
        """Insert right after the head, at the front."""
        self._link(_DNode(value), self._head, self._head.next)

    def add_tail(self, value: Any) -> None:
        """Insert right before the head, at the back."""
        self._link(_DNode(value), self._head.prev, self._head)

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._head:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._head.prev
        while node is not self._head:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        body = "".join(f"<->[{_label(value)}]" for value in self)
        return f"[head]{body}<->[head]"