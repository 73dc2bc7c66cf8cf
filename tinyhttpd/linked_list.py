"""A singly linked list with positional insert, remove and retrieve."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class Node:
    """A list cell holding one item and links to its neighbours."""

    data: Any
    next: Optional["Node"] = None
    previous: Optional["Node"] = None


class LinkedList:
    """A singly linked list addressed by position."""

    def __init__(self) -> None:
        self._head: Optional[Node] = None
        self._length = 0

    def _node_at(self, index: int) -> Node:
        if index < 0 or index >= self._length:
            raise IndexError("Index out of bound... on linked list")
        cursor = self._head
        for _ in range(index):
            cursor = cursor.next
        return cursor

    def insert(self, index: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at position ``index``."""
        node = Node(data)
        if index == 0:
            node.next = self._head
            self._head = node
        else:
            cursor = self._node_at(index - 1)
            node.next = cursor.next
            cursor.next = node
        self._length += 1

    def remove(self, index: int) -> None:
        """Remove the item at position ``index``."""
        if index < 0 or index >= self._length:
            raise IndexError("Index out of bound... on linked list")
        if index == 0:
            self._head = self._head.next
        else:
            cursor = self._node_at(index - 1)
            cursor.next = cursor.next.next
        self._length -= 1

    def retrieve(self, index: int) -> Any:
        """Return the item at position ``index``."""
        return self._node_at(index).data

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        cursor = self._head
        while cursor is not None:
            yield cursor.data
            cursor = cursor.next