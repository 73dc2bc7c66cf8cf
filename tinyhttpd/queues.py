"""A first-in, first-out queue built on the linked list."""

from __future__ import annotations

from typing import Any

from tinyhttpd.linked_list import LinkedList


class Queue:
    """A FIFO queue: push at the back, peek and pop at the front."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def push(self, data: Any) -> None:
        """Add ``data`` to the back of the queue."""
        self._list.insert(len(self._list), data)

    def peek(self) -> Any:
        """Return the front item; raise IndexError when empty."""
        return self._list.retrieve(0)

    def pop(self) -> None:
        """Drop the front item; raise IndexError when empty."""
        self._list.remove(0)

    def __len__(self) -> int:
        return len(self._list)

    def __bool__(self) -> bool:
        return len(self._list) > 0