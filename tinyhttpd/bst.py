"""An unbalanced binary search tree ordered by a comparison function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]


@dataclass
class _TreeNode:
    data: Any
    lesser: Optional["_TreeNode"] = None
    greater: Optional["_TreeNode"] = None


class BinarySearchTree:
    """A binary search tree; equal items are not inserted twice."""

    def __init__(self, compare: Compare) -> None:
        self.compare = compare
        self._head: Optional[_TreeNode] = None

    def _locate(self, data: Any) -> tuple[Optional[_TreeNode], int]:
        """Find the node matching ``data`` or the node to attach it under."""
        cursor = self._head
        if cursor is None:
            return None, 0
        while True:
            order = self.compare(cursor.data, data)
            if order > 0:
                if cursor.lesser is None:
                    return cursor, 1
                cursor = cursor.lesser
            elif order < 0:
                if cursor.greater is None:
                    return cursor, -1
                cursor = cursor.greater
            else:
                return cursor, 0

    def insert(self, data: Any) -> None:
        """Add ``data`` unless an equal item is already stored."""
        if self._head is None:
            self._head = _TreeNode(data)
            return
        cursor, direction = self._locate(data)
        if direction == 1:
            cursor.lesser = _TreeNode(data)
        elif direction == -1:
            cursor.greater = _TreeNode(data)

    def search(self, data: Any) -> Any:
        """Return the stored item equal to ``data``, or None."""
        cursor, direction = self._locate(data)
        if cursor is not None and direction == 0:
            return cursor.data
        return None

    def __iter__(self) -> Iterator[Any]:
        stack: list[_TreeNode] = []
        cursor = self._head
        while stack or cursor is not None:
            while cursor is not None:
                stack.append(cursor)
                cursor = cursor.lesser
            cursor = stack.pop()
            yield cursor.data
            cursor = cursor.greater


def compare_strings(data_one: str, data_two: str) -> int:
    """Return 1, -1 or 0 as ``data_one`` sorts after, before or equal to ``data_two``."""
    if data_one > data_two:
        return 1
    if data_one < data_two:
        return -1
    return 0