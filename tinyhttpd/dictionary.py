"""A key/value map stored in a binary search tree of entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from tinyhttpd.bst import BinarySearchTree


@dataclass
class Entry:
    """One key/value pair."""

    key: Any
    value: Any = None


def compare_string_keys(entry_one: Entry, entry_two: Entry) -> int:
    """Order two entries by their string keys, returning 1, -1 or 0."""
    if entry_one.key > entry_two.key:
        return 1
    if entry_one.key < entry_two.key:
        return -1
    return 0


class Dictionary:
    """A map whose entries are ordered by ``compare``; the first value for a key wins."""

    def __init__(self, compare: Callable[[Entry, Entry], int] = compare_string_keys) -> None:
        self._tree = BinarySearchTree(compare)

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key`` unless the key is already present."""
        self._tree.insert(Entry(key, value))

    def search(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        entry = self._tree.search(Entry(key))
        return entry.value if entry is not None else None

    def __contains__(self, key: Any) -> bool:
        return self._tree.search(Entry(key)) is not None

    def __iter__(self):
        return (entry.key for entry in self._tree)

    def items(self):
        """Yield (key, value) pairs in key order."""
        return ((entry.key, entry.value) for entry in self._tree)