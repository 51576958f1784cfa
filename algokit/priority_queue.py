"""Binary heap ordered by a caller-supplied comparison."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any

Comparison = Callable[[Any, Any], bool]


class PriorityQueue:
    """A binary heap; by default the smallest item is at the top.

    ``cmp(a, b)`` returns true when ``a`` may sit above ``b`` in the heap.
    """

    def __init__(self, cmp: Comparison | None = None) -> None:
        self._cmp: Comparison = cmp if cmp is not None else operator.le
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def push(self, x: Any) -> None:
        """Add ``x`` to the heap."""
        self._items.append(x)
        self._sift_up(len(self._items) - 1)

    def top(self) -> Any:
        """Return the item at the top without removing it."""
        if not self._items:
            raise IndexError("top from an empty priority queue")
        return self._items[0]

    def pop(self) -> Any:
        """Remove and return the item at the top."""
        if not self._items:
            raise IndexError("pop from an empty priority queue")
        items = self._items
        head = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return head

    def extend(self, items: Iterable[Any]) -> None:
        """Add all ``items`` at once and restore the heap order."""
        self._items.extend(items)
        for idx in reversed(range(len(self._items) // 2)):
            self._sift_down(idx)

    def _sift_up(self, idx: int) -> None:
        items, cmp = self._items, self._cmp
        while idx > 0:
            parent = (idx - 1) // 2
            if cmp(items[parent], items[idx]):
                break
            items[parent], items[idx] = items[idx], items[parent]
            idx = parent

    def _sift_down(self, idx: int) -> None:
        items, cmp = self._items, self._cmp
        size = len(items)
        while True:
            best = idx
            for child in (2 * idx + 1, 2 * idx + 2):
                if child < size and not cmp(items[best], items[child]):
                    best = child
            if best == idx:
                return
            items[best], items[idx] = items[idx], items[best]
            idx = best