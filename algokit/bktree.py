"""BK-tree for finding words within a given edit distance of a query."""

from __future__ import annotations

from dataclasses import dataclass, field


def edit_distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between ``a`` and ``b``."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ca != cb),
                )
            )
        previous = current
    return previous[-1]


@dataclass
class _Node:
    word: str
    children: dict[int, _Node] = field(default_factory=dict)


class BKTree:
    """Stores words so that those close to a query word can be found quickly."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, word: str) -> None:
        """Add ``word``; adding a word already present does nothing."""
        if self._root is None:
            self._root = _Node(word)
            self._size = 1
            return
        node = self._root
        while True:
            if word == node.word:
                return
            diff = edit_distance(word, node.word)
            child = node.children.get(diff)
            if child is None:
                node.children[diff] = _Node(word)
                self._size += 1
                return
            node = child

    def find(self, word: str, max_diff: int) -> list[str]:
        """Return every stored word at most ``max_diff`` edits from ``word``."""
        if max_diff < 0:
            raise ValueError("max_diff must not be negative")
        found: list[str] = []
        if self._root is None:
            return found
        stack = [self._root]
        while stack:
            node = stack.pop()
            dist = edit_distance(word, node.word)
            if dist <= max_diff:
                found.append(node.word)
            low, high = max(1, dist - max_diff), dist + max_diff
            reachable = [
                node.children[k]
                for k in sorted(node.children)
                if low <= k <= high
            ]
            stack.extend(reversed(reachable))
        return found