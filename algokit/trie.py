"""Prefix tree over lower-case Latin words."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    terminal: bool = False


def _check(word: str) -> None:
    for ch in word:
        if not "a" <= ch <= "z":
            raise ValueError(f"unsupported character {ch!r}: only a-z allowed")


class Trie:
    """A set of words made of the letters a to z."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _check(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.terminal = True

    def find(self, word: str) -> bool:
        """Return whether ``word`` was inserted."""
        _check(word)
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.find(word)