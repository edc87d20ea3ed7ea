"""Prefix trie used to compute the longest common prefix of candidate refs."""

from __future__ import annotations

from collections.abc import Iterable


class _Node:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.terminal = False


class Trie:
    """Set of strings that knows the longest prefix shared by all of them."""

    def __init__(self) -> None:
        self._root = _Node()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def add(self, text: str) -> None:
        """Insert a string. Inserting a string twice is a no-op."""
        node = self._root
        for ch in text:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = _Node()
            node = child
        if not node.terminal:
            node.terminal = True
            self._size += 1

    def update(self, texts: Iterable[str]) -> None:
        for text in texts:
            self.add(text)

    def merge(self, other: Trie) -> None:
        """Insert every string held by ``other`` by walking its nodes."""
        pending = [(self._root, other._root)]
        while pending:
            mine, theirs = pending.pop()
            if theirs.terminal and not mine.terminal:
                mine.terminal = True
                self._size += 1
            for ch, child in theirs.children.items():
                target = mine.children.get(ch)
                if target is None:
                    target = mine.children[ch] = _Node()
                pending.append((target, child))

    def __ior__(self, other: object) -> Trie:
        if not isinstance(other, Trie):
            return NotImplemented
        self.merge(other)
        return self

    def common_prefix(self) -> str:
        """Return the longest string that prefixes every inserted string.

        Walks down from the root while the current node has exactly one child
        and no inserted string ends at it.
        """
        chars: list[str] = []
        node = self._root
        while not node.terminal and len(node.children) == 1:
            ch, node = next(iter(node.children.items()))
            chars.append(ch)
        return "".join(chars)


def find_common_prefix(texts: Iterable[str]) -> str:
    """Build a throwaway trie over ``texts`` and return their common prefix."""
    trie = Trie()
    trie.update(texts)
    return trie.common_prefix()
