"""A prefix tree of words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """A trie supporting word lookup, prefix lookup and a shared prefix."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _walk(self, text: str) -> Optional[_TrieNode]:
        node = self._root
        for char in text:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Return True when ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Return True when some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None

    def longest_common_prefix(self) -> str:
        """Return the longest prefix shared by every inserted word."""
        prefix: list[str] = []
        node = self._root
        while len(node.children) == 1 and not node.is_end:
            (char, node), = node.children.items()
            prefix.append(char)
        return "".join(prefix)