"""
Trie — lowercase prefix tree with ranked completions.

Lower rank means higher priority. The vocabulary is built once at startup
and then only read, so no locking is needed.
"""
from __future__ import annotations
from typing import Dict, List, Optional

from domain.models import Completion
from utils.constants import SUGGESTION_LIMIT


class TrieNode:
    __slots__ = ("children", "is_terminal", "rank")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_terminal = False
        self.rank: Optional[int] = None

    def add_child(self, char: str) -> "TrieNode":
        node = self.children.get(char)
        if node is None:
            node = TrieNode()
            self.children[char] = node
        return node


class Trie:
    """
    Usage
    -----
    trie = Trie()
    trie.insert("hello", 0)
    trie.insert("help", 1)
    trie.completions("he")   # ["hello", "help"]
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    # ------------------------------------------------------------------
    def insert(self, word: str, rank: int) -> None:
        """Insert *word*; if it already exists the smaller rank is kept."""
        if not word:
            return
        node = self._root
        for char in word.lower():
            node = node.add_child(char)

        if not node.is_terminal:
            self._size += 1
        node.is_terminal = True
        if node.rank is None or rank < node.rank:
            node.rank = rank

    def lookup(self, prefix: str) -> List[Completion]:
        """
        Every (word, rank) whose word starts with *prefix*.

        Returns an empty list when no inserted word has this prefix.
        Order is unspecified; use completions() for ranked output.
        """
        prefix = prefix.lower()
        node = self._find(prefix)
        if node is None:
            return []

        results: List[Completion] = []
        stack = [(node, prefix)]
        while stack:
            current, word = stack.pop()
            if current.is_terminal and current.rank is not None:
                results.append((word, current.rank))
            for char, child in current.children.items():
                stack.append((child, word + char))
        return results

    def completions(self, prefix: str, limit: int = SUGGESTION_LIMIT) -> List[str]:
        """The *limit* best-ranked words starting with *prefix*."""
        ranked = sorted(self.lookup(prefix), key=lambda item: item[1])
        return [word for word, _ in ranked[:limit]]

    # ------------------------------------------------------------------
    def _find(self, prefix: str) -> Optional[TrieNode]:
        node = self._root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        node = self._find(word.lower())
        return node is not None and node.is_terminal

    def __len__(self) -> int:
        return self._size
