# trie.py
# Prefix tree holding every distinct word the engine has seen.
# Children are walked in sorted order so completions come out the same every time.

from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterator, List, Tuple

Word = str


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    is_word: marks that the path from the root to here spells an inserted word
    """

    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.is_word = False


class Trie:
    """
    Trie to store words for prefix lookup, used by the TextEngine for
    completions of the last word typed.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    # insertion -----------------------------------------------------
    def insert(self, word: Word) -> None:
        """
        Insert a word. Inserting the same word again changes nothing.
        The empty string is ignored, the root never becomes a word.
        """
        if not word:
            return

        node = self._root
        for ch in word:
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._size += 1

    # search/traversal ---------------------------------------------------------
    def words_with_prefix(self, prefix: Word) -> List[Word]:
        """
        Return every inserted word starting with `prefix`.
        The prefix itself comes first when it was inserted as a word,
        the rest follow in lexicographic order.
        """
        if not prefix:
            return []

        node = self._find(prefix)
        if node is None:
            return []
        return list(self._collect(node, prefix))

    def words(self) -> List[Word]:
        """All inserted words in lexicographic order."""
        return list(self._collect(self._root, ""))

    # internal ---------------------------------------------------------
    def _find(self, prefix: Word):
        node = self._root
        for ch in prefix:
            nxt = node.children.get(ch)
            if nxt is None:
                return None
            node = nxt
        return node

    @staticmethod
    def _collect(node: TrieNode, prefix: Word) -> Iterator[Word]:
        """Pre-order DFS with an explicit stack (long tokens are fine)."""
        stack: List[Tuple[TrieNode, Word]] = [(node, prefix)]
        while stack:
            cur, path = stack.pop()
            if cur.is_word:
                yield path
            # reversed so the smallest character is popped first
            for ch in sorted(cur.children, reverse=True):
                stack.append((cur.children[ch], path + ch))

    # convenience -----------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: Word) -> bool:
        if not word:
            return False
        node = self._find(word)
        return node is not None and node.is_word
