# word_graph.py
# Directed adjacency: which distinct words have directly followed a word.

from __future__ import annotations
from typing import Dict, List

Word = str


class WordGraph:
    """Membership only, no counts. Successors keep first-observed order."""

    def __init__(self) -> None:
        # dict used as an ordered set
        self._edges: Dict[Word, Dict[Word, None]] = {}

    def record(self, a: Word, b: Word) -> None:
        succ = self._edges.get(a)
        if succ is None:
            succ = self._edges[a] = {}
        succ.setdefault(b, None)

    def successors_of(self, word: Word) -> List[Word]:
        return list(self._edges.get(word, ()))

    def edge_count(self) -> int:
        return sum(len(s) for s in self._edges.values())

    def __contains__(self, word: Word) -> bool:
        return word in self._edges
