# bigram.py
# Counts of word -> next word transitions inside single sentences.

from __future__ import annotations
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

Word = str


class BigramCounter:
    """
    First-order transition table.

    Only words that have been followed by something get an entry, so
    lookups use .get() and never create empty counters.
    Ties on the highest count go to the successor seen first: Counter keeps
    insertion order and most_common() sorts stably.
    """

    def __init__(self) -> None:
        # prev -> Counter(next)
        self._chain: Dict[Word, Counter] = {}

    def record(self, words: Sequence[Word]) -> None:
        """Count every adjacent pair of one sentence. 0 or 1 words is a no-op."""
        for a, b in zip(words, words[1:]):
            counter = self._chain.get(a)
            if counter is None:
                counter = self._chain[a] = Counter()
            counter[b] += 1

    def most_likely_next(self, word: Word) -> Optional[Word]:
        """Most frequent successor of `word`, or None when nothing followed it."""
        counter = self._chain.get(word)
        if not counter:
            return None
        return counter.most_common(1)[0][0]

    # introspection ---------------------------------------------------
    def successor_counts(self, word: Word) -> List[Tuple[Word, int]]:
        counter = self._chain.get(word)
        if not counter:
            return []
        return counter.most_common()

    def count(self, a: Word, b: Word) -> int:
        counter = self._chain.get(a)
        return counter[b] if counter else 0

    def transition_count(self) -> int:
        """Number of distinct (a, b) pairs."""
        return sum(len(c) for c in self._chain.values())

    def __contains__(self, word: Word) -> bool:
        return word in self._chain
