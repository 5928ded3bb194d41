# frequency.py
# Occurrence counts per word for the "top words" ranking.

from __future__ import annotations
from collections import Counter
from typing import List

Word = str


class FrequencyTable:
    """
    Counts every occurrence of every word.
    top_n() orders by count, equal counts keep first-observed order
    (Counter.most_common is a stable sort over insertion order).
    """

    def __init__(self) -> None:
        self._uni: Counter = Counter()

    def increment(self, word: Word) -> None:
        self._uni[word] += 1

    def top_n(self, n: int) -> List[Word]:
        # bool is an int subclass but not a meaningful size
        if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
            return []
        return [w for w, _ in self._uni.most_common(n)]

    def count(self, word: Word) -> int:
        return self._uni.get(word, 0)

    def total(self) -> int:
        return sum(self._uni.values())

    def __len__(self) -> int:
        return len(self._uni)

    def __contains__(self, word: Word) -> bool:
        return word in self._uni
