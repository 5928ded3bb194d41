# engine.py
# TextEngine: one corpus, four views of it.
# Each ingested sentence updates the frequency table, trie, bigram counter
# and word graph from the same token list, so they always agree.

from __future__ import annotations
from typing import Dict, List, Optional

from text_intelligence.context.normalizer import normalize_word
from text_intelligence.context.tokenizer import tokenize
from text_intelligence.utils.logger_utils import Log, log as default_log

from .bigram import BigramCounter
from .frequency import FrequencyTable
from .trie import Trie
from .word_graph import WordGraph

Word = str


class TextEngine:
    """
    Owns one instance of each structure. Single writer: callers must not
    run ingest() concurrently (wrap it in a lock if they do).

    Nothing here raises on bad input; missing data comes back as [] or None.
    """

    def __init__(self, log: Optional[Log] = None) -> None:
        self.trie = Trie()
        self.bigram = BigramCounter()
        self.graph = WordGraph()
        self.freq = FrequencyTable()
        self.log = log or default_log
        self._sentences = 0

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def ingest(self, text: str) -> List[Word]:
        """
        Tokenize `text` and add it to the corpus.
        Returns the tokens used ([] means nothing was touched).
        """
        words = tokenize(text)
        if not words:
            return []

        for w in words:
            self.freq.increment(w)
            self.trie.insert(w)

        self.bigram.record(words)

        for a, b in zip(words, words[1:]):
            self.graph.record(a, b)

        self._sentences += 1
        self.log.debug(f"ingested {len(words)} tokens, vocab={len(self.freq)}")
        return words

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def top_words(self, n: int = 5) -> List[Word]:
        return self.freq.top_n(n)

    def completions(self, word: str) -> List[Word]:
        """Known words starting with `word`, never `word` itself."""
        w = normalize_word(word)
        return [c for c in self.trie.words_with_prefix(w) if c != w]

    def predict_next(self, word: str) -> Optional[Word]:
        return self.bigram.most_likely_next(normalize_word(word))

    def related_words(self, word: str) -> List[Word]:
        return self.graph.successors_of(normalize_word(word))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def stats(self) -> Dict[str, int]:
        return {
            "sentences": self._sentences,
            "tokens": self.freq.total(),
            "vocabulary": len(self.freq),
            "transitions": self.bigram.transition_count(),
            "edges": self.graph.edge_count(),
        }
