"""
text_intelligence.core

In-memory text analytics over a growing corpus of sentences:
 - prefix completion (Trie)
 - next-word prediction from raw bigram counts (BigramCounter)
 - distinct successor lookup (WordGraph)
 - word frequency ranking (FrequencyTable)
 - TextEngine tying the four together
"""

from .trie import Trie, TrieNode
from .bigram import BigramCounter
from .word_graph import WordGraph
from .frequency import FrequencyTable
from .engine import TextEngine

__all__ = [
    "Trie",
    "TrieNode",
    "BigramCounter",
    "WordGraph",
    "FrequencyTable",
    "TextEngine",
]
