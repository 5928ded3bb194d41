# text_intelligence/context/__init__.py
# text handling shared by the engine and the presentation layers

from .normalizer import normalize_word  # trim + lowercase one token
from .tokenizer import tokenize, last_word  # whitespace tokenizer

__all__ = [
    "normalize_word",
    "tokenize",
    "last_word",
]
