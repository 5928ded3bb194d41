# text_intelligence/context/tokenizer.py
# whitespace tokenizer shared by the engine and the UIs

from typing import List

from .normalizer import normalize_word


def tokenize(s: str) -> List[str]:
    """
    Split on runs of whitespace, normalize each token and drop empties.
    No punctuation handling: "cat," and "cat" are different words.
    Whitespace is whatever str.split() splits on (str.isspace), so 0x1c-0x1f
    separate words and U+FEFF does not.
    """
    if not s:
        return []
    out = []
    for t in s.split():
        t = normalize_word(t)
        if t:
            out.append(t)
    return out


def last_word(s: str) -> str:
    """Last token of `s` under the same rule as tokenize(), or ""."""
    toks = tokenize(s)
    return toks[-1] if toks else ""
