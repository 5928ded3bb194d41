# report.py
# What happens when the user sends a message: learn from it, then look up
# analytics for the last word and phrase a reply. No rendering here, the
# CLI and the TUI both display an Analysis as they see fit.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from text_intelligence.context.tokenizer import last_word as _last_word
from text_intelligence.core.engine import TextEngine

WELCOME_MESSAGE = (
    "Hi! I'm the Text Intelligence Engine. Type something and I'll analyze "
    "your text using Trie, bigrams, and a word graph."
)
PLACEHOLDER_REPLY = (
    "I've learned from your message. Keep typing more text to see analytics."
)
NO_PREDICTION = "No prediction yet"
EMPTY_LIST = "None"
NO_WORD = "—"


@dataclass(frozen=True)
class Analysis:
    """Analytics shown after one message."""

    text: str
    last_word: str
    top_words: List[str] = field(default_factory=list)
    completions: List[str] = field(default_factory=list)
    next_word: Optional[str] = None
    related: List[str] = field(default_factory=list)

    def reply_lines(self) -> List[str]:
        lines = []
        w = self.last_word
        if self.top_words:
            lines.append("Top words so far: " + ", ".join(self.top_words))
        if self.completions:
            lines.append(f'Completions for "{w}": ' + ", ".join(self.completions))
        if self.next_word:
            lines.append(f'Most likely next word after "{w}" → "{self.next_word}"')
        if self.related:
            lines.append(f'Related words (graph) from "{w}": ' + ", ".join(self.related))
        return lines

    @property
    def reply(self) -> str:
        return "\n".join(self.reply_lines()) or PLACEHOLDER_REPLY


def format_last_word(word: str) -> str:
    return f"Last word: {word or NO_WORD}"


def format_from_word(word: str) -> str:
    return f"From last word: {word or NO_WORD}"


def analyze_message(engine: TextEngine, text: str, top_n: int = 5) -> Optional[Analysis]:
    """
    Ingest one message and collect analytics for its last word.
    Blank messages return None and leave the engine alone.
    """
    text = (text or "").strip()
    if not text:
        return None

    engine.ingest(text)
    lw = _last_word(text)
    return Analysis(
        text=text,
        last_word=lw,
        top_words=engine.top_words(top_n),
        completions=engine.completions(lw),
        next_word=engine.predict_next(lw),
        related=engine.related_words(lw),
    )
