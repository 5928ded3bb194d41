# tests/test_report.py
# message analysis behind the chat UIs

import pytest

from text_intelligence.core.engine import TextEngine
from text_intelligence.report import (
    PLACEHOLDER_REPLY,
    Analysis,
    analyze_message,
    format_from_word,
    format_last_word,
)


@pytest.fixture
def engine():
    return TextEngine()


def test_blank_message_returns_none(engine):
    assert analyze_message(engine, "   ") is None
    assert analyze_message(engine, "") is None
    assert engine.stats()["sentences"] == 0


def test_first_message_reports_top_words_only(engine):
    a = analyze_message(engine, "Hello World")
    assert a.last_word == "world"
    assert a.top_words == ["hello", "world"]
    assert a.completions == []
    assert a.next_word is None
    assert a.related == []
    assert a.reply == "Top words so far: hello, world"


def test_full_reply(engine):
    analyze_message(engine, "the cat sat")
    analyze_message(engine, "the catalog sat on")
    a = analyze_message(engine, "i like the cat")

    assert a.last_word == "cat"
    assert a.completions == ["catalog"]
    assert a.next_word == "sat"
    assert a.related == ["sat"]
    assert a.reply_lines() == [
        "Top words so far: the, cat, sat, catalog, on",
        'Completions for "cat": catalog',
        'Most likely next word after "cat" → "sat"',
        'Related words (graph) from "cat": sat',
    ]


def test_top_n_is_passed_through(engine):
    a = analyze_message(engine, "a b c d e f g", top_n=3)
    assert a.top_words == ["a", "b", "c"]


def test_placeholder_when_nothing_to_say():
    a = Analysis(text="x", last_word="x")
    assert a.reply_lines() == []
    assert a.reply == PLACEHOLDER_REPLY


def test_labels():
    assert format_last_word("cat") == "Last word: cat"
    assert format_last_word("") == "Last word: —"
    assert format_from_word("") == "From last word: —"
