# tui_app.py — Text Intelligence chat in the terminal
# -------------------------------------------------------
# Chat on the left, analytics on the right:
#  - every submitted message is learnt by the engine
#  - the bot answers with a summary of what it found for the last word
#  - pill lists show top words, completions and graph successors
# -------------------------------------------------------

from __future__ import annotations
from typing import List, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from text_intelligence.core.engine import TextEngine
from text_intelligence.report import (
    EMPTY_LIST,
    NO_PREDICTION,
    WELCOME_MESSAGE,
    Analysis,
    analyze_message,
    format_from_word,
    format_last_word,
)
from text_intelligence.utils.config_manager import Config
from text_intelligence.utils.logger_utils import Log


class ChatLog(VerticalScroll):
    """Scrolling column of message bubbles."""

    def add_message(self, text: str, sender: str = "user") -> None:
        self.mount(Static(Text(text), classes=f"bubble {sender}"))
        self.scroll_end(animate=False)


class PillList(Static):
    """Words rendered as pills, or a dim "None" when there are none."""

    def set_items(self, items: List[str], secondary: bool = False) -> None:
        if not items:
            self.add_class("empty")
            self.update(Text(EMPTY_LIST, style="dim"))
            return
        self.remove_class("empty")
        style = "black on cyan" if secondary else "black on magenta"
        pills = Text()
        for i, w in enumerate(items):
            if i:
                pills.append(" ")
            pills.append(f" {w} ", style=style)
        self.update(pills)


# Main Application -----------------------------------------------------------------
class TextIntelligenceApp(App):
    """
    UI events -> analyze_message -> `analysis` reactive -> side panel.
    The engine lives as long as the app; there is no save/load.
    """

    CSS_PATH = "tui_style.css"
    TITLE = "Text Intelligence Engine"

    BINDINGS = [
        ("ctrl+l", "clear_chat", "Clear chat"),
    ]

    # last analysis shown in the side panel
    analysis: reactive[Optional[Analysis]] = reactive(None, init=False, always_update=True)

    def __init__(self, engine: Optional[TextEngine] = None, config: Optional[Config] = None):
        super().__init__()
        self.cfg = config or Config()
        # App.log is Textual's own logger
        self.engine_log = Log.from_config(self.cfg)
        self.engine = engine or TextEngine(log=self.engine_log)

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Vertical(id="left"):
                yield ChatLog(id="chat")
                yield Input(placeholder="Type a message and press Enter…", id="user_input")
            with VerticalScroll(id="right"):
                yield Static("Top words", classes="heading")
                yield PillList(id="top_words")
                yield Static("Suggestions", classes="heading")
                yield Static(id="last_prefix_label", classes="label")
                yield PillList(id="suggestions")
                yield Static("Next word", classes="heading")
                yield Static(id="next_word")
                yield Static("Related words", classes="heading")
                yield Static(id="related_label", classes="label")
                yield PillList(id="related_words")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(ChatLog).add_message(WELCOME_MESSAGE, "bot")
        self._render_analysis(None)
        self.query_one(Input).focus()

    # Handle a submitted message ---------------------------------------------------
    def on_input_submitted(self, event: Input.Submitted) -> None:
        text = event.value.strip()
        event.input.value = ""
        if not text:
            return

        chat = self.query_one(ChatLog)
        chat.add_message(text, "user")
        analysis = analyze_message(self.engine, text, top_n=self.cfg.get("top_n"))
        self.analysis = analysis
        chat.add_message(analysis.reply, "bot")

    def watch_analysis(self, analysis: Optional[Analysis]) -> None:
        self._render_analysis(analysis)

    def _render_analysis(self, a: Optional[Analysis]) -> None:
        word = a.last_word if a else ""
        top = a.top_words if a else self.engine.top_words(self.cfg.get("top_n"))
        self.query_one("#top_words", PillList).set_items(top)
        self.query_one("#last_prefix_label", Static).update(Text(format_last_word(word)))
        self.query_one("#suggestions", PillList).set_items(a.completions if a else [], secondary=True)
        nxt = a.next_word if a else None
        self.query_one("#next_word", Static).update(Text(nxt or NO_PREDICTION))
        self.query_one("#related_label", Static).update(Text(format_from_word(word)))
        self.query_one("#related_words", PillList).set_items(a.related if a else [])

    # Actions ----------------------------------------------------------------------
    def action_clear_chat(self) -> None:
        """Ctrl+L = clear the chat log. The corpus is kept."""
        self.query_one(ChatLog).remove_children()


if __name__ == "__main__":
    TextIntelligenceApp().run()
