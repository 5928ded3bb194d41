"""
cli.py - command line chat for the text intelligence engine
Features:
- Every message you type is learnt, then analysed for its last word
- Bot reply panel plus an analytics table (top words, completions, next word, graph)
- Slash commands for direct queries, stats and config
- Uses Rich for tables and formatting
"""

import json
import shlex
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text
from rich.markup import escape
from rich import box

from text_intelligence.core.engine import TextEngine
from text_intelligence.report import (
    EMPTY_LIST,
    NO_PREDICTION,
    WELCOME_MESSAGE,
    Analysis,
    analyze_message,
    format_last_word,
)
from text_intelligence.utils.config_manager import Config, ConfigError
from text_intelligence.utils.logger_utils import Log
from text_intelligence.utils.metrics_tracker import Metrics

HELP = [
    ("/top [n]", "most frequent words"),
    ("/complete <word>", "known words starting with <word>"),
    ("/next <word>", "most likely next word"),
    ("/related <word>", "words that have followed <word>"),
    ("/stats", "corpus size and timings"),
    ("/config [key val]", "show or change options"),
    ("/export <file>", "write config, stats and timings as JSON"),
    ("/quit", "leave"),
]


class CLI:
    """Command-line chat: reads lines, feeds the engine, prints analytics."""

    def __init__(
        self,
        engine: Optional[TextEngine] = None,
        config: Optional[Config] = None,
        console: Optional[Console] = None,
    ):
        self.cfg = config or Config()
        self.console = console or Console()
        self.log = Log.from_config(self.cfg)
        self.engine = engine or TextEngine(log=self.log)
        self.metrics = Metrics()
        self.running = True

    def run(self):
        """Main loop. EOF or Ctrl+C ends it like /quit."""
        self.console.rule("[bold magenta]Text Intelligence Engine[/bold magenta]")
        self._bot(WELCOME_MESSAGE)
        self.console.print("[dim]Type /help for commands.[/dim]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]You[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            self.handle_line(line)

    def handle_line(self, line: str):
        line = (line or "").strip()
        if not line:
            return
        if line.startswith("/"):
            self._handle_command(line)
        else:
            self._process_message(line)

    # MESSAGES ---------------------------------------------------------------
    def _process_message(self, text: str):
        with self.log.time_block("ingest") as t:
            analysis = analyze_message(self.engine, text, top_n=self.cfg.get("top_n"))
        self.metrics.record("ingest_time", t.elapsed)
        if analysis is None:
            return
        self._bot(analysis.reply)
        self._display_analysis(analysis)

    def _bot(self, msg: str):
        self.console.print(Panel(Text(msg), title="bot", title_align="left", border_style="cyan"))

    def _display_analysis(self, a: Analysis):
        table = Table(title=Text(format_last_word(a.last_word)), box=box.SIMPLE, show_edge=False)
        table.add_column("Analytics", style="cyan")
        table.add_column("Result", style="bold")
        table.add_row("Top words", _join(a.top_words))
        table.add_row("Completions", _join(a.completions))
        table.add_row("Next word", Text(a.next_word or NO_PREDICTION))
        table.add_row("Related (graph)", _join(a.related))
        self.console.print(table)

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, line: str):
        try:
            p = shlex.split(line)
        except ValueError as e:
            self._usage(f"could not parse command: {e}")
            return
        c, args = p[0].lower(), p[1:]

        if c in ("/q", "/quit", "/exit"):
            self._exit()
        elif c == "/help":
            self._show_help()
        elif c == "/top":
            self._cmd_top(args)
        elif c == "/complete":
            self._query(args, "/complete <word>", lambda w: _join(self.engine.completions(w)))
        elif c == "/next":
            self._query(args, "/next <word>", lambda w: Text(self.engine.predict_next(w) or NO_PREDICTION))
        elif c == "/related":
            self._query(args, "/related <word>", lambda w: _join(self.engine.related_words(w)))
        elif c == "/stats":
            self._show_stats()
        elif c == "/config":
            self._cmd_config(args)
        elif c == "/export":
            self._cmd_export(args)
        else:
            self.console.print(f"[red]Unknown command:[/red] {escape(c)}")

    def _cmd_top(self, args: List[str]):
        n = self.cfg.get("top_n")
        if args:
            try:
                n = int(args[0])
            except ValueError:
                self._usage("/top [n]")
                return
        self.console.print(_join(self.engine.top_words(n)))

    def _query(self, args: List[str], usage: str, fn):
        if len(args) != 1:
            self._usage(usage)
            return
        with self.log.time_block("query") as t:
            out = fn(args[0])
        self.metrics.record("query_time", t.elapsed)
        self.console.print(out)

    def _cmd_config(self, args: List[str]):
        if not args:
            table = Table(title="Config", box=box.MINIMAL)
            table.add_column("Option", style="cyan")
            table.add_column("Value")
            for k, v in self.cfg.show():
                table.add_row(k, Text(str(v)))
            self.console.print(table)
            return
        if len(args) != 2:
            self._usage("/config [key val]")
            return
        try:
            val = self.cfg.set(args[0], args[1])
        except ConfigError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return
        except OSError as e:
            self.console.print(f"[red]Could not save config:[/red] {escape(str(e))}")
            return
        self.log.apply_option(args[0], val)
        self.console.print(f"[green]{escape(args[0])}[/green] = {escape(str(val))}")

    def _cmd_export(self, args: List[str]):
        if len(args) != 1:
            self._usage("/export <file>")
            return
        data = {
            "config": self.cfg.data,
            "stats": self.engine.stats(),
            "metrics": self.metrics.as_dict(),
        }
        try:
            with open(args[0], "w", encoding="utf8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            self.log.error(f"export failed: {e}")
            self.console.print(f"[red]Export failed:[/red] {escape(str(e))}")
            return
        self.console.print(Text(f"exported -> {args[0]}"))

    # DISPLAY -------------------------------------------------------------------------------
    def _show_help(self):
        table = Table(title="Commands", box=box.SIMPLE, show_edge=False)
        table.add_column("Command", style="cyan")
        table.add_column("What it does")
        for cmd, desc in HELP:
            table.add_row(escape(cmd), desc)
        self.console.print(table)

    def _show_stats(self):
        t = Table(title="Session Summary", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        for k, v in self.engine.stats().items():
            t.add_row(k, str(v))
        for k in ("ingest_time", "query_time"):
            if self.metrics.count(k):
                t.add_row(f"avg {k}", f"{self.metrics.avg(k) * 1000:.2f} ms")
        self.console.print(t)

    def _usage(self, msg: str):
        self.console.print(f"[red]usage:[/red] {escape(msg)}")

    def _exit(self):
        self.console.rule("[red]bye[/red]")
        self.running = False


def _join(words: List[str]) -> Text:
    # Text, not markup: user words may contain [brackets]
    return Text(", ".join(words) if words else EMPTY_LIST)


if __name__ == "__main__":
    CLI().run()
