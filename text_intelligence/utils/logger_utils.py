# logger_utils.py - logging messages and timing metrics

from __future__ import annotations

import sys
import time
from datetime import datetime
from typing import Dict, Literal, Optional, TextIO

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

_LEVELS: Dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """
    Lightweight logger for writing messages and tracking metrics.
    Lines look like: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
    They go to `path` (appended) and/or `stream`, whichever are set.
    """

    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        path: Optional[str] = None,
        stream: Optional[TextIO] = sys.stderr,
        level: LogLevel = "WARNING",
        use_color: bool = False,
    ) -> None:
        self.path = path
        self.stream = stream
        self.use_color = use_color
        self.set_level(level)

    @classmethod
    def from_config(cls, cfg) -> "Log":
        """Build a Log from a Config's log_path, log_level and color."""
        log = cls()
        log.apply_option("log_path", cfg.get("log_path"))
        log.apply_option("log_level", cfg.get("log_level"))
        log.apply_option("color", cfg.get("color"))
        return log

    def apply_option(self, key: str, val) -> None:
        """Apply one config option to a live logger. Other keys are ignored."""
        if key == "log_level":
            self.set_level(val)
        elif key == "log_path":
            self.path = val or None
        elif key == "color":
            self.use_color = bool(val)

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(str(level).upper(), _LEVELS["WARNING"])

    def _write(self, level: LogLevel, msg: str) -> None:
        if _LEVELS[level] < self.level:
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if self.path:
            try:
                with open(self.path, "a", encoding="utf-8") as f:
                    f.write(line + "\n")
            except OSError as e:
                # give up on the file, keep logging to the stream
                bad, self.path = self.path, None
                if self.stream is not None:
                    self.stream.write(f"log file {bad} unwritable, file logging off: {e}\n")

        if self.stream is not None:
            if self.use_color:
                line = f"{self.COLORS[level]}{line}{self.COLORS['RESET']}"
            self.stream.write(line + "\n")

    # Public logging methods
    def debug(self, msg: str) -> None:
        self._write("DEBUG", msg)

    def info(self, msg: str) -> None:
        self._write("INFO", msg)

    def warning(self, msg: str) -> None:
        self._write("WARNING", msg)

    def error(self, msg: str) -> None:
        self._write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> None:
        """Record a metric line, e.g. `ingest done: 0.002s`, at INFO."""
        self.info(f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Measure a code block:
            with log.time_block("ingest") as t:
                engine.ingest(text)
            t.elapsed  # seconds
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used by Log.time_block."""

    def __init__(self, log: Log, label: str) -> None:
        self.log = log
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self) -> "_Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 4), "s")


# shared default, quiet unless something goes wrong
log = Log()
