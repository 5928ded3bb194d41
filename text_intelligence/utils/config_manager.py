# config_manager.py - JSON config manager

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional, Tuple

from .logger_utils import log

DEFAULTS: Dict[str, Any] = {
    "top_n": 5,  # how many top words the analytics show
    "log_level": "WARNING",
    "log_path": "",  # "" = no log file
    "color": True,
}


class ConfigError(ValueError):
    """Unknown option or a value that can't be coerced."""


class Config:
    """
    Options with defaults, optionally backed by a JSON file.
    path=None keeps everything in memory and never touches disk.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        if path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log.warning(f"config {self.path} unreadable, using defaults: {e}")
            return
        if not isinstance(raw, dict):
            log.warning(f"config {self.path} is not an object, using defaults")
            return
        for k, v in raw.items():
            if k not in self.data:
                log.warning(f"config: ignoring unknown option {k!r}")
                continue
            try:
                self.data[k] = _coerce(self.data[k], v)
            except ConfigError as e:
                log.warning(f"config: {e}")

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        return self.data[key]

    def show(self) -> List[Tuple[str, Any]]:
        return list(self.data.items())

    def set(self, key: str, val: Any) -> Any:
        """Set an option, coerced to the type of its default. Returns the new value.
        If saving fails the old value is kept and the OSError propagates."""
        if key not in self.data:
            raise ConfigError(f"no such option: {key}")
        old = self.data[key]
        self.data[key] = _coerce(old, val)
        try:
            self.save()
        except OSError:
            self.data[key] = old
            raise
        return self.data[key]


def _coerce(current: Any, val: Any) -> Any:
    kind = type(current)
    if kind is bool:
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in ("1", "true", "yes", "on"):
            return True
        if s in ("0", "false", "no", "off"):
            return False
        raise ConfigError(f"bad boolean: {val!r}")
    if kind is int:
        if isinstance(val, bool):
            raise ConfigError(f"bad integer: {val!r}")
        try:
            return int(val)
        except (TypeError, ValueError):
            raise ConfigError(f"bad integer: {val!r}") from None
    return str(val)
