# tests/test_utils.py - config, logger and metrics helpers

import io
import json

import pytest

from text_intelligence.utils.config_manager import DEFAULTS, Config, ConfigError
from text_intelligence.utils.logger_utils import Log
from text_intelligence.utils.metrics_tracker import Metrics


# Config ---------------------------------------------------------------
def test_in_memory_config_has_defaults_and_writes_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = Config()
    cfg.set("top_n", "7")
    assert cfg.get("top_n") == 7
    assert list(tmp_path.iterdir()) == []
    assert dict(Config().show()) == DEFAULTS


def test_file_config_round_trip(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    cfg.set("color", "off")
    cfg.set("top_n", 3)
    again = Config(str(path))
    assert again.get("color") is False
    assert again.get("top_n") == 3


def test_set_rejects_unknown_and_bad_values():
    cfg = Config()
    with pytest.raises(ConfigError):
        cfg.set("theme", "dark")
    with pytest.raises(ConfigError):
        cfg.set("top_n", "five")
    with pytest.raises(ConfigError):
        cfg.set("color", "maybe")
    assert cfg.get("top_n") == 5


def test_broken_config_file_falls_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf8")
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS


def test_config_file_ignores_unknown_and_bad_entries(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"top_n": "x", "extra": 1, "log_level": "INFO"}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("top_n") == 5
    assert cfg.get("log_level") == "INFO"
    assert "extra" not in cfg.data


# Log ------------------------------------------------------------------
def test_log_threshold_and_format():
    buf = io.StringIO()
    log = Log(stream=buf, level="INFO")
    log.debug("hidden")
    log.info("shown")
    log.error("bad")
    lines = buf.getvalue().splitlines()
    assert len(lines) == 2
    assert "INFO    | shown" in lines[0]
    assert "ERROR   | bad" in lines[1]


def test_log_to_file(tmp_path):
    path = tmp_path / "app.log"
    log = Log(path=str(path), stream=None, level="DEBUG")
    log.debug("to file")
    assert "DEBUG   | to file" in path.read_text(encoding="utf-8")


def test_time_block_records_elapsed():
    buf = io.StringIO()
    log = Log(stream=buf, level="INFO")
    with log.time_block("work") as t:
        sum(range(1000))
    assert t.elapsed >= 0
    assert "work done:" in buf.getvalue()


def test_unknown_level_defaults_to_warning():
    log = Log(stream=None, level="loud")
    assert log.level == 30


# Metrics ---------------------------------------------------------------
def test_metrics_average():
    m = Metrics()
    assert m.avg("x") == 0.0
    m.record("x", 1.0)
    m.record("x", 3.0)
    assert m.avg("x") == 2.0
    assert m.count("x") == 2
    assert m.as_dict() == {"x": {"avg": 2.0, "count": 2}}


def test_unwritable_log_path_falls_back_to_stream(tmp_path):
    buf = io.StringIO()
    log = Log(path=str(tmp_path / "nope" / "x.log"), stream=buf, level="DEBUG")
    log.info("first")
    log.info("second")
    text = buf.getvalue()
    assert log.path is None
    assert text.count("unwritable") == 1
    assert "INFO    | first" in text and "INFO    | second" in text


def test_log_from_config_and_apply_option(tmp_path):
    cfg = Config()
    cfg.set("log_level", "debug")
    cfg.set("color", "off")
    log = Log.from_config(cfg)
    assert log.level == 10
    assert log.path is None
    assert log.use_color is False

    log.apply_option("log_path", str(tmp_path / "a.log"))
    log.apply_option("color", True)
    log.apply_option("top_n", 3)
    assert log.path == str(tmp_path / "a.log")
    assert log.use_color is True


def test_failed_save_keeps_old_value(tmp_path):
    cfg = Config(str(tmp_path / "missing" / "config.json"))
    with pytest.raises(OSError):
        cfg.set("top_n", 9)
    assert cfg.get("top_n") == 5
