"""TOML settings loading and profile overlay."""

import json
import logging

import structlog

from stockmetrics.config import Settings, configure_logging, get_settings, load_config
from stockmetrics.config.settings import _deep_merge


def test_defaults_without_config(tmp_path):
    settings = get_settings(config_dir=tmp_path)
    assert settings.vwap_window_minutes == 15.0
    assert settings.logging_level == "INFO"
    assert settings.logging_format == "console"
    assert settings.logging_level_num == logging.INFO


def test_profile_overlay(tmp_path):
    (tmp_path / "default.toml").write_text(
        '[ledger]\nvwap_window_minutes = 15\n\n[logging]\nlevel = "info"\nformat = "json"\n'
    )
    (tmp_path / "dev.toml").write_text('[logging]\nlevel = "debug"\n')
    raw = load_config("dev", config_dir=tmp_path)
    assert raw["logging"] == {"level": "debug", "format": "json"}
    settings = get_settings("dev", config_dir=tmp_path)
    assert settings.logging_level == "DEBUG"
    assert settings.logging_level_num == logging.DEBUG
    assert settings.vwap_window_minutes == 15.0


def test_missing_profile_ignored(tmp_path):
    (tmp_path / "default.toml").write_text("[ledger]\nvwap_window_minutes = 5\n")
    assert get_settings("prod", config_dir=tmp_path).vwap_window_minutes == 5.0


def test_deep_merge_keeps_untouched_keys():
    merged = _deep_merge({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1}


def test_from_dict_empty():
    settings = Settings.from_dict({})
    assert settings.ledger == {}
    assert settings.logging == {}


def test_configure_logging_json_filters_below_level(capsys):
    settings = Settings(logging={"level": "info", "format": "json"})
    try:
        configure_logging(settings)
        logger = structlog.get_logger("stockmetrics.test")
        logger.debug("hidden_event")
        logger.info("shown_event", trades=3)
        lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    finally:
        structlog.reset_defaults()
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["event"] == "shown_event"
    assert payload["trades"] == 3
    assert payload["level"] == "info"
    assert "timestamp" in payload
