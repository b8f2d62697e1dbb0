"""Tests for configuration and logging setup."""

import logging

import pytest

from mood_insights import ConfigurationError, bucket_by_month_day
from mood_insights import config

from conftest import make_entry


def test_default_thresholds():
    """Should default to the 33/67 label thresholds."""
    assert config.NEGATIVE_THRESHOLD == 33
    assert config.POSITIVE_THRESHOLD == 67
    assert config.STATS_PRECISION == 2
    assert config.WEEK_STARTS_ON == "Mon"


def test_validate_config_accepts_defaults():
    """Should accept the shipped configuration."""
    config.validate_config()


def test_validate_config_rejects_inverted_thresholds(monkeypatch):
    """Should reject a negative threshold above the positive one."""
    monkeypatch.setattr(config, "NEGATIVE_THRESHOLD", 80.0)

    with pytest.raises(ConfigurationError, match="thresholds"):
        config.validate_config()


def test_validate_config_rejects_bad_week_start(monkeypatch):
    """Should reject unknown week starts."""
    monkeypatch.setattr(config, "WEEK_STARTS_ON", "Fri")

    with pytest.raises(ConfigurationError, match="MOOD_WEEK_STARTS_ON"):
        config.validate_config()


def test_thresholds_are_read_at_call_time(monkeypatch):
    """Should label with the configured thresholds."""
    monkeypatch.setattr(config, "POSITIVE_THRESHOLD", 80.0)

    day = bucket_by_month_day([make_entry("1", "2024-03-01T12:00:00Z", 80, 70)])[0]

    assert day.mood_label == "neutral"


def test_setup_logging(monkeypatch):
    """Should configure the root logger at the requested level."""
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    config.setup_logging("debug")

    assert calls["level"] == logging.DEBUG
    assert calls["format"] == config.LOG_FORMAT
