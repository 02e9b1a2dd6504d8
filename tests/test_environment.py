"""Tests for OOPDEMOS_* settings."""

import pytest

from oopdemos.environment import DemoSettings, default_console


def test_defaults_with_empty_environment():
    settings = DemoSettings.from_env({})
    assert settings == DemoSettings(seed=None, log_level="INFO", no_color=False)


def test_reads_prefixed_variables():
    settings = DemoSettings.from_env(
        {"OOPDEMOS_SEED": "42", "OOPDEMOS_LOG_LEVEL": "debug", "OOPDEMOS_NO_COLOR": "yes"}
    )
    assert settings.seed == 42
    assert settings.log_level == "DEBUG"
    assert settings.no_color is True


def test_blank_values_are_unset():
    assert DemoSettings.from_env({"OOPDEMOS_SEED": "  "}).seed is None


def test_bad_seed_raises():
    with pytest.raises(ValueError):
        DemoSettings.from_env({"OOPDEMOS_SEED": "abc"})


def test_unknown_log_level_raises():
    with pytest.raises(ValueError, match="Unknown log level"):
        DemoSettings.from_env({"OOPDEMOS_LOG_LEVEL": "LOUD"})


def test_seeded_rng_is_repeatable():
    settings = DemoSettings(seed=9)
    assert settings.rng().random() == settings.rng().random()


def test_default_console_honours_no_color(monkeypatch):
    monkeypatch.setenv("OOPDEMOS_NO_COLOR", "1")
    assert default_console().no_color is True
    monkeypatch.delenv("OOPDEMOS_NO_COLOR")
    assert default_console().no_color is False
