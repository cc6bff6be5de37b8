"""Tests for settings file handling."""

import logging

import pytest

from teamwork_search.config import (
    ConfigError,
    default_settings,
    load_settings,
    save_settings,
    search_config_from_settings,
)


def test_missing_file_returns_none(tmp_path):
    assert load_settings(tmp_path / "settings.yaml") is None


def test_empty_file_returns_empty_dict(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("")
    assert load_settings(path) == {}


def test_invalid_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("search: [unclosed")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_settings(path)


def test_non_mapping(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError, match="Expected a mapping"):
        load_settings(path)


def test_save_creates_directory(tmp_path):
    path = tmp_path / "nested" / "settings.yaml"

    save_settings(default_settings(), path)

    assert load_settings(path)["search"]["max_suggestions"] == 5


def test_defaults_build_default_config():
    config = search_config_from_settings(default_settings())
    assert config.debounce_time == 0.3
    assert config.max_suggestions == 5
    assert config.search_on_enter_only is False


def test_no_settings():
    assert search_config_from_settings(None).max_suggestions == 5


def test_overrides_win_and_none_falls_through():
    settings = {"search": {"debounce_time": 0.5, "max_suggestions": 3}}

    config = search_config_from_settings(settings, debounce_time=0.1, max_suggestions=None)

    assert config.debounce_time == 0.1
    assert config.max_suggestions == 3


def test_unknown_keys_are_ignored(caplog):
    settings = {"search": {"colour": "blue", "value": "x", "max_suggestions": 2}}

    with caplog.at_level(logging.WARNING):
        config = search_config_from_settings(settings)

    assert config.max_suggestions == 2
    assert config.controlled is False
    assert "colour" in caplog.text


def test_invalid_values():
    with pytest.raises(ConfigError, match="max_suggestions"):
        search_config_from_settings({"search": {"max_suggestions": -1}})


def test_search_section_must_be_mapping():
    with pytest.raises(ConfigError):
        search_config_from_settings({"search": ["debounce_time"]})


def test_host_only_fields_are_not_read_from_settings(caplog):
    settings = {"search": {"disabled": True, "read_only": True, "auto_focus": True}}

    with caplog.at_level(logging.WARNING):
        config = search_config_from_settings(settings)

    assert config.editable is True
    assert config.auto_focus is False
    assert "disabled" in caplog.text
