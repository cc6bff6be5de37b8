"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from teamwork_search import app as app_module
from teamwork_search.cli import main
from teamwork_search.config import load_settings, settings_path


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def launched(monkeypatch):
    """Capture the config the showcase would be started with."""
    configs = []
    monkeypatch.setattr(app_module, "run", configs.append)
    return configs


def test_init_with_defaults(home):
    result = CliRunner().invoke(main, ["init", "--yes"])

    assert result.exit_code == 0, result.output
    assert "Configuration saved" in result.output
    settings = load_settings(settings_path())
    assert settings["search"]["debounce_time"] == 0.3


def test_init_with_options(home):
    result = CliRunner().invoke(
        main,
        ["init", "--debounce-time", "0.5", "--max-suggestions", "3", "--enter-only", "--yes"],
    )

    assert result.exit_code == 0, result.output
    search = load_settings(settings_path())["search"]
    assert search["debounce_time"] == 0.5
    assert search["max_suggestions"] == 3
    assert search["search_on_enter_only"] is True


def test_init_prompts(home):
    result = CliRunner().invoke(main, ["init"], input="0.4\n7\n")

    assert result.exit_code == 0, result.output
    search = load_settings(settings_path())["search"]
    assert search["debounce_time"] == 0.4
    assert search["max_suggestions"] == 7


def test_init_existing_declined(home):
    runner = CliRunner()
    runner.invoke(main, ["init", "--max-suggestions", "2", "--yes"])

    result = runner.invoke(main, ["init", "--max-suggestions", "9"], input="n\n")

    assert "already exists" in result.output
    assert load_settings(settings_path())["search"]["max_suggestions"] == 2


def test_init_force_overwrites(home):
    runner = CliRunner()
    runner.invoke(main, ["init", "--max-suggestions", "2", "--yes"])

    result = runner.invoke(main, ["init", "--max-suggestions", "9", "--force", "--yes"])

    assert result.exit_code == 0, result.output
    assert load_settings(settings_path())["search"]["max_suggestions"] == 9


def test_init_rejects_invalid_values(home):
    result = CliRunner().invoke(main, ["init", "--max-suggestions", "-1", "--yes"])

    assert result.exit_code == 2
    assert not settings_path().exists()


def test_config_without_file(home):
    result = CliRunner().invoke(main, ["config"])

    assert result.exit_code == 0
    assert "No configuration found" in result.output


def test_config_show(home):
    runner = CliRunner()
    runner.invoke(main, ["init", "--yes"])

    result = runner.invoke(main, ["config", "--show"])

    assert result.exit_code == 0
    assert str(settings_path()) in result.output
    assert "max_suggestions: 5" in result.output


def test_run_overrides_settings(home, launched):
    runner = CliRunner()
    runner.invoke(main, ["init", "--debounce-time", "0.6", "--yes"])

    result = runner.invoke(main, ["run", "--max-suggestions", "2", "--enter-only"])

    assert result.exit_code == 0, result.output
    config = launched[0]
    assert config.debounce_time == 0.6
    assert config.max_suggestions == 2
    assert config.search_on_enter_only is True


def test_no_subcommand_runs_showcase(home, launched):
    result = CliRunner().invoke(main, [])

    assert result.exit_code == 0, result.output
    assert launched[0].max_suggestions == 5


def test_run_with_broken_settings(home, launched):
    path = settings_path()
    path.parent.mkdir(parents=True)
    path.write_text("search: [unclosed")

    result = CliRunner().invoke(main, ["run"])

    assert result.exit_code == 1
    assert "Invalid YAML" in result.output
    assert launched == []
