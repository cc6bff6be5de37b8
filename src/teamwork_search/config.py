"""Settings file handling.

Settings live in ``~/.teamwork-search/settings.yaml``:

    version: "1.0"
    search:
      debounce_time: 0.3
      max_suggestions: 5
      search_on_enter_only: false
      highlight_matches: true
"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from .controller import SearchConfig

logger = logging.getLogger(__name__)

SETTINGS_VERSION = "1.0"

# Per-input host state never read from a settings file
HOST_ONLY_FIELDS = ("value", "initial_value", "disabled", "read_only", "auto_focus")

# Fields a settings file may set
CONFIGURABLE_FIELDS = frozenset(
    f.name for f in fields(SearchConfig) if f.name not in HOST_ONLY_FIELDS
)


class ConfigError(ValueError):
    """Raised when a settings file cannot be used."""


def config_dir() -> Path:
    return Path.home() / ".teamwork-search"


def settings_path() -> Path:
    return config_dir() / "settings.yaml"


def default_settings() -> dict[str, Any]:
    """Settings matching SearchConfig defaults."""
    defaults = SearchConfig()
    return {
        "version": SETTINGS_VERSION,
        "search": {
            "debounce_time": defaults.debounce_time,
            "max_suggestions": defaults.max_suggestions,
            "search_on_enter_only": defaults.search_on_enter_only,
            "highlight_matches": defaults.highlight_matches,
        },
    }


def load_settings(path: Path | None = None) -> dict[str, Any] | None:
    """Load the settings file.

    Args:
        path: Settings file (defaults to ~/.teamwork-search/settings.yaml)

    Returns:
        The parsed settings, or None if the file does not exist

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping
    """
    path = path or settings_path()
    if not path.exists():
        return None

    try:
        with open(path) as f:
            settings = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if settings is None:
        return {}
    if not isinstance(settings, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(settings).__name__}")
    return settings


def save_settings(settings: dict[str, Any], path: Path | None = None) -> Path:
    """Write settings, creating the directory if needed."""
    path = path or settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(settings, f, default_flow_style=False, sort_keys=False)
    return path


def search_config_from_settings(
    settings: dict[str, Any] | None, **overrides: Any
) -> SearchConfig:
    """Build a SearchConfig from settings plus explicit overrides.

    Overrides whose value is None are ignored, so unset CLI options fall
    through to the file.

    Raises:
        ConfigError: If the resulting values are invalid
    """
    section = (settings or {}).get("search") or {}
    if not isinstance(section, dict):
        raise ConfigError("'search' section must be a mapping")

    values: dict[str, Any] = {}
    for key, value in section.items():
        if key not in CONFIGURABLE_FIELDS:
            logger.warning(f"Ignoring unknown search setting: {key}")
            continue
        values[key] = value
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return SearchConfig(**values)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid search settings: {e}") from e
