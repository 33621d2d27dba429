"""IO utilities for settings loading and notes file detection."""

import copy
import functools
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from src.utils.logging_utils import DEFAULT_FORMAT, get_logger

logger = get_logger(__name__)

NOTES_PATH_ENV = "RS_NOTES_PATH"

DEFAULTS: dict[str, Any] = {
    "app": {
        "title": "Daily Research Summary",
        "page_icon": "📝",
        "layout": "wide",
    },
    "data": {
        "notes_path": None,
    },
    "export": {
        "filename": "research-summary.json",
        "indent": 2,
    },
    "logging": {
        "level": "INFO",
        "format": DEFAULT_FORMAT,
        "file": "research_summary.log",
    },
}


def _deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    for key, value in update.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


@functools.lru_cache(maxsize=1)
def load_settings(path: str) -> dict[str, Any]:
    """Load settings from YAML file with defaults.

    This function is cached to prevent repeated file I/O and parsing.
    Use reload_settings() to force a fresh load.

    Args:
        path: Path to settings YAML file

    Returns:
        Dictionary with settings (user config merged over defaults)

    """
    logger.debug(f"Loading settings from {path}")

    defaults = copy.deepcopy(DEFAULTS)
    try:
        with open(path, encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
        if not isinstance(user_config, dict):
            raise ValueError(f"top-level YAML value must be a mapping, got {type(user_config).__name__}")
        return _deep_merge(defaults, user_config)

    except FileNotFoundError:
        logging.warning(f"Settings file not found: {path}. Using defaults.")
        return defaults
    except Exception as e:
        logging.exception(f"Error loading settings: {e}. Using defaults.")
        return defaults


def reload_settings(path: str) -> dict[str, Any]:
    """Force reload settings from file (clears cache).

    Args:
        path: Path to settings YAML file

    Returns:
        Freshly loaded settings

    """
    load_settings.cache_clear()
    return load_settings(path)


def get_notes_path(settings: dict[str, Any]) -> Optional[str]:
    """Resolve the configured notes file.

    Precedence: RS_NOTES_PATH env var > data.notes_path > None (built-in sample).
    """
    env_path = os.environ.get(NOTES_PATH_ENV, "").strip()
    if env_path:
        return env_path
    configured = settings.get("data", {}).get("notes_path")
    return str(configured) if configured else None


def detect_file_format(path: str) -> str:
    """Detect notes file format based on extension.

    Args:
        path: File path to analyze

    Returns:
        File format string: 'csv', 'json', 'yaml', or 'unsupported'
    """
    suffix = Path(path).suffix.lower()

    if suffix == ".csv":
        return "csv"
    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"
    return "unsupported"
