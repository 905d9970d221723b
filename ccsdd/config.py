"""User JSON config loading.

Reads the Kiro directory location, git timeout, and log level; never writes.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path, PurePath

from platformdirs import user_config_dir

APP_NAME = "ccsdd"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_KIRO_DIR = ".kiro"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_kiro_dir() -> str:
    """Return the configured Kiro directory, relative to the working directory.

    Only non-empty relative paths are accepted; anything else falls back to
    ``.kiro``.
    """
    value = load_config().get("kiro_dir")
    if not isinstance(value, str):
        return DEFAULT_KIRO_DIR
    stripped = value.strip()
    if not stripped or PurePath(stripped).is_absolute():
        return DEFAULT_KIRO_DIR
    return stripped


def load_git_timeout_seconds() -> float | None:
    """Return the git subprocess timeout, or ``None`` for no timeout.

    Booleans, non-numbers and non-positive values are treated as unset.
    """
    value = load_config().get("git_timeout_seconds")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0:
        return None
    return float(value)


def load_log_level() -> int:
    """Return the configured ``logging`` level for the stderr handler."""
    value = load_config().get("log_level")
    if isinstance(value, str) and value.strip().upper() in LOG_LEVELS:
        return getattr(logging, value.strip().upper())
    return getattr(logging, DEFAULT_LOG_LEVEL)
