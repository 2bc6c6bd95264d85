"""Read-only JSON config helpers.

Holds the UI theme and log level preferences. The file is never written;
malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "envreader"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

THEME_ENV_VAR = "ENVREADER_THEME"
LOG_LEVEL_ENV_VAR = "ENVREADER_LOG_LEVEL"
NO_COLOR_ENV_VAR = "NO_COLOR"


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_string(key: str, env_var: str, environ: Mapping[str, str] | None) -> str | None:
    """Return a stripped string setting, environment variable first."""
    if environ is None:
        environ = os.environ
    value: object = environ.get(env_var)
    if not value:
        value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_theme_name(environ: Mapping[str, str] | None = None) -> str | None:
    """Load the UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme", THEME_ENV_VAR, environ)


def load_log_level(environ: Mapping[str, str] | None = None) -> int | None:
    """Load the logging level; ``None`` keeps file logging disabled."""
    name = _load_string("log_level", LOG_LEVEL_ENV_VAR, environ)
    if name is None:
        return None
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else None


def no_color_requested(environ: Mapping[str, str] | None = None) -> bool:
    """Honor the ``NO_COLOR`` convention: any non-empty value disables color."""
    if environ is None:
        environ = os.environ
    return bool(environ.get(NO_COLOR_ENV_VAR))
