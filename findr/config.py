"""Persistent JSON config helpers.

Reads output defaults (color preference and palette name).
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "findr"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


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


def load_color() -> bool | None:
    """Return the persisted color preference, or ``None`` when unset/invalid."""
    value = load_config().get("color")
    return value if isinstance(value, bool) else None


def load_theme_name() -> str | None:
    """Load persisted palette name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


__all__ = [
    "CONFIG_PATH",
    "load_color",
    "load_config",
    "load_theme_name",
]
