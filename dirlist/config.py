"""Read-only JSON config with listing defaults.

All access is defensive: malformed or missing config falls back safely.
Command-line flags always override these values. Nothing is written back.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .terminal import COLOR_MODES

APP_NAME = "dirlist"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_COLOR_MODE = "auto"


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


def _load_bool(key: str, data: dict[str, object] | None) -> bool:
    value = (load_config() if data is None else data).get(key)
    return value if isinstance(value, bool) else False


def load_color_mode(data: dict[str, object] | None = None) -> str:
    """Return configured color mode, defaulting to ``auto`` when unset/invalid.

    Reads ``data`` when given instead of loading the config file.
    """
    value = (load_config() if data is None else data).get("color")
    if not isinstance(value, str):
        return DEFAULT_COLOR_MODE
    stripped = value.strip().lower()
    return stripped if stripped in COLOR_MODES else DEFAULT_COLOR_MODE


def load_human_readable(data: dict[str, object] | None = None) -> bool:
    return _load_bool("human_readable", data)


def load_group_directories_first(data: dict[str, object] | None = None) -> bool:
    return _load_bool("group_directories_first", data)


def load_show_almost_all(data: dict[str, object] | None = None) -> bool:
    return _load_bool("show_almost_all", data)


__all__ = [
    "CONFIG_PATH",
    "load_color_mode",
    "load_config",
    "load_group_directories_first",
    "load_human_readable",
    "load_show_almost_all",
]
