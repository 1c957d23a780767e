"""Persistent JSON config helpers.

Stores the UI theme, listing display preferences, and the last directory.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .entry import DEFAULT_DATE_FORMAT

LOGGER = logging.getLogger(__name__)

APP_NAME = "walker"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        LOGGER.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON; write errors are logged only."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        LOGGER.warning("could not save config %s: %s", CONFIG_PATH, exc)


def _load_bool(key: str) -> bool:
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def load_theme_name() -> str | None:
    value = load_config().get("theme")
    return value if isinstance(value, str) and value.strip() else None


def load_date_format() -> str:
    """Return the strftime pattern for the modified column."""
    value = load_config().get("date_format")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_DATE_FORMAT
    return value


def load_binary_sizes() -> bool:
    return _load_bool("binary_sizes")


def load_restore_last_directory() -> bool:
    return _load_bool("restore_last_directory")


def load_last_directory() -> Path | None:
    """Return the saved last directory when it still exists."""
    value = load_config().get("last_directory")
    if not isinstance(value, str) or not value:
        return None
    path = Path(value)
    return path if path.is_dir() else None


def save_last_directory(directory: Path) -> None:
    config = load_config()
    config["last_directory"] = str(directory)
    save_config(config)
