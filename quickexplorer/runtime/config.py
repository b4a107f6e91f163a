"""Persistent JSON config helpers.

Stores the ``defaultPath`` override and the ``defaultSortOrder`` preference.
Reads are defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "quickexplorer"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_PATH_KEY = "defaultPath"
DEFAULT_SORT_ORDER_KEY = "defaultSortOrder"

logger = logging.getLogger(__name__)


def load_config(config_path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    path = config_path if config_path is not None else CONFIG_PATH
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object], config_path: Path | None = None) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored so a read-only config
    directory never breaks navigation.
    """
    path = config_path if config_path is not None else CONFIG_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not write config %s: %s", path, exc)


class JsonConfigStore:
    """String key/value store backed by the JSON config file.

    ``path=None`` follows the module-level ``CONFIG_PATH`` at call time.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path

    def get(self, key: str, default: str = "") -> str:
        value = load_config(self.path).get(key)
        return value if isinstance(value, str) else default

    def set(self, key: str, value: str) -> None:
        config = load_config(self.path)
        config[key] = str(value)
        save_config(config, self.path)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_PATH_KEY",
    "DEFAULT_SORT_ORDER_KEY",
    "JsonConfigStore",
    "load_config",
    "save_config",
]
