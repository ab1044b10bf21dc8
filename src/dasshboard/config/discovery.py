"""Config file discovery.

Looks for ``dasshboard.toml`` in the per-user config directory. The
DASSHBOARD_CONFIG env var and the --config CLI flag override the location.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

CONFIG_FILENAME = "dasshboard.toml"
CONFIG_ENV_VAR = "DASSHBOARD_CONFIG"
APP_DIRNAME = "dasshboard"


def default_config_dir() -> Path:
    """Per-user directory holding the config file and the settings store.

    ``%APPDATA%\\dasshboard`` on Windows, ``$XDG_CONFIG_HOME/dasshboard``
    (default ``~/.config/dasshboard``) elsewhere.
    """
    if sys.platform == "win32" and os.environ.get("APPDATA"):
        return Path(os.environ["APPDATA"]) / APP_DIRNAME
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / APP_DIRNAME


def find_config(config_dir: Path | None = None) -> Path | None:
    """Locate dasshboard.toml.

    Checks DASSHBOARD_CONFIG first, then *config_dir* (default:
    :func:`default_config_dir`). Returns None if no file exists.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path).expanduser()
        if p.is_file():
            return p
        return None

    candidate = (config_dir or default_config_dir()) / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None
