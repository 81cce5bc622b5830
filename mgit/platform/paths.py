"""Platform-aware path utilities.

Only the user-level configuration directory is needed: mgit keeps no
state of its own, everything else lives in the target repositories.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

__all__ = [
    "home",
    "user_config_dir",
]

APP_NAME = "mgit"


@lru_cache(maxsize=1)
def home() -> Path:
    """Get user's home directory.

    Uses USERPROFILE on Windows, HOME on Unix, then Path.home().
    """
    if os.name == "nt":
        userprofile = os.environ.get("USERPROFILE")
        if userprofile:
            return Path(userprofile)
    else:
        home_env = os.environ.get("HOME")
        if home_env:
            return Path(home_env)

    return Path.home()


@lru_cache(maxsize=1)
def user_config_dir() -> Path:
    """Get the user-level configuration directory.

    Location: $XDG_CONFIG_HOME/mgit or ~/.config/mgit (Linux/macOS),
    %APPDATA%/mgit (Windows).
    """
    if os.name == "nt":
        app_data = os.environ.get("APPDATA")
        if app_data:
            return Path(app_data) / APP_NAME
        return home() / "AppData" / "Roaming" / APP_NAME

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME
    return home() / ".config" / APP_NAME


def clear_caches() -> None:
    """Clear cached paths (tests change HOME / XDG_CONFIG_HOME)."""
    home.cache_clear()
    user_config_dir.cache_clear()
