# NotesApp
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Platform-specific locations for application data and logs."""

from __future__ import annotations

import os
import sys
from pathlib import Path

__all__ = ["user_data_dir", "user_log_dir"]


def user_data_dir(app_name: str) -> Path:
    """
    Directory holding the application's database.

    - Windows: %LOCALAPPDATA%\\AppName
    - macOS: ~/Library/Application Support/AppName
    - Linux: $XDG_DATA_HOME/AppName (default ~/.local/share/AppName)
    """
    home = Path.home()

    if sys.platform == "win32":
        base = Path(os.environ.get("LOCALAPPDATA", home / "AppData" / "Local"))
        return base / app_name

    elif sys.platform == "darwin":
        return home / "Library" / "Application Support" / app_name

    else:
        xdg_data_home = os.environ.get("XDG_DATA_HOME") or home / ".local" / "share"
        return Path(xdg_data_home) / app_name


def user_log_dir(app_name: str) -> Path:
    """
    Directory for rotating log files.

    - Windows: %LOCALAPPDATA%\\AppName\\logs
    - macOS: ~/Library/Logs/AppName
    - Linux: $XDG_DATA_HOME/AppName/logs
    """
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Logs" / app_name
    return user_data_dir(app_name) / "logs"
