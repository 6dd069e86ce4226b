"""Where configuration files are looked up.

Lowest to highest priority:
- system: %PROGRAMDATA%\\buildwatch or /etc/buildwatch
- user: %APPDATA%\\buildwatch, $XDG_CONFIG_HOME/buildwatch, ~/.config/buildwatch
  or ~/.buildwatch
- project: every .buildwatch/ directory from the filesystem root down to the
  project directory, so a repository-wide file can be refined per project
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

CONFIG_FILENAME = "config.yaml"
APP_NAME = "buildwatch"
SHORT_NAME = ".buildwatch"


def _windows_dir(variable: str) -> Path | None:
    base = os.environ.get(variable)
    return Path(base) / APP_NAME / CONFIG_FILENAME if base else None


def get_system_config_path() -> Path | None:
    """System-wide config file. The file may not exist."""
    if sys.platform == "win32":
        return _windows_dir("PROGRAMDATA")
    return Path("/etc") / APP_NAME / CONFIG_FILENAME


def get_user_config_path() -> Path | None:
    """Per-user config file. The file may not exist."""
    if sys.platform == "win32":
        return _windows_dir("APPDATA")

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME / CONFIG_FILENAME

    home = Path.home()
    if (home / ".config").exists():
        return home / ".config" / APP_NAME / CONFIG_FILENAME
    return home / SHORT_NAME / CONFIG_FILENAME


def get_project_config_path(project_dir: str) -> Path:
    """Config file kept next to a project (may not exist)."""
    return Path(project_dir) / SHORT_NAME / CONFIG_FILENAME


def get_project_config_paths(project_dir: str) -> list[Path]:
    """Project config files from the outermost directory to ``project_dir``.

    Only files that exist are returned. The user's home directory is skipped
    since ~/.buildwatch/config.yaml is the user config on some systems.
    """
    directory = Path(project_dir).resolve()
    home = Path.home().resolve()
    paths = [
        get_project_config_path(str(d))
        for d in reversed([directory, *directory.parents])
        if d != home
    ]
    return [p for p in paths if p.is_file()]


def get_config_paths(project_dir: str | None = None) -> list[Path]:
    """All config paths, lowest priority first.

    System and user paths are always listed, project paths only if they
    exist.
    """
    paths = [p for p in (get_system_config_path(), get_user_config_path()) if p]
    if project_dir:
        paths.extend(get_project_config_paths(project_dir))
    return paths
