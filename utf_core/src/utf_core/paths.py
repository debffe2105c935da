"""Filesystem locations used by the utf-core command line tool."""
from __future__ import annotations

import sys
from pathlib import Path

from platformdirs import PlatformDirs

_APP_NAME = "utf-core"


def runtime_config_dir() -> Path:
    """Return the per-user configuration directory."""
    roaming = sys.platform in {"win32", "darwin"}
    dirs = PlatformDirs(appname=_APP_NAME, appauthor=None, roaming=roaming)
    return Path(dirs.user_config_path)


def local_config_path() -> Path:
    return Path.cwd() / ".utf-core" / "config.yaml"
