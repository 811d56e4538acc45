"""Shared filesystem path helpers for filesig."""
from __future__ import annotations

import sys
from pathlib import Path

from platformdirs import PlatformDirs

_APP_NAME = "filesig"


def runtime_config_dir() -> Path:
    """Return the per-user configuration directory."""
    roaming = sys.platform in ("win32", "darwin")
    dirs = PlatformDirs(appname=_APP_NAME, appauthor=None, roaming=roaming)
    return Path(dirs.user_config_path)
