from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable, Optional, Union

from jsonstore.domain.errors import ProjectRootNotFoundError

PROJECT_MARKERS = ("pyproject.toml",)


def get_project_root(
    start: Optional[Union[str, Path]] = None,
    markers: Iterable[str] = PROJECT_MARKERS,
) -> Path:
    """
    Return the nearest directory, walking up from ``start`` (default: the
    current working directory), whose listing contains one of ``markers``.

    Raises ProjectRootNotFoundError if the filesystem root is reached first.
    """
    markers = set(markers)
    current = Path(start).expanduser().resolve() if start is not None else Path.cwd()

    while True:
        if any(item.name in markers for item in current.iterdir()):
            return current
        parent = current.parent
        if parent == current:
            raise ProjectRootNotFoundError(
                "Unable to find project root: no "
                f"{', '.join(sorted(markers))} found in any parent directory."
            )
        current = parent


def get_os_config_dir(app_name: str) -> Path:
    """
    Return the per-user config directory for ``app_name`` following the
    conventions of the running operating system.

    * Windows: %APPDATA% (fallback ~/AppData/Roaming)
    * macOS: ~/Library/Application Support
    * Linux and others: $XDG_CONFIG_HOME (fallback ~/.config)
    """
    home = Path.home()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else home / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        base = home / "Library" / "Application Support"
    else:
        xdg = os.environ.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else home / ".config"

    return base / app_name
