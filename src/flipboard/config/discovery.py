"""Locate the ``flipboard.toml`` in effect.

``FLIPBOARD_CONFIG`` names a file directly; otherwise the nearest
``flipboard.toml`` in the start directory or one of its parents wins.
Parsing belongs to :class:`flipboard.config.settings.TomlSettingsSource`.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "flipboard.toml"
CONFIG_ENV_VAR = "FLIPBOARD_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: CWD), or None.

    A ``FLIPBOARD_CONFIG`` pointing at a missing file disables discovery
    rather than falling back to the directory search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
