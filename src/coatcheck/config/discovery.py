"""Locate coatcheck.toml.

Order of precedence: an explicit ``--config`` path (handled by
``CoatcheckSettings.from_cli`` before this module is consulted), then the
COATCHECK_CONFIG env var, then a walk up from the current directory.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "coatcheck.toml"
CONFIG_ENV_VAR = "COATCHECK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file to load, or None to run on defaults.

    A set COATCHECK_CONFIG wins outright, even when it points at a missing
    file (None, no fallback to the walk). Otherwise each directory from
    *start* (default: cwd) up to the filesystem root is checked in turn.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None
