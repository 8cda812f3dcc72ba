"""Locate the lenstr.toml that applies to a CLI run.

Lookup order: the ``--config`` flag, then ``LENSTR_CONFIG``, then the
nearest ``lenstr.toml`` in the working directory or one of its parents.
A flag or variable naming a missing file means "no config", not "keep
searching".
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "lenstr.toml"
CONFIG_ENV_VAR = "LENSTR_CONFIG"


def _existing(path: str | Path) -> Path | None:
    candidate = Path(path)
    return candidate if candidate.is_file() else None


def find_config(start: Path | None = None) -> Path | None:
    """``LENSTR_CONFIG`` if set, else the nearest lenstr.toml above *start* (cwd)."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return _existing(env_path)

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        found = _existing(directory / CONFIG_FILENAME)
        if found is not None:
            return found
    return None


def resolve_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Apply the ``--config`` override on top of :func:`find_config`."""
    if explicit:
        return _existing(explicit)
    return find_config(start)
