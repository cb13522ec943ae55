"""Locating ``offspring.toml``.

``OFFSPRING_CONFIG`` names the file outright. Otherwise the nearest
``offspring.toml`` in the start directory or one of its ancestors wins,
so a project-level file applies to every package below it.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "offspring.toml"
CONFIG_ENV_VAR = "OFFSPRING_CONFIG"


def candidate_paths(start: Path | None = None) -> Iterator[Path]:
    """Yield ``offspring.toml`` locations from *start* (default: cwd) up to the root."""
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start*, or None.

    A set ``OFFSPRING_CONFIG`` disables the walk-up even when the file it
    names does not exist.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        return path if path.is_file() else None
    return next((path for path in candidate_paths(start) if path.is_file()), None)
