"""Helpers for resolving data file locations."""
from __future__ import annotations

import os
from importlib import resources
from pathlib import Path

DEFINITIONS_ENV_VAR = "EXERCHECK_DEFINITIONS"


def get_packaged_definitions_path() -> Path:
    """Return the definitions directory shipped inside the ``exercheck.data`` package."""
    return Path(str(resources.files("exercheck.data") / "definitions"))


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing JSON definition files.

    An explicit ``base_path`` wins, then the ``EXERCHECK_DEFINITIONS`` environment
    variable, then the definitions packaged with ``exercheck.data``.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.getenv(DEFINITIONS_ENV_VAR)
    if override:
        return Path(override)
    return get_packaged_definitions_path()
