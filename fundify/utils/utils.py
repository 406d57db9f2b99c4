"""Generic project helpers."""

import os
from pathlib import Path


def get_project_root() -> Path:
    """Return the project root directory.

    The FUNDIFY_HOME environment variable overrides the location derived
    from the package path.

    Returns:
        Path: Absolute path of the project root.
    """
    override = os.getenv("FUNDIFY_HOME")
    if override:
        return Path(override).expanduser().resolve()
    return Path(__file__).resolve().parents[2]


__all__ = ["get_project_root"]
