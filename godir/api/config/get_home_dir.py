"""Get godir home directory path or path under it."""

import os
from pathlib import Path

from ...constants import GODIR_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get godir home directory path or path under it.

    Checks GODIR_HOME environment variable first, then HOME, and defaults
    to ~/.godir if neither is set.

    Args:
        *parts: Optional path components to join (e.g., "directories.json")

    Returns:
        Absolute path to godir home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/home/user/.godir")
        >>> get_home_dir("directories.json")
        Path("/home/user/.godir/directories.json")
    """
    godir_home_env = os.environ.get("GODIR_HOME")
    if godir_home_env:
        godir_home = Path(godir_home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        if home_env:
            godir_home = Path(home_env) / GODIR_HOME_EXT
        else:
            godir_home = Path.home() / GODIR_HOME_EXT

    return godir_home / Path(*parts) if parts else godir_home
