"""Get path to the godir directory list."""

from pathlib import Path

from ...constants import CONFIG_FILENAME
from .get_home_dir import get_home_dir


def get_config_path() -> Path:
    """Get path to the godir directory list."""
    return get_home_dir(CONFIG_FILENAME)
