"""Config API module."""

from .GodirConfig import GodirConfig
from .get_config_path import get_config_path
from .get_home_dir import get_home_dir

__all__ = ["GodirConfig", "get_config_path", "get_home_dir"]
