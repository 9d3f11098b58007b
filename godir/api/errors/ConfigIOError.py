"""Config file could not be read or written."""

from .GodirIOError import GodirIOError


class ConfigIOError(GodirIOError):
    """Reading or writing the config file failed."""
