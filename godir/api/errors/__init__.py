"""Error hierarchy for the godir API."""

from .ConfigCorruptError import ConfigCorruptError
from .ConfigIOError import ConfigIOError
from .GodirError import GodirError
from .GodirIOError import GodirIOError
from .InvalidPathError import InvalidPathError
from .InvalidPatternError import InvalidPatternError
from .ScanRootError import ScanRootError

__all__ = [
    "ConfigCorruptError",
    "ConfigIOError",
    "GodirError",
    "GodirIOError",
    "InvalidPathError",
    "InvalidPatternError",
    "ScanRootError",
]
