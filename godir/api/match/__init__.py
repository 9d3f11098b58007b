"""Match API module."""

from .compile_pattern import compile_pattern
from .find_matches import find_matches

__all__ = ["compile_pattern", "find_matches"]
