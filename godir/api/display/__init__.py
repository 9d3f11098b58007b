"""Display abstraction for godir."""

from .Display import Display

__all__ = ["Display"]
