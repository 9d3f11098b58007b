"""Filesystem failure outside a context where it may be skipped."""

from .GodirError import GodirError


class GodirIOError(GodirError):
    """Read, write or permission failure that aborts the current invocation."""
