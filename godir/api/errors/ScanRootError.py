"""Scan root could not be read."""

from pathlib import Path

from .GodirIOError import GodirIOError


class ScanRootError(GodirIOError):
    """The directory a scan starts from could not be listed."""

    def __init__(self, root: Path, cause: OSError):
        self.root = root
        self.cause = cause
        super().__init__(f"Cannot scan {root}: {cause.strerror or cause}")
