"""Persisted directory list could not be parsed."""

from pathlib import Path

from .GodirError import GodirError


class ConfigCorruptError(GodirError):
    """The config file exists but is not valid JSON or fails validation."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Config file {path} is corrupt: {detail}")
