"""User-supplied literal path is not a directory."""

from .GodirError import GodirError


class InvalidPathError(GodirError):
    """A literal path given by the user does not name an existing directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Not a valid directory: {path}")
