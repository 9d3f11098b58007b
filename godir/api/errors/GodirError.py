"""Base class for godir errors."""


class GodirError(Exception):
    """Base class for all errors raised by the godir API."""
