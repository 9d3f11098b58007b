"""Pattern does not compile as a regular expression."""

from .GodirError import GodirError


class InvalidPatternError(GodirError, ValueError):
    """The user pattern is not a valid regular expression."""

    def __init__(self, pattern: str, detail: str):
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid regex pattern {pattern!r}: {detail}")
