"""Decide whether user input names a path rather than a pattern."""

from ...constants import CURRENT_DIR_MARKER, PATH_SEPARATORS


def is_literal_path(text: str) -> bool:
    """True for the current-directory marker or any input containing a path separator."""
    return text == CURRENT_DIR_MARKER or any(sep in text for sep in PATH_SEPARATORS)
