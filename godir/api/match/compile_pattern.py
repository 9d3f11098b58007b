"""Compile a user pattern as a regular expression."""

import re

from ..errors import InvalidPatternError
from ..platform.PlatformPolicy import PlatformPolicy


def compile_pattern(pattern: str, policy: PlatformPolicy | None = None) -> re.Pattern[str]:
    """Compile ``pattern`` with the case rule of ``policy``.

    Raises:
        InvalidPatternError: If the pattern is not a valid regular expression
    """
    flags = policy.regex_flags() if policy is not None else 0
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e
