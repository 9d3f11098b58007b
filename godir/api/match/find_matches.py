"""Filter known directories by a pattern."""

import re

from ..platform.PlatformPolicy import PlatformPolicy
from .compile_pattern import compile_pattern


def find_matches(
    directories: list[str],
    pattern: str | re.Pattern[str],
    policy: PlatformPolicy | None = None,
) -> list[str]:
    """Return the directories that ``pattern`` matches anywhere in the path.

    The search is unanchored and results keep the order of ``directories``.
    A precompiled pattern is used as-is and ``policy`` is ignored for it.

    Raises:
        InvalidPatternError: If a string pattern does not compile
    """
    regex = pattern if isinstance(pattern, re.Pattern) else compile_pattern(pattern, policy)
    return [directory for directory in directories if regex.search(directory)]
