"""Filesystem conventions that differ between operating systems."""

import re
from dataclasses import dataclass, field, replace
from functools import cached_property

from ...constants import HIDDEN_PREFIX


@dataclass(frozen=True)
class PlatformPolicy:
    """Case folding and system skip-list used by matching and scanning.

    Attributes:
        case_insensitive: Match patterns and excludes without regard to case
        skip_dirnames: Directory names never matched nor descended by a scan
        hidden_prefix: Names starting with this marker are hidden
    """

    case_insensitive: bool = False
    skip_dirnames: frozenset[str] = field(default_factory=frozenset)
    hidden_prefix: str = HIDDEN_PREFIX

    def regex_flags(self) -> int:
        return re.IGNORECASE if self.case_insensitive else 0

    def fold(self, text: str) -> str:
        return text.casefold() if self.case_insensitive else text

    def contains(self, haystack: str, needle: str) -> bool:
        return self.fold(needle) in self.fold(haystack)

    def is_excluded(self, path: str, excludes: list[str]) -> bool:
        """True if ``path`` contains any non-empty exclude substring."""
        return any(self.contains(path, excluded) for excluded in excludes if excluded)

    def is_skipped(self, name: str) -> bool:
        """True for hidden names and names on the system skip-list."""
        if name.startswith(self.hidden_prefix):
            return True
        return self.fold(name) in self._folded_skip_dirnames

    @cached_property
    def _folded_skip_dirnames(self) -> frozenset[str]:
        return frozenset(self.fold(skip) for skip in self.skip_dirnames)

    def with_case_insensitive(self, case_insensitive: bool | None) -> "PlatformPolicy":
        """Copy with case sensitivity overridden; ``None`` keeps the current value."""
        if case_insensitive is None or case_insensitive == self.case_insensitive:
            return self
        return replace(self, case_insensitive=case_insensitive)
