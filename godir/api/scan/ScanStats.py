"""Scan stats model."""

from dataclasses import dataclass, field


@dataclass
class ScanStats:
    dirs_visited: int = 0
    dirs_skipped: int = 0
    dirs_excluded: int = 0
    matches: int = 0
    errors: list[str] = field(default_factory=list)
