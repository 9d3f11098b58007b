"""Scan a directory tree for directories matching a pattern."""

from collections.abc import Callable
from pathlib import Path

from ..platform.detect_platform_policy import detect_platform_policy
from ..platform.PlatformPolicy import PlatformPolicy
from .Scanner import Scanner


def scan_directories(
    pattern: str,
    root: Path,
    excludes: list[str],
    policy: PlatformPolicy | None = None,
    progress: Callable[[str], None] | None = None,
    follow_symlinks: bool = False,
) -> list[str]:
    """Return directories under ``root`` whose absolute path matches ``pattern``.

    Args:
        pattern: Regular expression searched anywhere in each path
        root: Directory to start from; it is not itself reported
        excludes: Substrings that prune any directory whose path contains them
        policy: Case rule and skip-list, detected from the OS when omitted
        progress: Called with each directory as it is visited
        follow_symlinks: Descend into symlinked directories (cycle-safe)

    Raises:
        InvalidPatternError: If the pattern does not compile
        ScanRootError: If ``root`` cannot be listed
    """
    scanner = Scanner(
        policy or detect_platform_policy(),
        excludes=excludes,
        progress=progress,
        follow_symlinks=follow_symlinks,
    )
    return scanner.scan(pattern, root)
