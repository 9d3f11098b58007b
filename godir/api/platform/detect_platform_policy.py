"""Detect the platform policy for the running operating system."""

import platform

from .PlatformPolicy import PlatformPolicy

_TRASH = ".Trash"

_MACOS_SKIP = frozenset(
    {
        _TRASH,
        ".Spotlight-V100",
        ".fseventsd",
        "System",
        "Volumes",
        "private",
        "dev",
        "cores",
    }
)

_WINDOWS_SKIP = frozenset(
    {
        "$Recycle.Bin",
        "System Volume Information",
        "Windows",
        "Program Files",
        "Program Files (x86)",
        "ProgramData",
    }
)


def detect_platform_policy(system: str | None = None) -> PlatformPolicy:
    """Build the default policy for ``system`` (defaults to ``platform.system()``).

    macOS and Windows filesystems are case-insensitive by default, so matching
    is too. Everything else is treated as a case-sensitive POSIX filesystem.
    """
    system = (system or platform.system()).lower()
    if system == "darwin":
        return PlatformPolicy(case_insensitive=True, skip_dirnames=_MACOS_SKIP)
    if system == "windows":
        return PlatformPolicy(case_insensitive=True, skip_dirnames=_WINDOWS_SKIP)
    return PlatformPolicy(case_insensitive=False, skip_dirnames=frozenset({_TRASH}))
