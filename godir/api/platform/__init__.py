"""Platform policy API module."""

from .detect_platform_policy import detect_platform_policy
from .PlatformPolicy import PlatformPolicy

__all__ = ["PlatformPolicy", "detect_platform_policy"]
