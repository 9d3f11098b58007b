"""Scan API module."""

from .scan_directories import scan_directories
from .Scanner import Scanner
from .ScanStats import ScanStats

__all__ = ["ScanStats", "Scanner", "scan_directories"]
