"""API module for godir.

Functions defined here are the single source of truth for the CLI; the CLI layer
only parses arguments and renders results.
"""

__all__ = []
