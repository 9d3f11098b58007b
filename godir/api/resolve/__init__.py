"""Resolve API module."""

from .is_literal_path import is_literal_path
from .Prompter import Prompter
from .resolve_literal_path import resolve_literal_path
from .Resolver import Resolver

__all__ = ["Prompter", "Resolver", "is_literal_path", "resolve_literal_path"]
