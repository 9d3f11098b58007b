"""Resolve a pattern to a single directory, asking the user when needed."""

from __future__ import annotations

import os
import re
from pathlib import Path

from ...utils.get_logger import get_logger
from ...utils.normalize_path import normalize_path
from ..config.GodirConfig import GodirConfig
from ..display.Display import Display
from ..errors import InvalidPathError
from ..match.compile_pattern import compile_pattern
from ..match.find_matches import find_matches
from ..platform.PlatformPolicy import PlatformPolicy
from ..scan.Scanner import Scanner
from .is_literal_path import is_literal_path
from .Prompter import Prompter
from .resolve_literal_path import resolve_literal_path


class Resolver:
    """Turn user input into one directory path, or nothing.

    One call to ``resolve`` runs the whole interaction:

    1. Literal path (``.`` or anything with a separator): if it is a directory,
       remember it and return it. Otherwise report it and treat the input as a pattern.
    2. Match the pattern against the known directories.
       - One match is returned directly.
       - Several matches are listed and the user picks one by number.
       - No match offers manual entry, then a full scan.

    Only the returned string belongs on the primary output stream; prompts,
    listings and diagnostics go to ``display``.
    """

    def __init__(
        self,
        config_path: Path,
        prompter: Prompter,
        display: Display,
        policy: PlatformPolicy,
        scan_root: Path | None = None,
        follow_symlinks: bool = False,
    ):
        self.config_path = config_path
        self.prompter = prompter
        self.display = display
        self.policy = policy
        self.scan_root = scan_root if scan_root is not None else Path(os.path.abspath(os.sep))
        self.follow_symlinks = follow_symlinks

    def resolve(self, pattern: str) -> str | None:
        """Return the chosen directory, or None when the user gets no answer.

        Raises:
            ConfigCorruptError: If the directory list cannot be parsed
            GodirIOError: If the directory list cannot be written or the scan root read
            InvalidPatternError: If ``pattern`` is not a valid regular expression
        """
        if is_literal_path(pattern):
            try:
                directory = resolve_literal_path(pattern)
            except InvalidPathError as e:
                self.display.error(str(e))
            else:
                return self._remember(str(directory))

        # Compile before touching the config so a bad pattern never writes anything
        regex = compile_pattern(pattern, self.policy)
        config = GodirConfig.load_or_initialize(self.config_path)
        matches = find_matches(config.directories, regex)
        get_logger("resolve").debug("Pattern %r matched %d known directories", pattern, len(matches))

        if not matches:
            return self._fallback(config, pattern, regex)
        if len(matches) == 1:
            return matches[0]
        return self._choose(matches)

    def _remember(self, directory: str) -> str:
        config = GodirConfig.load_or_initialize(self.config_path)
        if config.add_directory(self.config_path, directory):
            self.display.success(f"Added directory to config: {directory}")
        return directory

    def _fallback(self, config: GodirConfig, pattern: str, regex: re.Pattern[str]) -> str | None:
        self.display.warning(f"No matching directories found for pattern: {pattern}")

        if self.prompter.confirm("Would you like to manually enter the directory path? [y/N]"):
            directory = self._manual_directory(self.prompter.ask("Enter the full directory path:"))
            if directory is not None:
                config.add_directory(self.config_path, directory)
                return directory
            self.display.error("Invalid directory path.")

        if not self.prompter.confirm("Would you like to perform a full directory scan? [y/N]"):
            return None
        return self._scan(config, regex)

    @staticmethod
    def _manual_directory(entered: str) -> str | None:
        entered = entered.strip()
        if not entered:
            return None
        try:
            path = normalize_path(entered)
            return str(path) if path.is_dir() else None
        except (OSError, RuntimeError):
            return None

    def _scan(self, config: GodirConfig, regex: re.Pattern[str]) -> str | None:
        self.display.status(f"Scanning directories under {self.scan_root}...")
        handle = self.display.spinner_start("Scanning...")
        scanner = Scanner(
            self.policy,
            excludes=config.excludes,
            progress=lambda directory: self.display.spinner_update(handle, f"Scanning: {directory}"),
            follow_symlinks=self.follow_symlinks,
        )
        try:
            found = scanner.scan(regex, self.scan_root)
        finally:
            self.display.spinner_finish(handle)

        new_matches = config.add_directories(self.config_path, found)
        if not new_matches:
            self.display.warning("No matching directories found after scan.")
            return None

        self.display.success(f"Found {len(new_matches)} new matching directories:")
        for directory in new_matches:
            self.display.info(f"  {directory}")
        if len(new_matches) == 1:
            return new_matches[0]
        return None

    def _choose(self, matches: list[str]) -> str | None:
        self.display.info("Multiple matches found:")
        for number, directory in enumerate(matches, start=1):
            self.display.info(f"{number}: {directory}")

        choice = _parse_choice(self.prompter.ask("Enter the number of the directory to navigate to:"))
        if 1 <= choice <= len(matches):
            return matches[choice - 1]
        self.display.error("Invalid choice.")
        return None


def _parse_choice(answer: str) -> int:
    """Parse a 1-based selection; anything that is not an integer is 0."""
    try:
        return int(answer.strip())
    except ValueError:
        return 0
