"""Recursive directory scanner."""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from pathlib import Path

from ...utils.get_logger import get_logger
from ..errors import ScanRootError
from ..match.compile_pattern import compile_pattern
from ..platform.PlatformPolicy import PlatformPolicy
from .ScanStats import ScanStats


class Scanner:
    """Walk a directory tree collecting directories whose path matches a pattern.

    The walk is depth-first pre-order over an explicit stack, so tree depth is
    not limited by the interpreter recursion limit. Children are visited in
    sorted name order. Hidden, skip-listed and excluded directories are pruned
    along with their subtrees.

    Symbolic links are not followed unless ``follow_symlinks`` is set; then each
    directory is visited at most once, keyed by ``(st_dev, st_ino)``.
    """

    def __init__(
        self,
        policy: PlatformPolicy,
        excludes: list[str] | None = None,
        progress: Callable[[str], None] | None = None,
        follow_symlinks: bool = False,
    ):
        self.policy = policy
        self.excludes = list(excludes or [])
        self.progress = progress
        self.follow_symlinks = follow_symlinks
        self._stats = ScanStats()

    @property
    def stats(self) -> ScanStats:
        return self._stats

    def scan(self, pattern: str | re.Pattern[str], root: Path) -> list[str]:
        """Return matching directories under ``root`` (the root itself is never reported).

        Raises:
            InvalidPatternError: If a string pattern does not compile
            ScanRootError: If ``root`` cannot be listed
        """
        regex = pattern if isinstance(pattern, re.Pattern) else compile_pattern(pattern, self.policy)
        self._stats = ScanStats()
        logger = get_logger("scan")
        root_str = str(root)
        matches: list[str] = []

        if self.policy.is_excluded(root_str, self.excludes):
            self._stats.dirs_excluded += 1
            logger.info("Scan root %s is excluded", root_str)
            return matches

        seen: set[tuple[int, int]] = set()
        if self.follow_symlinks:
            self._mark_seen(root_str, seen)

        # Root errors abort the scan; subtree errors are recorded and skipped
        stack: list[str] = list(reversed(self._list_children(root_str, seen, is_root=True)))
        while stack:
            current = stack.pop()
            if regex.search(current):
                matches.append(current)
            try:
                children = self._list_children(current, seen, is_root=False)
            except OSError as e:
                self._stats.errors.append(f"Cannot read {current}: {e.strerror or e}")
                logger.debug("Skipping unreadable directory %s: %s", current, e)
                continue
            stack.extend(reversed(children))

        self._stats.matches = len(matches)
        logger.info(
            "Scanned %d directories under %s: %d matches, %d skipped, %d excluded, %d unreadable",
            self._stats.dirs_visited,
            root_str,
            len(matches),
            self._stats.dirs_skipped,
            self._stats.dirs_excluded,
            len(self._stats.errors),
        )
        return matches

    def _list_children(self, directory: str, seen: set[tuple[int, int]], is_root: bool) -> list[str]:
        """Visit ``directory`` and return the child directories to walk, in name order."""
        self._stats.dirs_visited += 1
        if self.progress is not None:
            self.progress(directory)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            if is_root:
                raise ScanRootError(Path(directory), e) from e
            raise

        children: list[str] = []
        for entry in entries:
            try:
                if not entry.is_dir(follow_symlinks=self.follow_symlinks):
                    continue
            except OSError:
                continue
            if self.policy.is_skipped(entry.name):
                self._stats.dirs_skipped += 1
                continue
            if self.policy.is_excluded(entry.path, self.excludes):
                self._stats.dirs_excluded += 1
                continue
            if self.follow_symlinks and not self._mark_seen(entry.path, seen):
                continue
            children.append(entry.path)
        return children

    @staticmethod
    def _mark_seen(path: str, seen: set[tuple[int, int]]) -> bool:
        """Record the identity of ``path``; False if it was already visited."""
        try:
            st = os.stat(path)
        except OSError:
            return False
        key = (st.st_dev, st.st_ino)
        if key in seen:
            return False
        seen.add(key)
        return True
