"""Persisted list of known directories and scan exclusions."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_logger import get_logger
from ..errors import ConfigCorruptError, ConfigIOError


class GodirConfig(BaseModel):
    """Known directories and exclusion substrings.

    ``directories`` is kept sorted and free of duplicates by ``update_and_save``;
    every mutation of it must go through that method (or the ``add_*`` helpers).
    """

    model_config = ConfigDict(extra="forbid")

    directories: list[str] = Field(default_factory=list, description="Absolute paths of known directories")
    excludes: list[str] = Field(
        default_factory=list, description="Substrings; any directory whose path contains one is skipped by scans"
    )

    @classmethod
    def load_or_initialize(cls, path: Path) -> "GodirConfig":
        """Load config from ``path``, creating an empty one first if absent.

        A fresh config is written and then read back so the in-memory and
        on-disk representations start identical.

        Raises:
            ConfigCorruptError: If the file is not valid JSON or fails validation
            ConfigIOError: If the file or its parent directory cannot be read or created
        """
        if not path.exists():
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ConfigIOError(f"Failed to create {path.parent}: {e}") from e
            cls().save(path)
            get_logger("config").info("Created empty config at %s", path)

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigCorruptError(path, f"invalid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigCorruptError(path, f"not UTF-8 text: {e}") from e
        except OSError as e:
            raise ConfigIOError(f"Failed to read config {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigCorruptError(path, "top-level value must be an object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigCorruptError(path, detail) from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "directories": list(self.directories),
            "excludes": list(self.excludes),
        }

    def save(self, path: Path) -> None:
        """Write the config to ``path`` as pretty-printed JSON.

        Writes a temp file beside the target and renames it over the target.

        Raises:
            ConfigIOError: On permission or disk failures
        """
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
                fh.write("\n")
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise ConfigIOError(f"Failed to save config {path}: {e}") from e

    def update_and_save(self, path: Path) -> None:
        """Sort and deduplicate ``directories``, then save."""
        self.directories = sorted(set(self.directories))
        self.save(path)
        get_logger("config").debug("Saved %d directories to %s", len(self.directories), path)

    def add_directory(self, path: Path, directory: str) -> bool:
        """Add one directory and persist. Returns False if it was already known."""
        return bool(self.add_directories(path, [directory]))

    def add_directories(self, path: Path, directories: list[str]) -> list[str]:
        """Merge ``directories`` into the known list and persist.

        Returns:
            The entries that were not already known, in the order given
        """
        known = set(self.directories)
        added: list[str] = []
        for directory in directories:
            if directory not in known:
                known.add(directory)
                added.append(directory)
        if added:
            self.directories.extend(added)
            self.update_and_save(path)
            get_logger("config").info("Added %d directories: %s", len(added), ", ".join(added))
        return added
