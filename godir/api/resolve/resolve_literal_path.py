"""Resolve a literal path given on the command line."""

from pathlib import Path

from ...constants import CURRENT_DIR_MARKER
from ..errors import GodirIOError, InvalidPathError


def resolve_literal_path(text: str, cwd: Path | None = None) -> Path:
    """Resolve ``text`` to an existing directory.

    ``.`` is the working directory, a leading ``~`` is expanded, absolute paths
    are kept and relative paths are joined to the working directory and
    canonicalized.

    Raises:
        InvalidPathError: If the result is not an existing directory, or cannot be
            inspected (name too long, symlink loop)
        GodirIOError: If the working directory cannot be determined
    """
    try:
        base = cwd if cwd is not None else Path.cwd()
    except OSError as e:
        raise GodirIOError(f"Cannot determine current directory: {e}") from e

    if text == CURRENT_DIR_MARKER:
        path = base
    else:
        try:
            candidate = Path(text).expanduser()
            path = candidate.absolute() if candidate.is_absolute() else (base / candidate).resolve()
        except (OSError, RuntimeError) as e:
            raise InvalidPathError(text) from e

    try:
        is_dir = path.is_dir()
    except OSError as e:
        raise InvalidPathError(str(path)) from e
    if not is_dir:
        raise InvalidPathError(str(path))
    return path
