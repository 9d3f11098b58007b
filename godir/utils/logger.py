import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILENAME

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(godir_home: Path | None = None) -> None:
    """Configure unified godir logging.

    Args:
        godir_home: Path to the godir home directory. If None, derived from environment.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if godir_home is None:
        from ..api.config.get_home_dir import get_home_dir

        godir_home = get_home_dir()

    # Ensure directory exists
    godir_home.mkdir(parents=True, exist_ok=True)
    log_file = godir_home / LOG_FILENAME

    root_logger = logging.getLogger("godir")
    level_name = os.environ.get("GODIR_LOG_LEVEL", "INFO").upper()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
    # Records stay in the logfile; stdout carries only the resolved path
    root_logger.propagate = False

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach godir handlers so the next call to configure_logging starts over."""
    global _CONFIGURED
    root_logger = logging.getLogger("godir")
    for handler in [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]:
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
