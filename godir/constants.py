"""Shared constants for the godir home directory and state file."""

GODIR_HOME_EXT = ".godir"  # user-level state directory

GODIR_HOME_DISPLAY = f"~/{GODIR_HOME_EXT}"  # user-readable path hint

CONFIG_FILENAME = "directories.json"

LOG_FILENAME = "godir.log"

# Marker that starts hidden directory names
HIDDEN_PREFIX = "."

# Inputs treated as a literal path instead of a pattern
CURRENT_DIR_MARKER = "."
PATH_SEPARATORS = ("/", "\\")
