"""godir - fuzzy directory navigation.

Prints a single directory path on stdout so shells can do ``cd "$(godir dev)"``.
"""

__all__: list[str] = []
