"""Path helpers for the status line."""

from __future__ import annotations

from pathlib import PurePosixPath, PureWindowsPath

PLACEHOLDER = "?"


def dir_basename(path: str) -> str:
    """Return the last component of a path.

    Backslash separated paths are treated as Windows paths.

    Args:
        path: Absolute or relative directory path

    Returns:
        Final path component, or "?" if there is none
    """
    if not path:
        return PLACEHOLDER

    pure = PureWindowsPath(path) if "\\" in path else PurePosixPath(path)
    name = pure.name
    if not name or name == "..":
        return PLACEHOLDER
    return name


def shorten_path(path: str, home: str | None) -> str:
    """Replace a leading home directory with ``~``.

    This is a plain prefix substitution; nothing is resolved or normalized.

    Args:
        path: Path to shorten
        home: Home directory, or None if unknown

    Returns:
        Shortened path, or the path unchanged
    """
    if not home or not path.startswith(home):
        return path
    return f"~{path[len(home):]}"
