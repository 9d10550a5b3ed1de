"""Check whether a directory is listed in a PATH-style string."""

import os
from pathlib import Path


def _normalize(entry: str | Path) -> str:
    return os.path.normcase(os.path.normpath(str(entry)))


def _path_contains(directory: str | Path, path_env: str | None = None, separator: str = os.pathsep) -> bool:
    """Return True if ``directory`` is one of the entries of ``path_env`` (default: $PATH)."""
    if path_env is None:
        path_env = os.environ.get("PATH", "")
    wanted = _normalize(directory)
    return any(_normalize(entry.strip()) == wanted for entry in path_env.split(separator) if entry.strip())
