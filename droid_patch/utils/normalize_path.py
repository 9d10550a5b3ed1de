"""Normalize a user supplied path."""

from pathlib import Path


def normalize_path(path: str | Path) -> Path:
    """Expand ``~`` and make the path absolute without resolving symlinks."""
    return Path(path).expanduser().absolute()
