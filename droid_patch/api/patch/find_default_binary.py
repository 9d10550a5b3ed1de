"""Locate the droid binary when no path is given."""

from pathlib import Path


def find_default_binary(candidates: list[str]) -> Path:
    """Return the first existing candidate, or the first candidate if none exists."""
    for candidate in candidates:
        path = Path(candidate)
        if path.exists():
            return path
    return Path(candidates[0])
