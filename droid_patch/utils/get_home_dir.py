"""Resolve the droid-patch home directory."""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get droid-patch home directory based on DROID_PATCH_HOME or default to ~/.droid-patch."""
    env_home = os.environ.get("DROID_PATCH_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".droid-patch"
