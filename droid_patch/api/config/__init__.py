"""Configuration API module."""

from .DroidPatchConfig import DroidPatchConfig
from .LogConfig import LogConfig
from .PatchConfig import PatchConfig

__all__ = ["DroidPatchConfig", "LogConfig", "PatchConfig"]
