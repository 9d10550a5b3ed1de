"""Patch API module - byte-sequence patching of the droid binary."""

from .build_patches import build_patches
from .find_all_positions import find_all_positions
from .KNOWN_PATCHES import KNOWN_PATCHES
from .Patch import Patch
from .PatchEngine import PatchEngine
from .PatchResult import PatchResult
from .PatchRunResult import PatchRunResult

__all__ = [
    "KNOWN_PATCHES",
    "Patch",
    "PatchEngine",
    "PatchResult",
    "PatchRunResult",
    "build_patches",
    "find_all_positions",
]
