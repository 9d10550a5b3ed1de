"""Turn CLI patch flags into an ordered patch list."""

from .KNOWN_PATCHES import IS_CUSTOM, SKIP_LOGIN
from .Patch import Patch


def build_patches(is_custom: bool = False, skip_login: bool = False) -> list[Patch]:
    """Return the selected known patches in flag order."""
    patches: list[Patch] = []
    if is_custom:
        patches.append(IS_CUSTOM)
    if skip_login:
        patches.append(SKIP_LOGIN)
    return patches
