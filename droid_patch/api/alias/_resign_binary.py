"""Re-sign a copied binary on macOS."""

import platform
import subprocess
from pathlib import Path

from ...utils.logger import get_logger


def _resign_binary(binary_path: Path) -> list[str]:
    """Ad-hoc re-sign ``binary_path`` and clear its quarantine attribute on macOS.

    Modifying a signed Mach-O invalidates its signature, so macOS refuses to run it
    until it is re-signed. No-op on other platforms.

    Returns:
        Warning messages, empty list if everything succeeded
    """
    if platform.system() != "Darwin":
        return []

    logger = get_logger("alias.resign")
    warnings: list[str] = []
    try:
        subprocess.run(
            ["codesign", "--force", "--deep", "--sign", "-", str(binary_path)],
            check=True,
            capture_output=True,
            text=True,
        )
        logger.info(f"Re-signed {binary_path}")
    except (subprocess.CalledProcessError, OSError) as e:
        logger.warning(f"codesign failed for {binary_path}: {e}")
        warnings.append(
            f"Could not re-sign binary. You may need to run: codesign --force --deep --sign - \"{binary_path}\""
        )

    try:
        subprocess.run(["xattr", "-cr", str(binary_path)], check=True, capture_output=True, text=True)
    except (subprocess.CalledProcessError, OSError) as e:
        logger.debug(f"xattr -cr failed for {binary_path}: {e}")

    return warnings
