"""Check whether a shell config file already adds the aliases directory to PATH."""

from pathlib import Path


def _is_path_configured(shell_config: Path, aliases_dir: Path) -> bool:
    """Return True if ``shell_config`` mentions ``aliases_dir``."""
    if not shell_config.is_file():
        return False
    content = shell_config.read_text(encoding="utf-8", errors="replace")
    return str(aliases_dir) in content or "droid-patch/aliases" in content
