"""Shell line that prepends a directory to PATH."""

import os
from pathlib import Path


def _shell_export_line(directory: Path, shell: str | None = None) -> str:
    """Return the PATH line for ``shell`` (fish_add_path for fish, export otherwise)."""
    if shell is None:
        shell = os.environ.get("SHELL") or "/bin/bash"
    if Path(shell).name == "fish":
        return f'fish_add_path "{directory}"'
    return f'export PATH="{directory}:$PATH"'
