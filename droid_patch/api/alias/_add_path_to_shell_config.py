"""Append a PATH line for the aliases directory to a shell config file."""

from pathlib import Path

from ._shell_export_line import _shell_export_line


def _add_path_to_shell_config(shell_config: Path, aliases_dir: Path, shell: str | None = None) -> None:
    """Append the PATH line under a marker comment.

    Raises:
        OSError: If the file cannot be written
    """
    shell_config.parent.mkdir(parents=True, exist_ok=True)
    with shell_config.open("a", encoding="utf-8") as fh:
        fh.write(f"\n# Added by droid-patch\n{_shell_export_line(aliases_dir, shell)}\n")
