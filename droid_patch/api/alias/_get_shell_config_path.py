"""Locate the startup file of the user's shell."""

import os
from pathlib import Path


def _get_shell_config_path(shell: str | None = None, home: Path | None = None) -> Path:
    """Return the shell config file that PATH changes should go into.

    zsh uses ~/.zshrc, bash uses ~/.bash_profile when it exists and ~/.bashrc
    otherwise, fish uses ~/.config/fish/config.fish, anything else ~/.profile.
    """
    if shell is None:
        shell = os.environ.get("SHELL") or "/bin/bash"
    if home is None:
        home = Path.home()

    shell_name = Path(shell).name
    if shell_name == "zsh":
        return home / ".zshrc"
    if shell_name == "bash":
        bash_profile = home / ".bash_profile"
        return bash_profile if bash_profile.exists() else home / ".bashrc"
    if shell_name == "fish":
        return home / ".config" / "fish" / "config.fish"
    return home / ".profile"
