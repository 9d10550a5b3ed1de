"""Alias configuration with Pydantic validation."""

import platform
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils.get_home_dir import get_home_dir
from ...utils.normalize_path import normalize_path

# Installer strategies (ONLY place installer types are enumerated)
_INSTALLER_TYPES: tuple[str, ...] = ("symlink", "launcher")

# Directories that are commonly on PATH, in priority order
_UNIX_PATH_DIRS = [
    "~/.local/bin",
    "~/bin",
    "~/.bin",
    "/opt/homebrew/bin",
    "/usr/local/bin",
    "~/.npm-global/bin",
    "~/.npm/bin",
    "~/.pnpm-global/bin",
    "~/.yarn/bin",
    "~/.config/yarn/global/node_modules/.bin",
    "~/.cargo/bin",
    "~/go/bin",
    "~/.deno/bin",
    "~/.bun/bin",
    "~/.local/share/mise/shims",
    "~/.asdf/shims",
    "~/.nvm/current/bin",
    "~/.volta/bin",
    "~/.fnm/current/bin",
]

_WINDOWS_PATH_DIRS = [
    "~/.droid-patch/bin",
    "~/scoop/shims",
    "~/AppData/Local/Programs/bin",
]


def _is_windows() -> bool:
    return platform.system().lower() == "windows"


def _default_path_dirs() -> list[str]:
    return list(_WINDOWS_PATH_DIRS if _is_windows() else _UNIX_PATH_DIRS)


def _default_installer() -> str:
    return "launcher" if _is_windows() else "symlink"


class AliasConfig(BaseModel):
    """Alias section of droid-patch configuration."""

    model_config = ConfigDict(extra="forbid")

    home_dir: Path = Field(default_factory=get_home_dir, description="droid-patch home directory")
    installer: Literal["symlink", "launcher"] = Field(
        default_factory=_default_installer,
        description="Installer strategy: 'symlink' (POSIX) or 'launcher' (.cmd script, Windows)",
    )
    path_dirs: list[str] = Field(
        default_factory=_default_path_dirs,
        description="Directories commonly on PATH, tried in order for a writable install location",
    )
    resign: bool = Field(True, description="Re-sign and clear quarantine on macOS after copying a binary")

    @field_validator("home_dir", mode="before")
    @classmethod
    def _normalize_home(cls, v: str | Path) -> Path:
        return normalize_path(v)

    @field_validator("path_dirs")
    @classmethod
    def _normalize_paths(cls, v: list[str]) -> list[str]:
        """Normalize paths by expanding ~ and making absolute."""
        return [str(normalize_path(p)) for p in v]

    @property
    def aliases_dir(self) -> Path:
        """Fallback directory holding alias symlinks (added to PATH via shell config)."""
        return self.home_dir / "aliases"

    @property
    def bins_dir(self) -> Path:
        """Directory holding the stored patched binaries."""
        return self.home_dir / "bins"

    @property
    def launcher_dir(self) -> Path:
        """Directory holding .cmd launchers for the launcher installer."""
        return self.home_dir / "bin"
