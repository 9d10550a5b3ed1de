"""Symlink installer - exposes patched binaries through symlinks on PATH (POSIX)."""

import os
import shutil
from pathlib import Path
from typing import Any

from ....utils.logger import get_logger
from .._AbstractInstaller import _AbstractInstaller
from .._add_path_to_shell_config import _add_path_to_shell_config
from .._find_writable_path_dir import _find_writable_path_dir
from .._get_shell_config_path import _get_shell_config_path
from .._is_path_configured import _is_path_configured
from .._path_contains import _path_contains
from .._resign_binary import _resign_binary
from .._shell_export_line import _shell_export_line
from ..AliasConfig import AliasConfig


class _Impl(_AbstractInstaller):
    """POSIX installer using symlinks.

    The binary is stored as ``<bins>/<alias>-patched``. The symlink goes into the
    first writable directory already on PATH; failing that, into the droid-patch
    aliases directory, which is then added to PATH through the shell config file.
    """

    def __init__(self, alias_config: AliasConfig):
        self.config = alias_config
        self.logger = get_logger("alias.symlink")

    def _ensure_directories(self) -> None:
        for directory in (self.config.home_dir, self.config.aliases_dir, self.config.bins_dir):
            directory.mkdir(parents=True, exist_ok=True)

    def _binary_dest(self, alias_name: str) -> Path:
        return self.config.bins_dir / f"{alias_name}-patched"

    def _points_into_bins(self, link: Path) -> bool:
        target = os.readlink(link)
        return str(self.config.bins_dir) in target or ".droid-patch/bins" in target

    @staticmethod
    def _replace_symlink(link: Path, target: Path) -> None:
        if link.is_symlink() or link.exists():
            link.unlink()
        link.symlink_to(target)

    def path_configured(self) -> bool:
        return _path_contains(self.config.aliases_dir)

    def install(self, binary_path: Path, alias_name: str) -> dict[str, Any]:
        self._ensure_directories()
        warnings: list[str] = []

        binary_dest = self._binary_dest(alias_name)
        shutil.copyfile(binary_path, binary_dest)
        binary_dest.chmod(0o755)
        self.logger.info(f"Stored binary: {binary_dest}")

        if self.config.resign:
            warnings.extend(_resign_binary(binary_dest))

        writable_dir = _find_writable_path_dir(self.config.path_dirs)
        if writable_dir is not None:
            alias_path = writable_dir / alias_name
            self._replace_symlink(alias_path, binary_dest)
            self.logger.info(f"Created: {alias_path} -> {binary_dest}")
            return {
                "alias_path": str(alias_path),
                "binary_path": str(binary_dest),
                "immediate": True,
                "path_configured": True,
                "shell_config": "",
                "shell_config_updated": False,
                "warnings": warnings,
            }

        self.logger.info("No writable PATH directory found, using aliases directory")
        alias_path = self.config.aliases_dir / alias_name
        self._replace_symlink(alias_path, binary_dest)
        self.logger.info(f"Created symlink: {alias_path} -> {binary_dest}")

        path_configured = self.path_configured()
        shell_config = ""
        shell_config_updated = False
        if not path_configured:
            shell_config_path = _get_shell_config_path()
            shell_config = str(shell_config_path)
            if _is_path_configured(shell_config_path, self.config.aliases_dir):
                warnings.append(f"Run `source {shell_config}` or open a new terminal to use the alias")
            else:
                try:
                    _add_path_to_shell_config(shell_config_path, self.config.aliases_dir)
                    shell_config_updated = True
                    self.logger.info(f"Added PATH export to {shell_config}")
                    warnings.append(f"Run `source {shell_config}` or open a new terminal to use the alias")
                except OSError as e:
                    self.logger.warning(f"Could not write to {shell_config}: {e}")
                    warnings.append(
                        f"Could not write to {shell_config}: {e}. Add this line to your shell config: "
                        f"{_shell_export_line(self.config.aliases_dir)}"
                    )

        return {
            "alias_path": str(alias_path),
            "binary_path": str(binary_dest),
            "immediate": path_configured,
            "path_configured": path_configured,
            "shell_config": shell_config,
            "shell_config_updated": shell_config_updated,
            "warnings": warnings,
        }

    def uninstall(self, alias_name: str) -> list[str]:
        removed: list[str] = []

        for path_dir in self.config.path_dirs:
            link = Path(path_dir) / alias_name
            if link.is_symlink() and self._points_into_bins(link):
                link.unlink()
                removed.append(str(link))

        alias_path = self.config.aliases_dir / alias_name
        if alias_path.is_symlink() or alias_path.exists():
            alias_path.unlink()
            removed.append(str(alias_path))

        binary_path = self._binary_dest(alias_name)
        if binary_path.exists():
            binary_path.unlink()
            removed.append(str(binary_path))

        for path in removed:
            self.logger.info(f"Removed: {path}")
        return removed

    def _scan_dir(self, directory: Path) -> list[Path]:
        try:
            return sorted(p for p in directory.iterdir() if p.is_symlink())
        except OSError as e:
            self.logger.debug(f"Cannot read {directory}: {e}")
            return []

    def list_aliases(self) -> list[dict[str, Any]]:
        aliases: list[dict[str, Any]] = []
        seen: set[str] = set()

        for path_dir in self.config.path_dirs:
            directory = Path(path_dir)
            if not directory.is_dir() or directory == self.config.aliases_dir:
                continue
            for link in self._scan_dir(directory):
                if self._points_into_bins(link) and link.name not in seen:
                    seen.add(link.name)
                    aliases.append(
                        {"name": link.name, "target": os.readlink(link), "location": str(directory), "immediate": True}
                    )

        if self.config.aliases_dir.is_dir():
            for link in self._scan_dir(self.config.aliases_dir):
                if link.name not in seen:
                    seen.add(link.name)
                    aliases.append(
                        {
                            "name": link.name,
                            "target": os.readlink(link),
                            "location": str(self.config.aliases_dir),
                            "immediate": False,
                        }
                    )

        return aliases
