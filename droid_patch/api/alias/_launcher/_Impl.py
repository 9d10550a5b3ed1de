"""Launcher installer - exposes patched binaries through .cmd scripts (Windows)."""

import re
import shutil
import subprocess
import time
from pathlib import Path
from typing import Any

from ....utils.logger import get_logger
from .._AbstractInstaller import _AbstractInstaller
from .._path_contains import _path_contains
from ..AliasConfig import AliasConfig

_LAUNCHER_TARGET = re.compile(r'"([^"]+)"')
_REG_PATH_VALUE = re.compile(r"Path\s+REG_(?:EXPAND_)?SZ\s+(.+)")


class _Impl(_AbstractInstaller):
    """Windows installer using .cmd launcher scripts.

    Symlinks need elevated rights on Windows, so each alias is a small batch
    file in ``<home>/bin`` that forwards its arguments to the stored binary.
    """

    def __init__(self, alias_config: AliasConfig):
        self.config = alias_config
        self.logger = get_logger("alias.launcher")

    @staticmethod
    def launcher_content(binary_path: Path) -> str:
        """Batch script that runs ``binary_path`` with all arguments."""
        return f'@echo off\r\n"{binary_path}" %*\r\n'

    def _ensure_directories(self) -> None:
        for directory in (self.config.home_dir, self.config.bins_dir, self.config.launcher_dir):
            directory.mkdir(parents=True, exist_ok=True)

    def _copy_with_lock_handling(self, source: Path, dest: Path) -> Path:
        """Copy ``source`` to ``dest``; use a timestamped name if ``dest`` is locked."""
        try:
            shutil.copyfile(source, dest)
            return dest
        except PermissionError:
            # A running .exe cannot be overwritten on Windows
            fallback = dest.with_name(f"{dest.stem}-{int(time.time() * 1000)}{dest.suffix}")
            self.logger.warning(f"{dest} is locked, using {fallback}")
            shutil.copyfile(source, fallback)
            return fallback

    def _add_to_user_path(self, directory: Path) -> bool:
        """Append ``directory`` to the persistent user PATH with setx."""
        existing = ""
        try:
            query = subprocess.run(
                ["reg", "query", r"HKCU\Environment", "/v", "Path"],
                capture_output=True,
                text=True,
            )
            match = _REG_PATH_VALUE.search(query.stdout or "")
            existing = match.group(1).strip() if match else ""
        except OSError as e:
            self.logger.debug(f"reg query failed: {e}")

        if _path_contains(directory, existing, separator=";"):
            return True

        new_path = f"{existing};{directory}" if existing else str(directory)
        try:
            subprocess.run(["setx", "PATH", new_path], check=True, capture_output=True, text=True)
        except (subprocess.CalledProcessError, OSError) as e:
            self.logger.warning(f"setx failed: {e}")
            return False
        return True

    def path_configured(self) -> bool:
        return _path_contains(self.config.launcher_dir)

    def install(self, binary_path: Path, alias_name: str) -> dict[str, Any]:
        self._ensure_directories()
        warnings: list[str] = []

        binary_dest = self._copy_with_lock_handling(binary_path, self.config.bins_dir / f"{alias_name}-patched.exe")
        self.logger.info(f"Stored binary: {binary_dest}")

        cmd_path = self.config.launcher_dir / f"{alias_name}.cmd"
        cmd_path.write_bytes(self.launcher_content(binary_dest).encode("utf-8"))
        self.logger.info(f"Created launcher: {cmd_path}")

        path_added = self._add_to_user_path(self.config.launcher_dir)
        immediate = path_added and self.path_configured()
        if not path_added:
            warnings.append(f"Add this directory to your PATH: {self.config.launcher_dir}")
        elif not immediate:
            warnings.append("PATH has been updated. Restart your terminal to use the alias")

        return {
            "alias_path": str(cmd_path),
            "binary_path": str(binary_dest),
            "immediate": immediate,
            "path_configured": path_added,
            "shell_config": "",
            "shell_config_updated": False,
            "warnings": warnings,
        }

    def uninstall(self, alias_name: str) -> list[str]:
        removed: list[str] = []

        cmd_path = self.config.launcher_dir / f"{alias_name}.cmd"
        if cmd_path.exists():
            cmd_path.unlink()
            removed.append(str(cmd_path))

        if self.config.bins_dir.is_dir():
            for binary in sorted(self.config.bins_dir.glob(f"{alias_name}-patched*.exe")):
                binary.unlink()
                removed.append(str(binary))

        for path in removed:
            self.logger.info(f"Removed: {path}")
        return removed

    def list_aliases(self) -> list[dict[str, Any]]:
        if not self.config.launcher_dir.is_dir():
            return []

        immediate = self.path_configured()
        aliases: list[dict[str, Any]] = []
        for cmd_path in sorted(self.config.launcher_dir.glob("*.cmd")):
            match = _LAUNCHER_TARGET.search(cmd_path.read_text(encoding="utf-8", errors="replace"))
            aliases.append(
                {
                    "name": cmd_path.stem,
                    "target": match.group(1) if match else "",
                    "location": str(self.config.launcher_dir),
                    "immediate": immediate,
                }
            )
        return aliases
