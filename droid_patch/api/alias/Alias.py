"""Alias public API - installs patched binaries as commands on PATH."""

from pathlib import Path
from typing import Any

from ._AbstractInstaller import _AbstractInstaller
from .AliasConfig import _INSTALLER_TYPES, AliasConfig


class Alias:
    """Public API for alias operations.

    The installer strategy is chosen once from ``alias_config.installer`` when
    the context is entered.
    """

    def __init__(self, alias_config: AliasConfig):
        self.alias_config = alias_config
        self._impl: _AbstractInstaller | None = None

    def __enter__(self):
        installer_type = self.alias_config.installer
        if installer_type not in _INSTALLER_TYPES:
            raise ValueError(f"Unsupported installer type: {installer_type!r} (supported: {list(_INSTALLER_TYPES)})")

        # Import installer implementation class directly from its _Impl module
        module = __import__(f"droid_patch.api.alias._{installer_type}._Impl", fromlist=[""])
        impl_class = module._Impl
        self._impl = impl_class(self.alias_config)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def _require_impl(self) -> _AbstractInstaller:
        if not self._impl:
            raise RuntimeError("Alias not initialized. Use as context manager first.")
        return self._impl

    def install(self, binary_path: Path, alias_name: str) -> dict[str, Any]:
        """Install ``binary_path`` as command ``alias_name``."""
        if not alias_name or "/" in alias_name or "\\" in alias_name:
            raise ValueError(f"Invalid alias name: {alias_name!r}")
        return self._require_impl().install(Path(binary_path), alias_name)

    def uninstall(self, alias_name: str) -> list[str]:
        """Remove an alias; returns the removed paths."""
        return self._require_impl().uninstall(alias_name)

    def list_aliases(self) -> list[dict[str, Any]]:
        """List installed aliases."""
        return self._require_impl().list_aliases()

    def path_configured(self) -> bool:
        """Whether the fallback alias directory is on PATH."""
        return self._require_impl().path_configured()
