"""Abstract base class for alias installers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class _AbstractInstaller(ABC):
    """Abstract base class for platform-specific alias installers.

    An installer stores a copy of a patched binary under the droid-patch home
    and exposes it as a command reachable from PATH.
    """

    @abstractmethod
    def install(self, binary_path: Path, alias_name: str) -> dict[str, Any]:
        """Install ``binary_path`` as command ``alias_name``.

        Returns:
            Dictionary with alias_path, binary_path, immediate, path_configured,
            shell_config and warnings
        """
        pass

    @abstractmethod
    def uninstall(self, alias_name: str) -> list[str]:
        """Remove an alias and its stored binary.

        Returns:
            Paths that were removed, empty list if the alias was not found
        """
        pass

    @abstractmethod
    def list_aliases(self) -> list[dict[str, Any]]:
        """List installed aliases.

        Returns:
            List of dictionaries with name, target, location and immediate
        """
        pass

    @abstractmethod
    def path_configured(self) -> bool:
        """Whether the installer's fallback directory is on PATH."""
        pass
