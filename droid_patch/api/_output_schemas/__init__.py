"""Output schemas for API commands.

Importing this package registers every schema with the schema registry.
"""

from . import alias, config, patch

__all__ = ["alias", "config", "patch"]
