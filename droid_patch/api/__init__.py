"""API module for droid-patch.

Command functions (``cmd_*``) defined here are the single source of truth for the CLI.
"""

__all__ = []
