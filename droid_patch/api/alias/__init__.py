"""Alias module - install patched binaries as commands on PATH."""

from .AliasConfig import AliasConfig

__all__ = ["AliasConfig"]
