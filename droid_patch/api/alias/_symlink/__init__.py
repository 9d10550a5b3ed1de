"""Symlink alias installer (POSIX)."""
