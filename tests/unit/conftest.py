"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific helpers for alias installation.
"""

import json
from pathlib import Path

import pytest

# Re-export commonly used helpers from root conftest
from tests.conftest import minimal_config_dict, run_cmd

__all__ = [
    "minimal_config_dict",
    "on_path_dir",
    "run_cmd",
    "write_config",
]


def write_config(home_dir: Path, path_dirs: list[str] | None = None) -> dict:
    """Write config.json with the given PATH candidates and return the dict."""
    config = minimal_config_dict(home_dir, path_dirs)
    (home_dir / "config.json").write_text(json.dumps(config), encoding="utf-8")
    return config


@pytest.fixture
def on_path_dir(tmp_path: Path, monkeypatch) -> Path:
    """A writable directory that is the only entry on PATH."""
    directory = tmp_path / "local-bin"
    directory.mkdir()
    monkeypatch.setenv("PATH", str(directory))
    return directory
