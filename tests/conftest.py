"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "patch", "alias", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(home_dir: Path, path_dirs: list[str] | None = None) -> dict:
    """Minimal droid-patch configuration dict rooted at ``home_dir``."""
    return {
        "log": {"level": "DEBUG"},
        "patch": {"default_paths": [str(home_dir / "droid")], "backup": True},
        "alias": {
            "home_dir": str(home_dir),
            "installer": "symlink",
            "path_dirs": path_dirs or [],
            "resign": False,
        },
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def droid_patch_home(tmp_path: Path, monkeypatch) -> Path:
    """Point DROID_PATCH_HOME at a per-test directory so nothing touches the real home."""
    home = tmp_path / ".droid-patch"
    home.mkdir()
    monkeypatch.setenv("DROID_PATCH_HOME", str(home))
    return home


@pytest.fixture
def droid_patch_config(droid_patch_home: Path) -> Path:
    """Write a minimal config.json into DROID_PATCH_HOME.

    Returns:
        Path to the config file
    """
    config_path = droid_patch_home / "config.json"
    config_path.write_text(json.dumps(minimal_config_dict(droid_patch_home)), encoding="utf-8")
    return config_path


@pytest.fixture
def fake_droid(tmp_path: Path) -> Path:
    """A small file that looks like the droid binary for both known patches."""
    binary = tmp_path / "droid"
    binary.write_bytes(
        b"\x7fELF\x00\x01header"
        b"const a={isCustom:!0,name:'x'};"
        b"if(!process.env.FACTORY_API_KEY)login();"
        b"const b={isCustom:!0};"
        b"\x00\xff\x00trailer"
    )
    binary.chmod(0o755)
    return binary


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
