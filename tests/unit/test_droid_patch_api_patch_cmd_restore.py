"""Unit tests for droid_patch.api.patch.cmd_restore."""

import pytest

from droid_patch.api.patch.cmd_restore import cmd_restore
from droid_patch.api.patch.KNOWN_PATCHES import IS_CUSTOM
from droid_patch.api.patch.PatchEngine import PatchEngine
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.patch


def test_restore_after_in_place_patch(fake_droid):
    original = fake_droid.read_bytes()
    PatchEngine().run(fake_droid, [IS_CUSTOM], output_path=fake_droid)
    assert fake_droid.read_bytes() != original

    result = run_cmd(cmd_restore, str(fake_droid))

    assert result.success
    assert result.output["restored"] is True
    assert result.output["backup_path"] == str(fake_droid.with_name("droid.backup"))
    assert fake_droid.read_bytes() == original


def test_restore_without_backup_fails(fake_droid):
    result = run_cmd(cmd_restore, str(fake_droid))

    assert not result.success
    assert result.output["restored"] is False
    assert "No backup found" in result.output["errors"][0]


def test_restore_recreates_deleted_binary(fake_droid):
    original = fake_droid.read_bytes()
    PatchEngine().run(fake_droid, [IS_CUSTOM])
    fake_droid.unlink()

    result = run_cmd(cmd_restore, str(fake_droid))

    assert result.success
    assert fake_droid.read_bytes() == original
