"""Unit tests for droid_patch.api.patch.cmd_apply."""

import json
import os

import pytest

from droid_patch.api.patch.cmd_apply import cmd_apply
from droid_patch.api.validate_output import validate_output
from tests.unit.conftest import run_cmd, write_config

pytestmark = pytest.mark.patch


@pytest.fixture
def configured(droid_patch_home, on_path_dir):
    write_config(droid_patch_home, [str(on_path_dir)])
    return on_path_dir


def test_requires_a_patch_flag(fake_droid):
    result = run_cmd(cmd_apply, path=str(fake_droid), alias="droid-custom")
    assert not result.success
    assert "No patch flags specified" in result.result
    assert "--is-custom" in result.output["errors"][0]
    assert result.output["results"] == []


def test_requires_alias_unless_dry_run(fake_droid):
    result = run_cmd(cmd_apply, path=str(fake_droid), is_custom=True)
    assert not result.success
    assert result.result == "Alias name is required"
    assert not fake_droid.with_name("droid.patched").exists()


def test_dry_run_reports_without_writing(fake_droid):
    before = fake_droid.read_bytes()

    result = run_cmd(cmd_apply, path=str(fake_droid), is_custom=True, skip_login=True, dry_run=True)

    assert result.success
    assert result.output["dry_run"] is True
    assert result.output["output_path"] == ""
    assert [r["occurrences_found"] for r in result.output["results"]] == [2, 1]
    assert "2 occurrence(s) will be patched" in result.result
    assert fake_droid.read_bytes() == before
    assert not fake_droid.with_name("droid.backup").exists()
    validate_output(cmd_apply, result.output)


def test_missing_binary_is_reported(tmp_path):
    result = run_cmd(cmd_apply, path=str(tmp_path / "nope"), is_custom=True, alias="x")
    assert not result.success
    assert "Binary not found" in result.output["errors"][0]


def test_output_dir_writes_alias_file_without_install(fake_droid, tmp_path, configured):
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    result = run_cmd(cmd_apply, path=str(fake_droid), alias="my-droid", is_custom=True, output_dir=str(out_dir))

    assert result.success
    assert result.output["output_path"] == str(out_dir / "my-droid")
    assert b"isCustom:!1" in (out_dir / "my-droid").read_bytes()
    assert result.output["alias"] == {}
    assert not (configured / "my-droid").exists()


def test_install_creates_alias_on_path(fake_droid, configured, droid_patch_home):
    result = run_cmd(cmd_apply, path=str(fake_droid), alias="droid-custom", is_custom=True)

    assert result.success, result.output["errors"]
    link = configured / "droid-custom"
    stored = droid_patch_home / "bins" / "droid-custom-patched"
    assert link.is_symlink()
    assert os.readlink(link) == str(stored)
    assert b"isCustom:!0" not in stored.read_bytes()
    assert fake_droid.with_name("droid.backup").read_bytes() == fake_droid.read_bytes()
    assert result.output["alias"]["immediate"] is True
    assert result.output["patched_count"] == 2
    assert "alias 'droid-custom'" in result.result
    validate_output(cmd_apply, result.output)


def test_missing_pattern_becomes_warning(tmp_path, configured):
    binary = tmp_path / "droid"
    binary.write_bytes(b"only isCustom:!0 here")

    result = run_cmd(cmd_apply, path=str(binary), alias="both", is_custom=True, skip_login=True)

    assert result.success
    assert result.output["warnings"] == ["skipLogin: pattern not found"]


def test_nothing_to_patch_fails(tmp_path, configured):
    binary = tmp_path / "droid"
    binary.write_bytes(b"unrelated")

    result = run_cmd(cmd_apply, path=str(binary), alias="none", is_custom=True)

    assert not result.success
    assert result.result == "No patches could be applied"
    assert not (configured / "none").exists()


def test_uses_configured_default_path(droid_patch_home, on_path_dir):
    write_config(droid_patch_home, [str(on_path_dir)])
    (droid_patch_home / "droid").write_bytes(b"isCustom:!0")

    result = run_cmd(cmd_apply, is_custom=True, dry_run=True)

    assert result.success
    assert result.output["binary_path"] == str(droid_patch_home / "droid")


def test_backup_flag_overrides_config(fake_droid, tmp_path, configured):
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    result = run_cmd(
        cmd_apply, path=str(fake_droid), alias="nb", is_custom=True, output_dir=str(out_dir), backup=False
    )

    assert result.success
    assert not fake_droid.with_name("droid.backup").exists()


def test_invalid_config_fails(fake_droid, droid_patch_home):
    (droid_patch_home / "config.json").write_text("{not json")

    result = run_cmd(cmd_apply, path=str(fake_droid), alias="x", is_custom=True)

    assert not result.success
    assert result.result.startswith("Configuration error")


def test_dry_run_leaves_home_uncreated(fake_droid, tmp_path, monkeypatch):
    fresh_home = tmp_path / "fresh-home"
    monkeypatch.setenv("DROID_PATCH_HOME", str(fresh_home))

    result = run_cmd(cmd_apply, path=str(fake_droid), is_custom=True, dry_run=True)

    assert result.success
    assert not fresh_home.exists()


def test_configured_backup_off_applies_without_flag(fake_droid, tmp_path, droid_patch_home):
    config = write_config(droid_patch_home)
    config["patch"]["backup"] = False
    (droid_patch_home / "config.json").write_text(json.dumps(config), encoding="utf-8")
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    result = run_cmd(cmd_apply, path=str(fake_droid), alias="nb", is_custom=True, output_dir=str(out_dir))

    assert result.success
    assert not fake_droid.with_name("droid.backup").exists()
