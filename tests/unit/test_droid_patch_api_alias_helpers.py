"""Unit tests for the PATH and shell-config helpers used by the alias installers."""

import pytest

from droid_patch.api.alias._add_path_to_shell_config import _add_path_to_shell_config
from droid_patch.api.alias._find_writable_path_dir import _find_writable_path_dir
from droid_patch.api.alias._get_shell_config_path import _get_shell_config_path
from droid_patch.api.alias._is_path_configured import _is_path_configured
from droid_patch.api.alias._path_contains import _path_contains
from droid_patch.api.alias._shell_export_line import _shell_export_line

pytestmark = pytest.mark.alias


class TestPathContains:
    def test_matches_normalized_entries(self):
        assert _path_contains("/usr/local/bin/", "/usr/bin:/usr/local/bin")

    def test_missing_entry(self):
        assert not _path_contains("/opt/bin", "/usr/bin:/usr/local/bin")

    def test_custom_separator(self):
        assert _path_contains("C:/tools", "C:/Windows;C:/tools", separator=";")

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PATH", "/a:/b")
        assert _path_contains("/b")


class TestShellConfigPath:
    @pytest.mark.parametrize(
        ("shell", "expected"),
        [
            ("/bin/zsh", ".zshrc"),
            ("/usr/bin/fish", ".config/fish/config.fish"),
            ("/bin/sh", ".profile"),
        ],
    )
    def test_by_shell(self, tmp_path, shell, expected):
        assert _get_shell_config_path(shell, tmp_path) == tmp_path / expected

    def test_bash_prefers_existing_bash_profile(self, tmp_path):
        assert _get_shell_config_path("/bin/bash", tmp_path) == tmp_path / ".bashrc"
        (tmp_path / ".bash_profile").write_text("")
        assert _get_shell_config_path("/bin/bash", tmp_path) == tmp_path / ".bash_profile"


def test_export_line_per_shell(tmp_path):
    assert _shell_export_line(tmp_path, "/bin/bash") == f'export PATH="{tmp_path}:$PATH"'
    assert _shell_export_line(tmp_path, "/usr/bin/fish") == f'fish_add_path "{tmp_path}"'


def test_add_and_detect_shell_config(tmp_path):
    aliases_dir = tmp_path / ".droid-patch" / "aliases"
    rc = tmp_path / "fish" / "config.fish"
    assert not _is_path_configured(rc, aliases_dir)

    _add_path_to_shell_config(rc, aliases_dir, "/usr/bin/fish")

    assert rc.read_text() == f'\n# Added by droid-patch\nfish_add_path "{aliases_dir}"\n'
    assert _is_path_configured(rc, aliases_dir)


class TestFindWritablePathDir:
    def test_first_writable_candidate_on_path(self, tmp_path):
        first = tmp_path / "a"
        second = tmp_path / "b"
        second.mkdir()
        path_env = f"{second}"

        assert _find_writable_path_dir([str(first), str(second)], path_env) == second
        assert not first.exists()

    def test_creates_missing_directory_on_path(self, tmp_path):
        missing = tmp_path / "new-bin"
        assert _find_writable_path_dir([str(missing)], str(missing)) == missing
        assert missing.is_dir()
        assert list(missing.iterdir()) == []

    def test_none_when_nothing_on_path(self, tmp_path):
        assert _find_writable_path_dir([str(tmp_path)], "/nowhere") is None
