"""Unit tests for droid_patch.cli.display."""

import json

import pytest
import yaml

from droid_patch.cli.display import CLIDisplay, display_context

pytestmark = pytest.mark.cli


def test_display_context_builds_cli_display():
    assert isinstance(display_context.get_display("cli"), CLIDisplay)


def test_display_context_rejects_unknown_mode():
    with pytest.raises(ValueError, match="Unsupported display mode"):
        display_context.get_display("mcp")  # type: ignore[arg-type]


def test_json_output_yaml(capsys):
    CLIDisplay().json_output({"patched_count": 2, "results": [{"name": "isCustom"}]}, format="yaml")
    out = capsys.readouterr().out
    assert yaml.safe_load(out) == {"patched_count": 2, "results": [{"name": "isCustom"}]}


def test_json_output_json(capsys):
    CLIDisplay().json_output({"a": [1, 2]}, format="json")
    assert json.loads(capsys.readouterr().out) == {"a": [1, 2]}


def test_messages_go_to_stderr(capsys):
    display = CLIDisplay()
    display.status("Patching droid binary...")
    display.warning("skipLogin: pattern not found")
    display.error("failed", details="more")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Patching droid binary..." in captured.err
    assert "skipLogin: pattern not found" in captured.err
    assert "more" in captured.err
