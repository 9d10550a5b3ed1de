"""Alias remove command - removes an alias or a patched binary file."""

import os
from collections.abc import Iterator
from pathlib import Path

from ..config.DroidPatchConfig import DroidPatchConfig
from ..StageResult import StageResult
from .Alias import Alias


def _is_file_target(target: str) -> bool:
    return "/" in target or os.sep in target or Path(target).exists()


def cmd_remove(target: str) -> StageResult:
    """Remove a droid-patch alias or a patched binary file.

    Args:
        target: Alias name, or a file path (anything containing a path separator
            or naming an existing file) which is deleted directly
    """

    def _build(result_obj: StageResult, success: bool, message: str, kind: str, removed: list[str], errors: list[str]):
        result_obj.result = message
        result_obj.output = {
            "errors": errors,
            "warnings": [],
            "target": target,
            "kind": kind,
            "removed": removed,
        }
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        if _is_file_target(target):
            yield (0.5, "Removing file...")
            try:
                Path(target).unlink()
            except OSError as e:
                yield (1.0, "Complete")
                _build(result_obj, False, f"Error: {e}", "file", [], [str(e)])
                return
            yield (1.0, "Complete")
            _build(result_obj, True, f"Removed: {target}", "file", [target], [])
            return

        yield (0.2, "Loading configuration...")
        try:
            config = DroidPatchConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            _build(result_obj, False, f"Configuration error: {e}", "alias", [], [str(e)])
            return

        yield (0.5, "Removing alias...")
        try:
            with Alias(config.alias) as alias:
                removed = alias.uninstall(target)
        except OSError as e:
            yield (1.0, "Complete")
            _build(result_obj, False, f"Error removing alias: {e}", "alias", [], [str(e)])
            return

        yield (1.0, "Complete")
        if not removed:
            message = f'Alias "{target}" not found'
            _build(result_obj, False, message, "alias", [], [message])
            return
        _build(result_obj, True, f'Alias "{target}" removed successfully', "alias", removed, [])

    return StageResult(announce=f"Removing {target}...", progress_callback=do_work)
