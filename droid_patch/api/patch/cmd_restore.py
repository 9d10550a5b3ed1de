"""Patch restore command - put the original binary back from its backup."""

import shutil
from collections.abc import Iterator
from pathlib import Path

from ..alias._resign_binary import _resign_binary
from ..config.DroidPatchConfig import DroidPatchConfig
from ..StageResult import StageResult
from .find_default_binary import find_default_binary
from .PatchEngine import PatchEngine


def cmd_restore(path: str | None = None) -> StageResult:
    """Restore the droid binary from ``<path>.backup``.

    Args:
        path: Path to the droid binary; first existing configured default if None
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = DroidPatchConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Configuration error: {e}"
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "path": path or "",
                "backup_path": "",
                "restored": False,
            }
            result_obj.success = False
            return

        binary_path = Path(path) if path else find_default_binary(config.patch.default_paths)
        backup_path = PatchEngine.backup_path_for(binary_path)

        yield (0.3, "Checking backup...")
        if not backup_path.is_file():
            message = f"No backup found at {backup_path}"
            yield (1.0, "Complete")
            result_obj.result = message
            result_obj.output = {
                "errors": [message],
                "warnings": [],
                "path": str(binary_path),
                "backup_path": str(backup_path),
                "restored": False,
            }
            result_obj.success = False
            return

        yield (0.6, "Restoring binary...")
        warnings: list[str] = []
        try:
            binary_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(backup_path, binary_path)
            binary_path.chmod(0o755)
        except OSError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Restore failed: {e}"
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "path": str(binary_path),
                "backup_path": str(backup_path),
                "restored": False,
            }
            result_obj.success = False
            return

        if config.alias.resign:
            warnings.extend(_resign_binary(binary_path))

        yield (1.0, "Complete")
        result_obj.result = f"Restored {binary_path} from {backup_path}"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "path": str(binary_path),
            "backup_path": str(backup_path),
            "restored": True,
        }
        result_obj.success = True

    return StageResult(announce="Restoring original droid binary...", progress_callback=do_work)
