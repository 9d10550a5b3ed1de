"""Find a writable directory that is already on PATH."""

import time
from pathlib import Path

from ...utils.logger import get_logger
from ._path_contains import _path_contains


def _find_writable_path_dir(candidates: list[str], path_env: str | None = None) -> Path | None:
    """Return the first candidate that is on PATH and writable.

    Missing candidates that are on PATH are created. Writability is probed with a
    temporary file.
    """
    logger = get_logger("alias.path")
    for candidate in candidates:
        if not _path_contains(candidate, path_env):
            continue
        directory = Path(candidate)
        probe = directory / f".droid-patch-test-{time.time_ns()}"
        try:
            directory.mkdir(parents=True, exist_ok=True)
            probe.write_bytes(b"")
            probe.unlink()
        except OSError as e:
            logger.debug(f"{directory} is on PATH but not writable: {e}")
            continue
        return directory
    return None
