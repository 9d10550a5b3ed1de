import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home_dir: Path | None = None, level: str = "INFO") -> None:
    """Configure unified droid-patch logging.

    Args:
        home_dir: Path to droid-patch home directory. If None, derived from environment.
        level: Name of the logging level for the ``droid_patch`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home_dir is None:
        home_dir = get_home_dir()

    home_dir.mkdir(parents=True, exist_ok=True)
    log_file = home_dir / "droid-patch.log"

    root_logger = logging.getLogger("droid_patch")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Never touches the filesystem: the log file handler is attached only by
    ``configure_logging``, which the CLI calls at startup. Library callers get
    whatever handlers their application installed.
    """
    return logging.getLogger(f"droid_patch.{name}")
