"""Top-level droid-patch configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from ..alias.AliasConfig import AliasConfig
from .LogConfig import LogConfig
from .PatchConfig import PatchConfig


class DroidPatchConfig(BaseModel):
    """Top-level configuration for droid-patch.

    Constructed once at startup and passed to the collaborators that need it.
    Every section has defaults, so a missing config file is not an error.
    """

    model_config = ConfigDict(extra="forbid")

    log: LogConfig = Field(default_factory=LogConfig)
    patch: PatchConfig = Field(default_factory=PatchConfig)
    alias: AliasConfig = Field(default_factory=AliasConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get droid-patch home directory based on DROID_PATCH_HOME or default to ~/.droid-patch."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "DroidPatchConfig":
        """Load and validate config from file, falling back to defaults.

        Raises:
            ValueError: If the config file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary for serialization."""
        return {
            "log": self.log.model_dump(mode="json"),
            "patch": self.patch.model_dump(mode="json"),
            "alias": self.alias.model_dump(mode="json"),
        }
