"""Patch configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils.normalize_path import normalize_path


def _default_paths() -> list[str]:
    return ["~/.droid/bin/droid", "/usr/local/bin/droid", "./droid"]


class PatchConfig(BaseModel):
    """Patch section of droid-patch configuration."""

    model_config = ConfigDict(extra="forbid")

    default_paths: list[str] = Field(
        default_factory=_default_paths,
        description="Candidate locations of the droid binary, first existing one wins",
    )
    backup: bool = Field(True, description="Create <binary>.backup before the first modification")

    @field_validator("default_paths")
    @classmethod
    def _normalize_paths(cls, v: list[str]) -> list[str]:
        """Normalize paths by expanding ~ and making absolute."""
        if not v:
            raise ValueError("patch.default_paths must not be empty")
        return [str(normalize_path(p)) for p in v]
