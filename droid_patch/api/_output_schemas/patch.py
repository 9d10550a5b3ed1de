"""Output schemas for patch commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class PatchApplyOutput(BaseOutputSchema):
    """Output schema for patch apply command.

    All fields must always be present for consistency.
    """

    binary_path: str = Field(..., description="Path to the input binary, empty string if unresolved")
    output_path: str = Field(..., description="Path to the patched binary, empty string if nothing was written")
    dry_run: bool = Field(..., description="Whether this was a dry run")
    patched_count: int = Field(..., description="Total replacements applied")
    no_patch_needed: bool = Field(..., description="Whether every patch was already applied")
    results: list[dict[str, Any]] = Field(..., description="Per-patch results")
    alias: dict[str, Any] = Field(..., description="Alias installation result, empty dict if not installed")


class PatchRestoreOutput(BaseOutputSchema):
    """Output schema for patch restore command."""

    path: str = Field(..., description="Path of the binary being restored")
    backup_path: str = Field(..., description="Backup file used for restore")
    restored: bool = Field(..., description="Whether the binary was restored")


schema_registry.register_output_schema("patch", "apply", PatchApplyOutput)
schema_registry.register_output_schema("patch", "restore", PatchRestoreOutput)
