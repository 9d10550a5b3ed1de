"""Output schemas for alias commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class AliasListOutput(BaseOutputSchema):
    """Output schema for alias list command."""

    aliases: list[dict[str, Any]] = Field(..., description="Installed aliases (name, target, location, immediate)")
    count: int = Field(..., description="Number of aliases found")
    aliases_dir: str = Field(..., description="Fallback aliases directory")
    path_configured: bool = Field(..., description="Whether the aliases directory is on PATH")


class AliasRemoveOutput(BaseOutputSchema):
    """Output schema for alias remove command."""

    target: str = Field(..., description="Alias name or file path that was requested")
    kind: str = Field(..., description="'file' when a path was removed directly, 'alias' otherwise")
    removed: list[str] = Field(..., description="Paths that were removed")


schema_registry.register_output_schema("alias", "list", AliasListOutput)
schema_registry.register_output_schema("alias", "remove", AliasRemoveOutput)
