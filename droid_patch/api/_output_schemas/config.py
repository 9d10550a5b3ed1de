"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    section: str = Field(..., description="Requested section, empty string when listing sections")
    content: dict[str, Any] = Field(..., description="Section content, or the list of sections")
    config_path: str = Field(..., description="Path to the config file")
    config_exists: bool = Field(..., description="Whether the config file exists (defaults are used otherwise)")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version")
    git_sha: str = Field(..., description="Git commit, empty string if unavailable")
    full_version: str = Field(..., description="Version including git commit when available")


schema_registry.register_output_schema("config", "show", ConfigShowOutput)
schema_registry.register_output_schema("config", "version", ConfigVersionOutput)
