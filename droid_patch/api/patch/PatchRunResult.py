"""Aggregate result of one patch run."""

from pydantic import BaseModel, Field

from .PatchResult import PatchResult


class PatchRunResult(BaseModel):
    """Aggregate result returned by PatchEngine.run."""

    success: bool = Field(..., description="Overall outcome")
    dry_run: bool = Field(False, description="Whether the run only scanned")
    output_path: str = Field("", description="Written file, the input when nothing needed patching, else empty")
    results: list[PatchResult] = Field(default_factory=list, description="Per-patch results in caller order")
    patched_count: int = Field(0, description="Total replacements applied")
    no_patch_needed: bool = Field(False, description="Every patch was already applied")
    verified: bool = Field(False, description="Whether the output passed the verification re-scan")
