"""Per-patch scan and verification result."""

from pydantic import BaseModel, Field


class PatchResult(BaseModel):
    """Outcome of scanning (and optionally verifying) one patch."""

    name: str = Field(..., description="Patch name")
    occurrences_found: int = Field(0, description="Occurrences of the pattern in the input")
    positions: list[int] = Field(default_factory=list, description="Byte offsets of each occurrence, ascending")
    already_patched: bool = Field(False, description="Pattern absent but replacement present")
    success: bool = Field(False, description="Pattern found, or already patched")
    contexts: list[str] = Field(default_factory=list, description="Printable previews of the first positions (verbose)")
    remaining_after: int = Field(-1, description="Pattern occurrences left in the output, -1 if not verified")
    replacements_after: int = Field(-1, description="Replacement occurrences in the output, -1 if not verified")
