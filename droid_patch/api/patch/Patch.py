"""Patch model: one fixed-length byte substitution."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Patch(BaseModel):
    """A named pattern/replacement pair applied in place.

    Replacement must be exactly as long as the pattern so that every other offset
    in the file stays valid. Unequal lengths are rejected at construction.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Short identifier (e.g., 'isCustom')")
    description: str = Field("", description="Human readable description")
    pattern: bytes = Field(..., description="Byte sequence to find")
    replacement: bytes = Field(..., description="Equal-length byte sequence written over each match")

    @model_validator(mode="after")
    def _check_lengths(self) -> "Patch":
        if not self.pattern:
            raise ValueError(f"Patch {self.name!r}: pattern must not be empty")
        if len(self.pattern) != len(self.replacement):
            raise ValueError(
                f"Patch {self.name!r}: replacement length {len(self.replacement)} "
                f"does not match pattern length {len(self.pattern)}"
            )
        return self
