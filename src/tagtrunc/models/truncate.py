"""Truncation input and result models."""

from pydantic import BaseModel, ConfigDict, Field


class TruncateRequest(BaseModel):
    """Validated arguments for a truncation."""

    model_config = ConfigDict(frozen=True)

    fragment: str = Field(..., description="HTML fragment to truncate")
    length: int = Field(
        ...,
        ge=0,
        description="Visible length budget in word characters",
    )


class TruncationResult(BaseModel):
    """Result of truncating a fragment."""

    visible: str = Field(..., description="Visible prefix with open tags closed")
    hidden: str = Field(..., description="Hidden suffix with cut tags reopened")
    truncated: bool = Field(..., description="Whether any content was moved to hidden")
