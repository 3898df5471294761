"""Pydantic models for gitdiffparser API requests and responses."""

from typing import List

from pydantic import BaseModel, Field, field_validator

_EXAMPLE_DIFF = (
    "diff --git a/foo.txt b/foo.txt\n"
    "index e69de29..4b825dc 100644\n"
    "--- a/foo.txt\n"
    "+++ b/foo.txt\n"
    "@@ -1 +1 @@\n"
    "-old\n"
    "+new\n"
)


class ParseRequest(BaseModel):
    """Request model for parse and tokenize endpoints."""

    diff: str = Field(
        ...,
        description="Unified diff text as produced by git diff",
        examples=[_EXAMPLE_DIFF],
    )

    @field_validator("diff")
    @classmethod
    def diff_must_not_be_blank(cls, v):
        """Reject empty or whitespace-only diff text."""
        if not v.strip():
            raise ValueError("diff cannot be empty")
        return v


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., examples=["healthy"])
    version: str = Field(..., examples=["1.0.0"])


class VersionResponse(BaseModel):
    """Response model for version endpoint."""

    version: str = Field(..., examples=["1.0.0"])
    api_version: str = Field(..., examples=["v1"])
    supported_features: List[str] = Field(
        default_factory=lambda: [
            "file_diff_documents",
            "line_numbering",
            "mode_changes",
            "rename_detection",
            "binary_detection",
            "no_newline_tracking",
        ]
    )
