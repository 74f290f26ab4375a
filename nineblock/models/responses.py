"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    identicon_version: str = Field(..., description="Bumped when rendering output changes")
    patches: int


class DecodedCodeResponse(BaseModel):
    code: int = Field(..., description="Unsigned 32-bit code")
    middle_patch: int
    middle_invert: bool
    corner_patch: int
    corner_invert: bool
    corner_turn: int
    side_patch: int
    side_invert: bool
    side_turn: int
    fill: tuple[int, int, int]
    stroke: tuple[int, int, int] | None = None
    etag: str
