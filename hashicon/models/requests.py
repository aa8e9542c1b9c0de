"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class IdenticonOptions(BaseModel):
    size: int | None = Field(default=None, description="Output width/height in pixels")
    padding: float | None = Field(default=None, description="Padding relative to size, 0.0-0.5")
    background: str | None = Field(default=None, description="Background color, e.g. #ffffff or #00000000")
    color_saturation: float | None = Field(default=None, description="Saturation of colored shapes, 0.0-1.0")
    grayscale_saturation: float | None = Field(default=None, description="Saturation of gray shapes, 0.0-1.0")
    hues: list[float] = Field(default_factory=list, description="Allowed hues in degrees; empty allows all")
    format: str = Field(default="png", description="Image format (png, webp, gif, tiff, bmp, jpeg)")


class IdenticonRequest(IdenticonOptions):
    message: str | None = Field(default=None, description="Text to hash with SHA-1")
    hash: str | None = Field(
        default=None,
        pattern=r"^[0-9a-fA-F]{40}$",
        description="Pre-computed 20-byte hash as 40 hex characters",
    )

    @model_validator(mode="after")
    def _one_source(self) -> IdenticonRequest:
        if (self.message is None) == (self.hash is None):
            raise ValueError("exactly one of 'message' or 'hash' is required")
        return self
