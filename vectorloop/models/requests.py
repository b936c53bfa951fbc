"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from vectorloop.config import settings
from vectorloop.engine.config import Precision


class ParseRequest(BaseModel):
    d: str = Field(..., description="SVG path data for one closed contour")
    strict_closure: bool = Field(default=settings.strict_closure)


class TessellateRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code containing <svg><g><path d=...>")
    sample_count: int = Field(
        default=settings.default_sample_count,
        ge=1,
        description="Requested number of points for the whole loop",
    )
    precision: Precision = Field(default=settings.default_precision)
    require_group: bool = Field(default=settings.require_group)
