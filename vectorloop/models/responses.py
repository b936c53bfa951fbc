"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class SegmentModel(BaseModel):
    kind: str
    # Canonical order: start, controls, end
    points: list[tuple[float, float]]


class ParseResponse(BaseModel):
    segments: list[SegmentModel] = Field(default_factory=list)
    d: str = ""


class TessellateResponse(BaseModel):
    # Interleaved x0, y0, x1, y1, ...
    points: list[float] = Field(default_factory=list)
    point_count: int = 0
    segment_count: int = 0
    precision: str = "float64"
    area: float = 0.0
    perimeter: float = 0.0
    processing_time_ms: float = 0.0


class ErrorResponse(BaseModel):
    error: str
    message: str
