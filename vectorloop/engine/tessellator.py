"""Arc-length-proportional tessellation of a closed Path.

Two passes: estimate each segment's length, then give segment i
floor(length_i / total · D) + 1 samples and evaluate them at equal parameter
steps. Every segment contributes at least one point, so the realized count is
between D and D + len(path).
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import DTypeLike, NDArray
from shapely.geometry import Polygon

from vectorloop.engine.config import Precision, TessellationConfig
from vectorloop.engine.segments import Path, Segment, SegmentKind
from vectorloop.errors import MalformedPath, UnclosedPath
from vectorloop.utils.geometry import bezier_points, polyline_length

logger = logging.getLogger(__name__)


def _endpoints(segment: Segment, dtype: DTypeLike) -> tuple[NDArray, NDArray]:
    start = np.array(segment.start.as_tuple(), dtype=dtype)
    end = np.array(segment.end.as_tuple(), dtype=dtype)
    return start, end


def segment_length(
    segment: Segment,
    resolution: int = 10,
    dtype: DTypeLike = np.float64,
) -> float:
    """Exact length for lines.

    Curves are measured along the polyline from the start point through
    `resolution` equal parameter steps on [0, 1); the last step stops short
    of u=1.
    """
    start, end = _endpoints(segment, dtype)
    if segment.kind is SegmentKind.LINE:
        return float(np.sqrt(np.sum((end - start) ** 2)))
    params = np.arange(resolution, dtype=dtype) / np.asarray(resolution, dtype=dtype)
    samples = bezier_points(segment.points, params, dtype)
    return polyline_length(np.vstack([start[None, :], samples]))


def segment_lengths(
    path: Path,
    resolution: int = 10,
    dtype: DTypeLike = np.float64,
) -> NDArray[np.floating]:
    return np.array([segment_length(seg, resolution, dtype) for seg in path], dtype=dtype)


def allocate_samples(lengths: NDArray[np.floating], sample_count: int) -> list[int]:
    """Per-segment sample budget: floor(length_i / total · D) + 1."""
    if sample_count < 1:
        raise ValueError(f"sample_count must be positive, got {sample_count}")
    total = lengths.sum()
    if total <= 0:
        # All segments degenerate: one point each.
        return [1] * len(lengths)
    shares = np.floor(lengths / total * sample_count).astype(np.int64)
    return [int(s) + 1 for s in shares]


def sample_segment(
    segment: Segment,
    count: int,
    dtype: DTypeLike = np.float64,
) -> NDArray[np.floating]:
    """`count` points at parameters j / count, j in [0, count). The end point is excluded."""
    params = np.arange(count, dtype=dtype) / np.asarray(count, dtype=dtype)
    if segment.kind is SegmentKind.LINE:
        start, end = _endpoints(segment, dtype)
        return start + (end - start) * params[:, None]
    return bezier_points(segment.points, params, dtype)


def tessellate_path(
    path: Path,
    sample_count: int,
    precision: Precision | str = Precision.FLOAT64,
    config: TessellationConfig | None = None,
) -> NDArray[np.floating]:
    """Resample a closed path into an (n, 2) polygon, D <= n <= D + len(path)."""
    config = config or TessellationConfig()
    dtype = Precision(precision).dtype

    if not path.is_closed(config.closure_tolerance):
        raise UnclosedPath("Refusing to tessellate an open contour")
    if not path.is_continuous():
        raise MalformedPath("Consecutive segments do not share endpoints")

    lengths = segment_lengths(path, config.length_resolution, dtype)
    budget = allocate_samples(lengths, sample_count)

    chunks = [sample_segment(seg, n, dtype) for seg, n in zip(path, budget)]
    points = np.concatenate(chunks, axis=0).astype(dtype, copy=False)

    logger.debug(
        "Tessellated %d segments (length %.4g) into %d points (requested %d)",
        len(path),
        float(lengths.sum()),
        len(points),
        sample_count,
    )
    return points


def flatten_points(points: NDArray[np.floating]) -> NDArray[np.floating]:
    """Interleave an (n, 2) array into (x0, y0, x1, y1, ...)."""
    return np.ascontiguousarray(points).reshape(-1)


def to_polygon(points: NDArray[np.floating]) -> Polygon:
    """Shapely polygon through the tessellated points, repaired if self-intersecting."""
    if len(points) < 3:
        return Polygon()
    poly = Polygon(np.asarray(points, dtype=np.float64))
    if not poly.is_valid:
        poly = poly.buffer(0)
    return poly
