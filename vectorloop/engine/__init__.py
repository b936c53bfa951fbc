"""VectorLoop geometry engine."""

from vectorloop.engine.config import Precision, TessellationConfig
from vectorloop.engine.segments import Path, Segment, SegmentKind
from vectorloop.engine.tessellator import allocate_samples, segment_lengths, tessellate_path

__all__ = [
    "Precision",
    "TessellationConfig",
    "Path",
    "Segment",
    "SegmentKind",
    "allocate_samples",
    "segment_lengths",
    "tessellate_path",
]
