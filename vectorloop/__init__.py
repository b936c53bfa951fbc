"""VectorLoop — SVG contour parsing and arc-length-proportional tessellation."""

from vectorloop.engine.config import Precision, TessellationConfig
from vectorloop.engine.segments import Path, Segment, SegmentKind
from vectorloop.engine.tessellator import flatten_points, tessellate_path
from vectorloop.errors import (
    MalformedMarkup,
    MalformedPath,
    NotFound,
    SourceIOError,
    UnclosedPath,
    UnsupportedCommand,
    VectorLoopError,
)
from vectorloop.loop import load_path, parse_svg_text, polyrize_svg, polyrize_svg_float32, polyrize_svg_float64
from vectorloop.svg.path_parser import parse_numbers, parse_path
from vectorloop.utils.geometry import Vec2

__all__ = [
    "Precision",
    "TessellationConfig",
    "Path",
    "Segment",
    "SegmentKind",
    "Vec2",
    "parse_numbers",
    "parse_path",
    "tessellate_path",
    "flatten_points",
    "load_path",
    "parse_svg_text",
    "polyrize_svg",
    "polyrize_svg_float32",
    "polyrize_svg_float64",
    "VectorLoopError",
    "MalformedMarkup",
    "NotFound",
    "MalformedPath",
    "UnsupportedCommand",
    "UnclosedPath",
    "SourceIOError",
]
