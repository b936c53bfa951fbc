"""Write a Path back out as absolute SVG path data."""

from __future__ import annotations

from vectorloop.engine.segments import Path, SegmentKind
from vectorloop.utils.geometry import Vec2

_COMMAND_LETTERS = {
    SegmentKind.LINE: "L",
    SegmentKind.QUADRATIC: "Q",
    SegmentKind.CUBIC: "C",
}


def _fmt(p: Vec2) -> str:
    # repr keeps the shortest round-trippable float text
    return f"{p.x!r},{p.y!r}"


def serialize_path(path: Path) -> str:
    """Render `path` as `M ... Z` using only absolute L/Q/C commands."""
    parts = [f"M{_fmt(path.start)}"]
    for seg in path:
        coords = " ".join(_fmt(p) for p in seg.points[1:])
        parts.append(f"{_COMMAND_LETTERS[seg.kind]}{coords}")
    parts.append("Z")
    return " ".join(parts)


def serialize_svg(path: Path, canvas_w: float = 24.0, canvas_h: float = 24.0) -> str:
    """Wrap `path` in the minimal <svg><g><path/></g></svg> document the scanner reads."""
    lines = [
        f'<svg viewBox="0 0 {canvas_w} {canvas_h}" xmlns="http://www.w3.org/2000/svg">',
        "  <g>",
        f'    <path d="{serialize_path(path)}" />',
        "  </g>",
        "</svg>",
    ]
    return "\n".join(lines)
