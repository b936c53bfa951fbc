"""Segment and Path — the immutable geometry produced by the parser and consumed by the tessellator.

All coordinates are absolute. Points are stored in canonical Bezier order
(start, controls in curve order, end), the same order the evaluator expects.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

from vectorloop.utils.geometry import Vec2, bezier_point, lerp


class SegmentKind(enum.Enum):
    LINE = "line"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"

    @property
    def degree(self) -> int:
        return _DEGREES[self]


_DEGREES = {
    SegmentKind.LINE: 1,
    SegmentKind.QUADRATIC: 2,
    SegmentKind.CUBIC: 3,
}


@dataclass(frozen=True)
class Segment:
    kind: SegmentKind
    points: tuple[Vec2, ...]

    def __post_init__(self) -> None:
        expected = self.kind.degree + 1
        if len(self.points) != expected:
            raise ValueError(
                f"{self.kind.value} segment needs {expected} points, got {len(self.points)}"
            )

    @classmethod
    def line(cls, start: Vec2, end: Vec2) -> Segment:
        return cls(SegmentKind.LINE, (start, end))

    @classmethod
    def quadratic(cls, start: Vec2, control: Vec2, end: Vec2) -> Segment:
        return cls(SegmentKind.QUADRATIC, (start, control, end))

    @classmethod
    def cubic(cls, start: Vec2, control0: Vec2, control1: Vec2, end: Vec2) -> Segment:
        return cls(SegmentKind.CUBIC, (start, control0, control1, end))

    @property
    def start(self) -> Vec2:
        return self.points[0]

    @property
    def end(self) -> Vec2:
        return self.points[-1]

    @property
    def controls(self) -> tuple[Vec2, ...]:
        return self.points[1:-1]

    @property
    def degree(self) -> int:
        return self.kind.degree

    def point_at(self, u: float) -> Vec2:
        if self.kind is SegmentKind.LINE:
            return lerp(self.start, self.end, u)
        return bezier_point(self.points, u)

    def with_end(self, end: Vec2) -> Segment:
        """Copy of this segment with its end point replaced."""
        return Segment(self.kind, self.points[:-1] + (end,))


@dataclass(frozen=True)
class Path:
    """Ordered segments forming one closed contour."""

    segments: tuple[Segment, ...]

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, index: int) -> Segment:
        return self.segments[index]

    @property
    def start(self) -> Vec2:
        return self.segments[0].start

    @property
    def end(self) -> Vec2:
        return self.segments[-1].end

    def is_continuous(self) -> bool:
        return all(a.end == b.start for a, b in zip(self.segments, self.segments[1:]))

    def is_closed(self, tol: float = 0.0) -> bool:
        if not self.segments:
            return False
        return self.end.isclose(self.start, tol)
