"""Tests for arc-length-proportional tessellation."""

import random

import numpy as np
import pytest

from tests.conftest import MIXED_D, SQUARE_D, WAVE_D

from vectorloop.engine.config import Precision, TessellationConfig
from vectorloop.engine.segments import Path, Segment
from vectorloop.engine.tessellator import (
    allocate_samples,
    flatten_points,
    sample_segment,
    segment_length,
    segment_lengths,
    tessellate_path,
    to_polygon,
)
from vectorloop.errors import MalformedPath, UnclosedPath
from vectorloop.svg.path_parser import parse_path
from vectorloop.utils.geometry import Vec2


def test_square_end_to_end():
    path = parse_path(SQUARE_D)
    lengths = segment_lengths(path)
    assert list(lengths) == [10.0, 10.0, 10.0, 10.0]
    assert allocate_samples(lengths, 4) == [2, 2, 2, 2]

    points = tessellate_path(path, 4)
    expected = [(0, 0), (5, 0), (10, 0), (10, 5), (10, 10), (5, 10), (0, 10), (0, 5)]
    assert points.shape == (8, 2)
    assert [tuple(p) for p in points] == expected


def test_flatten_interleaves_coordinates():
    points = tessellate_path(parse_path(SQUARE_D), 4)
    flat = flatten_points(points)
    assert flat.shape == (16,)
    assert list(flat[:6]) == [0, 0, 5, 0, 10, 0]


@pytest.mark.parametrize("precision", [Precision.FLOAT32, Precision.FLOAT64])
def test_precision_selects_dtype(precision):
    points = tessellate_path(parse_path(MIXED_D), 50, precision)
    assert points.dtype == precision.dtype
    assert flatten_points(points).dtype == precision.dtype


def test_precision_accepts_string():
    points = tessellate_path(parse_path(SQUARE_D), 4, "float32")
    assert points.dtype == np.float32


def test_line_length_is_exact():
    seg = Segment.line(Vec2(0, 0), Vec2(3, 4))
    assert segment_length(seg) == 5.0


def test_curve_length_approximation():
    # Straight cubic of length 30; the [0, 1) window stops at u=0.9
    seg = Segment.cubic(Vec2(0, 0), Vec2(10, 0), Vec2(20, 0), Vec2(30, 0))
    assert segment_length(seg) == pytest.approx(27.0)
    assert segment_length(seg, resolution=100) == pytest.approx(29.7)
    arch = parse_path(WAVE_D)[0]
    # Polyline through B(0), B(0.1), ..., B(0.9) of Q5,10 10,0
    assert segment_length(arch) == pytest.approx(12.700471823136, rel=1e-9)
    coarse = segment_length(arch, resolution=2)
    fine = segment_length(arch, resolution=100)
    assert coarse < segment_length(arch) < fine


def test_allocate_samples_degenerate_path():
    assert allocate_samples(np.zeros(3), 10) == [1, 1, 1]


def test_allocate_samples_rejects_non_positive_count():
    with pytest.raises(ValueError):
        allocate_samples(np.ones(2), 0)


def test_zero_length_segment_still_sampled():
    path = parse_path("M0,0 L10,0 L10,0 L0,0 Z")
    budget = allocate_samples(segment_lengths(path), 10)
    assert budget == [6, 1, 6]


def test_sample_segment_excludes_end():
    seg = Segment.quadratic(Vec2(0, 0), Vec2(5, 10), Vec2(10, 0))
    pts = sample_segment(seg, 4)
    assert pts.shape == (4, 2)
    assert tuple(pts[0]) == (0.0, 0.0)
    assert not np.any(np.all(pts == [10.0, 0.0], axis=1))


def test_sample_count_bounds():
    rng = random.Random(99)
    for _ in range(30):
        n = rng.randint(1, 10)
        d_parts = ["M0,0"]
        for _ in range(n):
            cmd = rng.choice("LQC")
            count = {"L": 1, "Q": 2, "C": 3}[cmd]
            coords = " ".join(
                f"{rng.uniform(-50, 50)!r},{rng.uniform(-50, 50)!r}" for _ in range(count)
            )
            d_parts.append(cmd + coords)
        d_parts.append("Z")
        path = parse_path(" ".join(d_parts))
        k = len(path)
        for requested in (1, 7, 100, 1000):
            points = tessellate_path(path, requested)
            assert requested <= len(points) <= requested + k


def test_points_start_at_path_start_and_follow_order():
    path = parse_path(MIXED_D)
    points = tessellate_path(path, 200)
    assert tuple(points[0]) == path.start.as_tuple()
    # The closing point is implicit
    assert not np.array_equal(points[-1], points[0])


def test_refuses_open_path():
    open_path = Path((Segment.line(Vec2(0, 0), Vec2(10, 0)),))
    with pytest.raises(UnclosedPath):
        tessellate_path(open_path, 10)
    with pytest.raises(UnclosedPath):
        tessellate_path(Path(()), 10)


def test_refuses_broken_contour():
    broken = Path(
        (
            Segment.line(Vec2(0, 0), Vec2(10, 0)),
            Segment.line(Vec2(10, 5), Vec2(0, 10)),
            Segment.line(Vec2(0, 10), Vec2(0, 0)),
        )
    )
    assert broken.is_closed()
    with pytest.raises(MalformedPath):
        tessellate_path(broken, 10)


def test_custom_length_resolution():
    path = parse_path(WAVE_D)
    config = TessellationConfig(length_resolution=50)
    points = tessellate_path(path, 100, config=config)
    assert 100 <= len(points) <= 103


def test_to_polygon_square():
    poly = to_polygon(tessellate_path(parse_path(SQUARE_D), 4))
    assert poly.area == pytest.approx(100.0)
    assert poly.length == pytest.approx(40.0)


def test_to_polygon_too_few_points():
    assert to_polygon(np.array([[0.0, 0.0], [1.0, 1.0]])).is_empty
