"""Leaf-node geometry kernel: Vec2 arithmetic and Bernstein-basis Bezier evaluation. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import DTypeLike, NDArray

# C(N, k) for the supported degrees, indexed by degree.
_BINOMIALS: dict[int, tuple[int, ...]] = {
    1: (1, 1),
    2: (1, 2, 1),
    3: (1, 3, 3, 1),
}


@dataclass(frozen=True)
class Vec2:
    """2D point / vector. Always copied by value."""

    x: float
    y: float

    @staticmethod
    def zero() -> Vec2:
        return Vec2(0.0, 0.0)

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    def isclose(self, other: Vec2, tol: float = 1e-9) -> bool:
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


def distance(a: Vec2, b: Vec2) -> float:
    """Euclidean (L2) distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def lerp(a: Vec2, b: Vec2, u: float) -> Vec2:
    """Linear interpolation a + (b - a)·u."""
    return a + (b - a) * u


def reflect(control: Vec2, about: Vec2) -> Vec2:
    """Reflect a control point through `about`: 2·about − control."""
    return Vec2(2.0 * about.x - control.x, 2.0 * about.y - control.y)


def _binomials(degree: int) -> tuple[int, ...]:
    try:
        return _BINOMIALS[degree]
    except KeyError:
        raise ValueError(f"Unsupported Bezier degree: {degree}") from None


def bezier_point(points: Sequence[Vec2], u: float) -> Vec2:
    """Evaluate a Bezier curve at parameter u ∈ [0, 1].

    `points` are in canonical order: start, controls in curve order, end.
    The degree is len(points) - 1 and must be 1, 2 or 3.
    """
    if not 0.0 <= u <= 1.0:
        raise ValueError(f"Bezier parameter out of range: {u}")
    degree = len(points) - 1
    coeffs = _binomials(degree)

    x = 0.0
    y = 0.0
    for k, p in enumerate(points):
        w = coeffs[k] * (u**k) * ((1.0 - u) ** (degree - k))
        x += w * p.x
        y += w * p.y
    return Vec2(x, y)


def bezier_points(
    points: Sequence[Vec2],
    params: NDArray[np.floating],
    dtype: DTypeLike = np.float64,
) -> NDArray[np.floating]:
    """Vectorized Bernstein evaluation. Returns an (len(params), 2) array in `dtype`."""
    degree = len(points) - 1
    coeffs = _binomials(degree)

    u = np.asarray(params, dtype=dtype)
    if u.size and (u.min() < 0 or u.max() > 1):
        raise ValueError("Bezier parameters must lie in [0, 1]")
    ctrl = np.array([p.as_tuple() for p in points], dtype=dtype)

    one_minus = np.asarray(1, dtype=dtype) - u
    # basis[:, k] = C(N,k) · u^k · (1-u)^(N-k); 0**0 == 1 keeps the endpoints exact
    basis = np.stack(
        [coeffs[k] * u**k * one_minus ** (degree - k) for k in range(degree + 1)],
        axis=1,
    ).astype(dtype, copy=False)
    return basis @ ctrl


def polyline_length(points: NDArray[np.floating]) -> float:
    """Sum of consecutive point-to-point distances along an (n, 2) array."""
    if len(points) < 2:
        return 0.0
    diffs = np.diff(points, axis=0)
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))
