"""Tessellation configuration — numeric tunables for the engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np


class Precision(str, enum.Enum):
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.value)


@dataclass
class TessellationConfig:
    """Controls length estimation and closure checks."""

    # Equal parameter steps used to approximate a curve's arc length
    length_resolution: int = 10

    # Max distance between a contour's end and start for it to count as closed
    closure_tolerance: float = 1e-9

    precision: Precision = Precision.FLOAT64
