"""SVG file → Path → flat numeric buffer.

This layer owns file I/O and numpy materialization; the scanner, parser and
tessellator below it are pure.
"""

from __future__ import annotations

import logging
from pathlib import Path as FilePath

import numpy as np
from numpy.typing import NDArray

from vectorloop.config import settings
from vectorloop.engine.config import Precision, TessellationConfig
from vectorloop.engine.segments import Path
from vectorloop.engine.tessellator import flatten_points, tessellate_path
from vectorloop.errors import SourceIOError
from vectorloop.svg.path_parser import parse_path
from vectorloop.svg.scanner import locate_path_data

logger = logging.getLogger(__name__)


def read_source(file_path: str | FilePath) -> str:
    try:
        with open(file_path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceIOError(f"Cannot read {file_path}: {e}") from e


def parse_svg_text(svg_text: str, require_group: bool | None = None) -> Path:
    """Locate the path's `d` attribute in `svg_text` and parse it."""
    if require_group is None:
        require_group = settings.require_group
    d = locate_path_data(svg_text, require_group=require_group)
    return parse_path(
        d,
        tolerance=settings.closure_tolerance,
        strict_closure=settings.strict_closure,
    )


def load_path(file_path: str | FilePath, require_group: bool | None = None) -> Path:
    path = parse_svg_text(read_source(file_path), require_group=require_group)
    logger.info("Loaded %s: %d segments", file_path, len(path))
    return path


def polyrize_svg(
    file_path: str | FilePath,
    div_count: int,
    precision: Precision | str = Precision.FLOAT64,
) -> NDArray[np.floating]:
    """Tessellate the contour in `file_path` into (x0, y0, x1, y1, ...)."""
    path = load_path(file_path)
    config = TessellationConfig(closure_tolerance=settings.closure_tolerance)
    points = tessellate_path(path, div_count, precision, config)
    return flatten_points(points)


def polyrize_svg_float32(file_path: str | FilePath, div_count: int) -> NDArray[np.float32]:
    return polyrize_svg(file_path, div_count, Precision.FLOAT32)


def polyrize_svg_float64(file_path: str | FilePath, div_count: int) -> NDArray[np.float64]:
    return polyrize_svg(file_path, div_count, Precision.FLOAT64)
