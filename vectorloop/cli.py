"""Command-line entry point: tessellate the contour of an SVG file."""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from vectorloop.config import settings
from vectorloop.engine.config import Precision, TessellationConfig
from vectorloop.engine.tessellator import flatten_points, tessellate_path
from vectorloop.errors import VectorLoopError
from vectorloop.loop import load_path
from vectorloop.svg.serializer import serialize_path

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vectorloop",
        description="Resample a closed SVG contour into an arc-length-uniform polygon",
    )
    parser.add_argument("input", help="SVG file containing <svg><g><path d=...>")
    parser.add_argument(
        "-n", "--sample-count", type=int, default=settings.default_sample_count,
        help="Requested number of points for the whole loop",
    )
    parser.add_argument(
        "-p", "--precision", choices=[p.value for p in Precision],
        default=settings.default_precision.value,
    )
    parser.add_argument("-o", "--output", help="Write the flat buffer to this .npy file")
    parser.add_argument("--segments", action="store_true", help="Print the parsed path instead of points")
    parser.add_argument("--no-group", action="store_true", help="Accept a <path> directly under <svg>")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.vectorloop_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        path = load_path(args.input, require_group=False if args.no_group else None)
        if args.segments:
            print(serialize_path(path))
            return 0
        config = TessellationConfig(closure_tolerance=settings.closure_tolerance)
        points = tessellate_path(path, args.sample_count, args.precision, config)
    except (VectorLoopError, ValueError) as e:
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    flat = flatten_points(points)
    if args.output:
        np.save(args.output, flat)
        logger.info("Wrote %d points to %s", len(points), args.output)
    else:
        for x, y in points:
            print(f"{x} {y}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
