"""POST /api/parse and /api/tessellate — path data in, geometry out."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from vectorloop.config import settings
from vectorloop.engine.config import TessellationConfig
from vectorloop.engine.segments import Path
from vectorloop.engine.tessellator import flatten_points, tessellate_path, to_polygon
from vectorloop.errors import VectorLoopError
from vectorloop.loop import parse_svg_text
from vectorloop.models.requests import ParseRequest, TessellateRequest
from vectorloop.models.responses import ErrorResponse, ParseResponse, SegmentModel, TessellateResponse
from vectorloop.svg.path_parser import parse_path
from vectorloop.svg.serializer import serialize_path

router = APIRouter()
logger = logging.getLogger(__name__)


def _unprocessable(e: VectorLoopError) -> HTTPException:
    logger.info("Rejected input: %s: %s", type(e).__name__, e)
    detail = ErrorResponse(error=type(e).__name__, message=str(e))
    return HTTPException(status_code=422, detail=detail.model_dump())


def _segments(path: Path) -> list[SegmentModel]:
    return [
        SegmentModel(kind=seg.kind.value, points=[p.as_tuple() for p in seg.points])
        for seg in path
    ]


@router.post("/parse", response_model=ParseResponse, responses={422: {"model": ErrorResponse}})
async def parse(req: ParseRequest) -> ParseResponse:
    try:
        path = parse_path(
            req.d,
            tolerance=settings.closure_tolerance,
            strict_closure=req.strict_closure,
        )
    except VectorLoopError as e:
        raise _unprocessable(e) from e
    return ParseResponse(segments=_segments(path), d=serialize_path(path))


@router.post("/tessellate", response_model=TessellateResponse, responses={422: {"model": ErrorResponse}})
async def tessellate(req: TessellateRequest) -> TessellateResponse:
    start = time.perf_counter()
    try:
        path = parse_svg_text(req.svg, require_group=req.require_group)
        config = TessellationConfig(closure_tolerance=settings.closure_tolerance)
        points = tessellate_path(path, req.sample_count, req.precision, config)
    except VectorLoopError as e:
        raise _unprocessable(e) from e

    poly = to_polygon(points)
    elapsed = (time.perf_counter() - start) * 1000
    return TessellateResponse(
        points=[float(v) for v in flatten_points(points)],
        point_count=len(points),
        segment_count=len(path),
        precision=req.precision.value,
        area=float(poly.area),
        perimeter=float(poly.length),
        processing_time_ms=round(elapsed, 3),
    )
