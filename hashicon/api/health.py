"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from hashicon import __version__
from hashicon.engine.shapes import CENTER_SHAPE_COUNT, OUTER_SHAPE_COUNT
from hashicon.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        outer_shapes=OUTER_SHAPE_COUNT,
        center_shapes=CENTER_SHAPE_COUNT,
    )
