"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from nineblock import __version__
from nineblock.engine.patches import PATCH_COUNT
from nineblock.identicon import VERSION
from nineblock.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        identicon_version=VERSION,
        patches=PATCH_COUNT,
    )
