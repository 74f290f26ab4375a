"""GET /api/identicon*: serve identicons as PNG with weak ETags."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from nineblock.config import Settings, settings as _startup_settings
from nineblock.dependencies import get_settings
from nineblock.engine.colors import resolve_colors
from nineblock.engine.decoder import decode, to_unsigned
from nineblock.engine.errors import InvalidSizeError
from nineblock.engine.quilt import render_quilt, validate_size
from nineblock.identicon import etag, identicon_code, to_png
from nineblock.models.responses import DecodedCodeResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# Upper bound is fixed when the route is declared.
_MAX_SIZE = _startup_settings.nineblock_max_size


def _checked_size(size: int | None, cfg: Settings) -> int:
    size = cfg.nineblock_default_size if size is None else size
    try:
        return validate_size(size)
    except InvalidSizeError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


def _png_response(request: Request, code: int, size: int | None, cfg: Settings) -> Response:
    size = _checked_size(size, cfg)

    tag = etag(code, size)
    headers = {
        "ETag": tag,
        "Cache-Control": f"public,max-age={cfg.nineblock_cache_max_age}",
    }

    if request.headers.get("if-none-match") == tag:
        return Response(status_code=304, headers=headers)

    canvas = render_quilt(code, size, cfg.render_config())

    logger.debug("Serving identicon %s", tag)
    return Response(content=to_png(canvas), media_type="image/png", headers=headers)


@router.get("/identicon", response_class=Response)
async def identicon_by_code(
    request: Request,
    code: int = Query(..., description="32-bit identicon code; only the low 32 bits are used"),
    size: int | None = Query(default=None, le=_MAX_SIZE, description="Width and height in pixels"),
    cfg: Settings = Depends(get_settings),
) -> Response:
    return _png_response(request, code, size, cfg)


@router.get("/identicon/{identity}", response_class=Response)
async def identicon_by_identity(
    request: Request,
    identity: str,
    size: int | None = Query(default=None, le=_MAX_SIZE, description="Width and height in pixels"),
    cfg: Settings = Depends(get_settings),
) -> Response:
    code = identicon_code(identity, cfg.nineblock_salt)
    return _png_response(request, code, size, cfg)


@router.get("/decode", response_model=DecodedCodeResponse)
async def decode_code(
    code: int = Query(..., description="32-bit identicon code"),
    size: int | None = Query(default=None, le=_MAX_SIZE, description="Width and height in pixels"),
    cfg: Settings = Depends(get_settings),
) -> DecodedCodeResponse:
    size = _checked_size(size, cfg)
    decoded = decode(code)
    colors = resolve_colors(decoded, cfg.render_config().background)
    return DecodedCodeResponse(
        code=to_unsigned(code),
        middle_patch=decoded.middle_patch,
        middle_invert=decoded.middle_invert,
        corner_patch=decoded.corner_patch,
        corner_invert=decoded.corner_invert,
        corner_turn=decoded.corner_turn,
        side_patch=decoded.side_patch,
        side_invert=decoded.side_invert,
        side_turn=decoded.side_turn,
        fill=colors.fill,
        stroke=colors.stroke,
        etag=etag(code, size),
    )
