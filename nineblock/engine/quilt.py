"""Quilt composer: decode a code and stitch nine patches into a canvas.

Layout of a quilt (draw order in brackets):

    corner [5]   side [1]     corner [6]
    side   [4]   middle [0]   side   [2]
    corner [8]   side [3]     corner [7]

Sides and corners each advance their turn by one quarter per cell, moving
clockwise, so the outer ring is rotationally consistent.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass

from nineblock.engine.canvas import Canvas
from nineblock.engine.colors import ResolvedColor, resolve_colors
from nineblock.engine.config import RenderConfig
from nineblock.engine.decoder import DecodedCode, decode, to_unsigned
from nineblock.engine.errors import InvalidSizeError
from nineblock.engine.patches import PATCH_COUNT, PATCHES, PatchShape, build_patch_shapes
from nineblock.utils.geometry import apply_transform, compose, quarter_turn, scaling, translation

logger = logging.getLogger(__name__)

# Outline pen width in logical patch units; scales with the cell.
_STROKE_WIDTH = 1.0

# Cell offsets in units of one block, clockwise from top / top-left.
_SIDE_CELLS = ((1, 0), (2, 1), (1, 2), (0, 1))
_CORNER_CELLS = ((0, 0), (2, 0), (2, 2), (0, 2))


@dataclass(frozen=True)
class PatchPlacement:
    """One cell of the quilt: where it goes and how its patch is oriented."""

    x: float
    y: float
    size: float
    patch: int
    turn: int
    invert: bool


def quilt_layout(decoded: DecodedCode, pixel_size: float) -> list[PatchPlacement]:
    """The nine placements in draw order: middle, sides, then corners."""
    block = pixel_size / 3.0
    placements = [
        PatchPlacement(block, block, block, decoded.middle_patch, 0, decoded.middle_invert),
    ]
    for i, (cx, cy) in enumerate(_SIDE_CELLS):
        placements.append(
            PatchPlacement(
                cx * block, cy * block, block,
                decoded.side_patch, (decoded.side_turn + i) % 4, decoded.side_invert,
            )
        )
    for i, (cx, cy) in enumerate(_CORNER_CELLS):
        placements.append(
            PatchPlacement(
                cx * block, cy * block, block,
                decoded.corner_patch, (decoded.corner_turn + i) % 4, decoded.corner_invert,
            )
        )
    return placements


def place_shape(
    shape: PatchShape, x: float, y: float, size: float, turn: int, patch_size: float
) -> tuple[PatchShape, float]:
    """Map a catalog shape into a cell. Returns the placed sub-paths and the scale used.

    Rotation happens about the shape's own origin, then the result is scaled
    and moved to the cell center.
    """
    scale = size / patch_size
    offset = size / 2.0
    matrix = compose(translation(x + offset, y + offset), scaling(scale), quarter_turn(turn))
    return tuple(apply_transform(matrix, sub) for sub in shape), scale


def draw_patch(
    canvas: Canvas,
    x: float,
    y: float,
    size: float,
    patch: int,
    turn: int,
    invert: bool,
    colors: ResolvedColor,
    config: RenderConfig | None = None,
) -> None:
    """Draw one patch into the cell at (x, y). Inversion swaps base and shape colors."""
    config = config or RenderConfig()
    patch %= PATCH_COUNT
    turn %= 4
    if PATCHES[patch].inverted:
        invert = not invert

    canvas.fill_rect(x, y, size, size, colors.fill if invert else colors.background)

    shape = build_patch_shapes(config.patch_size)[patch]
    placed, scale = place_shape(shape, x, y, size, turn, config.patch_size)

    # Outline first so the fill can't bury it where the two nearly coincide.
    if colors.stroke is not None:
        canvas.stroke_polygon(placed, colors.stroke, _STROKE_WIDTH * scale)

    canvas.fill_polygon(placed, colors.background if invert else colors.fill)


def validate_size(pixel_size: object) -> int:
    """Coerce any integer-like size (including numpy integers) to int, or raise InvalidSizeError."""
    if isinstance(pixel_size, bool):
        raise InvalidSizeError(pixel_size)
    try:
        size = operator.index(pixel_size)
    except TypeError:
        raise InvalidSizeError(pixel_size) from None
    if size <= 0:
        raise InvalidSizeError(pixel_size)
    return size


def render_quilt(code: int, pixel_size: int, config: RenderConfig | None = None) -> Canvas:
    """Render a code as a pixel_size × pixel_size identicon.

    Raises InvalidSizeError before allocating anything when pixel_size is
    not a positive integer. Every code is accepted; only its low 32 bits
    are used.
    """
    size = validate_size(pixel_size)
    config = config or RenderConfig()

    decoded = decode(code)
    colors = resolve_colors(decoded, config.background)

    canvas = Canvas(size, config.background)
    for p in quilt_layout(decoded, size):
        draw_patch(canvas, p.x, p.y, p.size, p.patch, p.turn, p.invert, colors, config)

    logger.debug(
        "Rendered quilt %08x at %dpx (fill=%s, stroke=%s)",
        to_unsigned(code),
        size,
        colors.fill,
        colors.stroke,
    )
    return canvas.freeze()


render = render_quilt
