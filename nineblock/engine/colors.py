"""Color policy: fill color from the code, outline when contrast is poor."""

from __future__ import annotations

import math
from dataclasses import dataclass

from nineblock.engine.decoder import DecodedCode

RGB = tuple[int, int, int]

WHITE: RGB = (255, 255, 255)

# Fill colors closer than this (Euclidean, raw RGB) to the background get an
# outline. A contrast heuristic, not a perceptual metric: it must stay at
# exactly 32.0 or previously low-contrast codes would render differently.
STROKE_DISTANCE_THRESHOLD = 32.0

# 5-bit channels are shifted to the top of the 8-bit range.
_CHANNEL_SHIFT = 3


@dataclass(frozen=True)
class ResolvedColor:
    fill: RGB
    background: RGB
    stroke: RGB | None = None


def fill_color(decoded: DecodedCode) -> RGB:
    return (
        decoded.red << _CHANNEL_SHIFT,
        decoded.green << _CHANNEL_SHIFT,
        decoded.blue << _CHANNEL_SHIFT,
    )


def color_distance(c1: RGB, c2: RGB) -> float:
    """Euclidean distance in RGB space."""
    dr = c1[0] - c2[0]
    dg = c1[1] - c2[1]
    db = c1[2] - c2[2]
    return math.sqrt(dr * dr + dg * dg + db * db)


def complementary_color(color: RGB) -> RGB:
    """Channel-wise bitwise complement over 0–255."""
    return (color[0] ^ 0xFF, color[1] ^ 0xFF, color[2] ^ 0xFF)


def stroke_color(fill: RGB, background: RGB) -> RGB | None:
    if color_distance(fill, background) < STROKE_DISTANCE_THRESHOLD:
        return complementary_color(fill)
    return None


def resolve_colors(decoded: DecodedCode, background: RGB = WHITE) -> ResolvedColor:
    fill = fill_color(decoded)
    return ResolvedColor(fill=fill, background=background, stroke=stroke_color(fill, background))


def parse_hex_color(hex_color: str) -> RGB:
    """Convert '#RRGGBB' or 'RRGGBB' to (r,g,b). Handles shorthand '#RGB' too."""
    h = hex_color.strip().lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    try:
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
    except ValueError as e:
        raise ValueError(f"Invalid hex color: {hex_color!r}") from e
