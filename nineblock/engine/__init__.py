"""Nine-block identicon engine.

Usage:
    canvas = render(0x1234ABCD, 64)
    canvas.pixels  # (64, 64, 3) uint8, read-only

The engine is pure: same code, size and RenderConfig always give the same
pixels, and renders share nothing but the immutable patch catalog.
"""

from nineblock.engine.canvas import Canvas
from nineblock.engine.config import RenderConfig
from nineblock.engine.decoder import DecodedCode, decode
from nineblock.engine.errors import InvalidSizeError
from nineblock.engine.quilt import render, render_quilt

__all__ = [
    "Canvas",
    "DecodedCode",
    "InvalidSizeError",
    "RenderConfig",
    "decode",
    "render",
    "render_quilt",
]
