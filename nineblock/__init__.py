"""nineblock: deterministic nine-block identicons from 32-bit codes."""

from nineblock.engine import Canvas, InvalidSizeError, RenderConfig, decode, render
from nineblock.identicon import VERSION, etag, generate, identicon_code, to_png

__version__ = "0.1.0"

__all__ = [
    "Canvas",
    "InvalidSizeError",
    "RenderConfig",
    "VERSION",
    "decode",
    "etag",
    "generate",
    "identicon_code",
    "render",
    "to_png",
]
