"""Convenience layer: hash an identity, render it, encode it, tag it for caches."""

from __future__ import annotations

import hashlib
import io
import ipaddress

from nineblock.engine.canvas import Canvas
from nineblock.engine.config import RenderConfig
from nineblock.engine.decoder import to_unsigned
from nineblock.engine.quilt import render_quilt

DEFAULT_IDENTICON_SIZE = 64

# Bump when a change to the engine alters pixels for an existing code, so
# cached images stop validating.
VERSION = "1"


def _identity_bytes(obj: object) -> bytes:
    if obj is None:
        return b""
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return bytes(obj)
    if isinstance(obj, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return obj.packed
    return str(obj).encode("utf-8")


def identicon_code(obj: object, salt: str | bytes = "") -> int:
    """Stable signed 32-bit code for an identity (email, IP address, user id...).

    SHA-1 over salt + identity bytes; the first four digest bytes, big-endian.
    """
    salt_bytes = salt.encode("utf-8") if isinstance(salt, str) else bytes(salt)
    digest = hashlib.sha1(salt_bytes + _identity_bytes(obj)).digest()
    return int.from_bytes(digest[:4], "big", signed=True)


def generate(
    obj: object,
    size: int = DEFAULT_IDENTICON_SIZE,
    config: RenderConfig | None = None,
    *,
    salt: str | bytes = "",
) -> Canvas:
    """Render the identicon for an arbitrary identity object."""
    return render_quilt(identicon_code(obj, salt), size, config)


def etag(code: int, size: int = DEFAULT_IDENTICON_SIZE, version: str = VERSION) -> str:
    """Weak ETag, e.g. W/"bdb5e3e5@48v1"."""
    return f'W/"{to_unsigned(code):x}@{size}v{version}"'


def to_png(canvas: Canvas) -> bytes:
    buf = io.BytesIO()
    canvas.to_image().save(buf, format="PNG")
    return buf.getvalue()
