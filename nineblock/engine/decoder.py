"""Code decoder: unpack a 32-bit identicon code into quilt fields.

Bit layout (least significant first):

    0-1    middle patch type (index into CENTER_PATCH_TYPES)
    2      middle invert
    3-6    corner patch type
    7      corner invert
    8-9    corner turn
    10-13  side patch type
    14     side invert
    15-16  side turn
    16-20  blue
    21-25  green
    27-31  red

The side turn field overlaps the low blue bit; that is how codes have always
been read, and changing it would change existing images.
"""

from __future__ import annotations

from dataclasses import dataclass

from nineblock.engine.patches import CENTER_PATCH_TYPES

CODE_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class DecodedCode:
    middle_patch: int
    middle_invert: bool
    corner_patch: int
    corner_invert: bool
    corner_turn: int
    side_patch: int
    side_invert: bool
    side_turn: int
    red: int
    green: int
    blue: int


def to_unsigned(code: int) -> int:
    """Reduce any Python int to its low 32 bits as an unsigned value."""
    return int(code) & CODE_MASK


def decode(code: int) -> DecodedCode:
    """Unpack a code. Every integer is valid; only the low 32 bits are read."""
    c = to_unsigned(code)
    return DecodedCode(
        middle_patch=CENTER_PATCH_TYPES[c & 0x3],
        middle_invert=bool((c >> 2) & 0x1),
        corner_patch=(c >> 3) & 0x0F,
        corner_invert=bool((c >> 7) & 0x1),
        corner_turn=(c >> 8) & 0x3,
        side_patch=(c >> 10) & 0x0F,
        side_invert=bool((c >> 14) & 0x1),
        side_turn=(c >> 15) & 0x3,
        blue=(c >> 16) & 0x1F,
        green=(c >> 21) & 0x1F,
        red=(c >> 27) & 0x1F,
    )
