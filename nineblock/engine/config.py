"""Render configuration: immutable knobs passed into every render."""

from __future__ import annotations

from dataclasses import dataclass

from nineblock.engine.colors import RGB, WHITE
from nineblock.engine.patches import DEFAULT_PATCH_SIZE


@dataclass(frozen=True)
class RenderConfig:
    """Background and logical patch size. Unrelated to the output pixel size."""

    background: RGB = WHITE

    # Logical units a catalog patch spans before scaling into its cell.
    # Only affects outline width and rounding, never the layout.
    patch_size: float = DEFAULT_PATCH_SIZE

    def __post_init__(self) -> None:
        if len(self.background) != 3 or any(not 0 <= int(c) <= 255 for c in self.background):
            raise ValueError(f"background must be an 8-bit RGB triple, got {self.background!r}")
        if self.patch_size <= 0:
            raise ValueError(f"patch_size must be positive, got {self.patch_size}")
        object.__setattr__(self, "background", tuple(int(c) for c in self.background))
