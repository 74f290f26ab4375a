"""Patch catalog: the 16 polygon motifs a quilt is stitched from.

Each patch is a list of vertex indices on a 5×5 grid. Vertices are numbered
0–24 from the top-left corner, left to right, top to bottom:

     0  1  2  3  4
     5  6  7  8  9
    10 11 12 13 14
    15 16 17 18 19
    20 21 22 23 24

A ``PATCH_MOVETO`` marker closes the current sub-path and starts a new one.
"""

from __future__ import annotations

import enum
import functools
import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

# ── Named constants ──

PATCH_GRIDS = 5
PATCH_MOVETO = -1
DEFAULT_PATCH_SIZE = 20.0

# Indices into the catalog that may sit in the middle cell. The decoder
# picks one of these four with bits 0–1 of the code.
CENTER_PATCH_TYPES = (0, 4, 8, 15)


class PatchFlag(enum.IntFlag):
    NONE = 0
    SYMMETRIC = 1
    INVERTED = 2


@dataclass(frozen=True)
class PatchDefinition:
    vertices: tuple[int, ...]
    flags: PatchFlag = PatchFlag.NONE

    @property
    def symmetric(self) -> bool:
        return bool(self.flags & PatchFlag.SYMMETRIC)

    @property
    def inverted(self) -> bool:
        return bool(self.flags & PatchFlag.INVERTED)


_S = PatchFlag.SYMMETRIC
_I = PatchFlag.INVERTED
_M = PATCH_MOVETO

PATCHES: tuple[PatchDefinition, ...] = (
    PatchDefinition((0, 4, 24, 20), _S),
    PatchDefinition((0, 4, 20)),
    PatchDefinition((2, 24, 20)),
    PatchDefinition((0, 2, 20, 22)),
    PatchDefinition((2, 14, 22, 10), _S),
    PatchDefinition((0, 14, 24, 22)),
    # Triangle with a reverse-wound triangular hole.
    PatchDefinition((2, 24, 22, 20, _M, 22, 13, 11)),
    PatchDefinition((0, 14, 22)),
    PatchDefinition((6, 8, 18, 16), _S),
    PatchDefinition((4, 20, 10, 12, 2)),
    PatchDefinition((0, 2, 12, 10)),
    PatchDefinition((10, 14, 22)),
    PatchDefinition((20, 12, 24)),
    PatchDefinition((10, 2, 12)),
    PatchDefinition((0, 2, 10)),
    # Same square as patch 0, drawn negative; wraps the 4-bit selector.
    PatchDefinition((0, 4, 24, 20), _S | _I),
)

PATCH_COUNT = len(PATCHES)

# A patch shape is one or more closed sub-paths, each an (n, 2) float array.
PatchShape = tuple[NDArray[np.float64], ...]


def vertex_position(v: int, patch_size: float = DEFAULT_PATCH_SIZE) -> tuple[float, float]:
    """Logical (x, y) of grid vertex v, centered on the origin."""
    if not 0 <= v < PATCH_GRIDS * PATCH_GRIDS:
        raise ValueError(f"Patch vertex out of range: {v}")
    step = patch_size / (PATCH_GRIDS - 1)
    offset = patch_size / 2.0
    return (v % PATCH_GRIDS) * step - offset, (v // PATCH_GRIDS) * step - offset


def build_patch_shape(definition: PatchDefinition, patch_size: float = DEFAULT_PATCH_SIZE) -> PatchShape:
    """Turn one vertex list into read-only sub-path arrays."""
    subpaths: list[list[tuple[float, float]]] = [[]]
    for v in definition.vertices:
        if v == PATCH_MOVETO:
            subpaths.append([])
            continue
        subpaths[-1].append(vertex_position(v, patch_size))

    shape = []
    for points in subpaths:
        if len(points) < 3:
            raise ValueError(f"Degenerate sub-path in patch {definition.vertices}")
        arr = np.array(points, dtype=np.float64)
        arr.setflags(write=False)
        shape.append(arr)
    return tuple(shape)


@functools.lru_cache(maxsize=8)
def build_patch_shapes(patch_size: float = DEFAULT_PATCH_SIZE) -> tuple[PatchShape, ...]:
    """Build every catalog shape for a logical patch size. Cached per size."""
    if patch_size <= 0:
        raise ValueError(f"patch_size must be positive, got {patch_size}")
    shapes = tuple(build_patch_shape(p, patch_size) for p in PATCHES)
    logger.debug("Built %d patch shapes at logical size %.1f", len(shapes), patch_size)
    return shapes
