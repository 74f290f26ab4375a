"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

# Exact rotation matrices for quarter turns (clockwise on a y-down raster).
# Integer entries keep rotated vertices free of cos/sin rounding.
_QUARTER_TURNS = (
    np.array([[1.0, 0.0], [0.0, 1.0]]),
    np.array([[0.0, -1.0], [1.0, 0.0]]),
    np.array([[-1.0, 0.0], [0.0, -1.0]]),
    np.array([[0.0, 1.0], [-1.0, 0.0]]),
)


def translation(dx: float, dy: float) -> NDArray[np.float64]:
    """3×3 homogeneous translation matrix."""
    return np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]])


def scaling(sx: float, sy: float | None = None) -> NDArray[np.float64]:
    """3×3 homogeneous scale matrix. Uniform when sy is omitted."""
    if sy is None:
        sy = sx
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


def quarter_turn(turn: int) -> NDArray[np.float64]:
    """3×3 homogeneous rotation by turn × 90°."""
    m = np.eye(3)
    m[:2, :2] = _QUARTER_TURNS[turn % 4]
    return m


def compose(*matrices: NDArray[np.float64]) -> NDArray[np.float64]:
    """Compose transforms left to right, like successive graphics-context calls.

    compose(translate, scale, rotate) applied to a point rotates first, then
    scales, then translates.
    """
    out = np.eye(3)
    for m in matrices:
        out = out @ m
    return out


def apply_transform(matrix: NDArray[np.float64], points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Map an (n, 2) point array through a 3×3 affine matrix. Returns a new array."""
    if len(points) == 0:
        return np.empty((0, 2))
    return points @ matrix[:2, :2].T + matrix[:2, 2]


def closed_segments(points: NDArray[np.float64]) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Start and end points of every edge of a closed polygon (last → first included)."""
    return points, np.roll(points, -1, axis=0)


def segment_distances(
    px: NDArray[np.float64],
    py: NDArray[np.float64],
    polygons: list[NDArray[np.float64]] | tuple[NDArray[np.float64], ...],
) -> NDArray[np.float64]:
    """Minimum distance from each point to the boundary of a set of closed sub-paths."""
    best = np.full(np.broadcast(px, py).shape, np.inf)
    for poly in polygons:
        starts, ends = closed_segments(poly)
        for (x0, y0), (x1, y1) in zip(starts, ends):
            dx = x1 - x0
            dy = y1 - y0
            length_sq = dx * dx + dy * dy
            if length_sq == 0:
                d = np.hypot(px - x0, py - y0)
            else:
                t = np.clip(((px - x0) * dx + (py - y0) * dy) / length_sq, 0.0, 1.0)
                d = np.hypot(px - (x0 + t * dx), py - (y0 + t * dy))
            best = np.minimum(best, d)
    return best


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area of a closed polygon. Positive = CW on a y-down raster."""
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))
