"""Tests for the canvas rasterizer."""

import numpy as np
import pytest

from nineblock.engine.canvas import Canvas

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def _square(x0, y0, x1, y1):
    return (np.array([[x0, y0], [x1, y0], [x1, y1], [x0, y1]], dtype=np.float64),)


def test_initialised_to_background():
    canvas = Canvas(4, (10, 20, 30))
    assert canvas.size == 4
    assert canvas.pixels.shape == (4, 4, 3)
    assert canvas.pixels.dtype == np.uint8
    assert (canvas.pixels == np.array([10, 20, 30], dtype=np.uint8)).all()


def test_fill_rect_uses_pixel_centers():
    canvas = Canvas(10, WHITE)
    canvas.fill_rect(2.4, 0.0, 3.3, 10.0, BLACK)
    row = canvas.pixels[0, :, 0]
    # centers 2.5 through 5.5 lie in [2.4, 5.7)
    assert list(np.where(row == 0)[0]) == [2, 3, 4, 5]


def test_fill_rect_adjacent_cells_do_not_overlap():
    canvas = Canvas(10, WHITE)
    block = 10 / 3
    canvas.fill_rect(0, 0, block, 10, (1, 1, 1))
    canvas.fill_rect(block, 0, block, 10, (2, 2, 2))
    canvas.fill_rect(2 * block, 0, block, 10, (3, 3, 3))
    row = canvas.pixels[5, :, 0].tolist()
    # center 6.5 still falls before 2 * block
    assert row == [1, 1, 1, 2, 2, 2, 2, 3, 3, 3]


def test_fill_rect_clipped():
    canvas = Canvas(4, WHITE)
    canvas.fill_rect(-5, -5, 100, 100, BLACK)
    assert (canvas.pixels == 0).all()


def test_fill_polygon_square():
    canvas = Canvas(8, WHITE)
    canvas.fill_polygon(_square(2, 2, 6, 6), BLACK)
    black = (canvas.pixels == 0).all(axis=-1)
    assert black.sum() == 16
    assert black[2:6, 2:6].all()


def test_fill_polygon_edges_inclusive():
    canvas = Canvas(4, WHITE)
    # Right edge of the square passes exactly through pixel centers x = 2.5
    canvas.fill_polygon(_square(0.5, 0.5, 2.5, 2.5), BLACK)
    black = (canvas.pixels == 0).all(axis=-1)
    assert black[0:3, 0:3].all()
    assert black.sum() == 9


def test_fill_polygon_reverse_wound_hole():
    outer = np.array([[0, 0], [10, 0], [10, 10], [0, 10]], dtype=np.float64)
    inner = np.array([[3, 3], [3, 7], [7, 7], [7, 3]], dtype=np.float64)
    canvas = Canvas(10, WHITE)
    canvas.fill_polygon((outer, inner), BLACK)
    black = (canvas.pixels == 0).all(axis=-1)
    assert not black[4:6, 4:6].any()
    assert black[0, :].all()


def test_fill_polygon_hole_edges_stay_filled():
    outer = np.array([[0, 0], [10, 0], [10, 10], [0, 10]], dtype=np.float64)
    inner = np.array([[2.5, 2.5], [2.5, 6.5], [6.5, 6.5], [6.5, 2.5]], dtype=np.float64)
    canvas = Canvas(10, WHITE)
    canvas.fill_polygon((outer, inner), BLACK)
    black = (canvas.pixels == 0).all(axis=-1)
    # centers 2.5 and 6.5 sit on the hole's boundary
    assert not black[3:6, 3:6].any()
    assert black[2, 2:7].all()
    assert black[6, 2:7].all()
    assert black[2:7, 2].all()
    assert black.sum() == 100 - 9


def test_fill_polygon_same_winding_no_hole():
    outer = np.array([[0, 0], [10, 0], [10, 10], [0, 10]], dtype=np.float64)
    inner = np.array([[3, 3], [7, 3], [7, 7], [3, 7]], dtype=np.float64)
    canvas = Canvas(10, WHITE)
    canvas.fill_polygon((outer, inner), BLACK)
    assert (canvas.pixels == 0).all()


def test_fill_polygon_outside_canvas_is_noop():
    canvas = Canvas(4, WHITE)
    canvas.fill_polygon(_square(10, 10, 20, 20), BLACK)
    assert (canvas.pixels == 255).all()


def test_stroke_polygon_outline_only():
    canvas = Canvas(10, WHITE)
    canvas.stroke_polygon(_square(1.5, 1.5, 8.5, 8.5), BLACK, 1.0)
    black = (canvas.pixels == 0).all(axis=-1)
    assert black[1, 1:9].all()
    assert black[8, 1:9].all()
    assert black[1:9, 1].all()
    assert not black[3:7, 3:7].any()
    assert not black[0, :].any()


def test_freeze_makes_pixels_read_only():
    canvas = Canvas(4, WHITE)
    assert not canvas.frozen
    assert canvas.freeze() is canvas
    assert canvas.frozen
    with pytest.raises(ValueError):
        canvas.fill_rect(0, 0, 4, 4, BLACK)


def test_pixel_accessor():
    canvas = Canvas(4, WHITE)
    canvas.fill_rect(1, 2, 1, 1, (1, 2, 3))
    assert canvas.pixel(1, 2) == (1, 2, 3)
    assert canvas.pixel(2, 1) == WHITE


def test_to_image():
    canvas = Canvas(6, (9, 8, 7)).freeze()
    img = canvas.to_image()
    assert img.mode == "RGB"
    assert img.size == (6, 6)
    assert img.getpixel((0, 0)) == (9, 8, 7)
