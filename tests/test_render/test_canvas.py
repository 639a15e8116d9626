"""Tests for the Pillow-backed canvas."""

import pytest

from svgraster.errors import RenderError
from svgraster.render.canvas import PngCanvas
from svgraster.utils.color import Color, WHITE
from svgraster.utils.geometry import Point

RED = Color(255, 0, 0)


def test_canvas_size_and_background():
    canvas = PngCanvas(8, 6)
    assert canvas.image.size == (8, 6)
    assert canvas.pixel(7, 5) == WHITE


def test_non_positive_size_is_rejected():
    with pytest.raises(RenderError):
        PngCanvas(0, 10)


def test_draw_ellipse_fills_center():
    canvas = PngCanvas(20, 20)
    canvas.draw_ellipse(Point(10, 10), Point(5, 3), RED)
    assert canvas.pixel(10, 10) == RED
    assert canvas.pixel(14, 10) == RED
    assert canvas.pixel(10, 16) == WHITE


def test_negative_radii_draw_mirrored_ellipse():
    canvas = PngCanvas(20, 20)
    canvas.draw_ellipse(Point(10, 10), Point(-4, -4), RED)
    assert canvas.pixel(10, 10) == RED
    assert canvas.pixel(12, 10) == RED


def test_draw_line():
    canvas = PngCanvas(10, 10)
    canvas.draw_line(Point(0, 5), Point(9, 5), RED)
    assert all(canvas.pixel(x, 5) == RED for x in range(10))
    assert canvas.pixel(5, 4) == WHITE


def test_draw_polygon():
    canvas = PngCanvas(10, 10)
    canvas.draw_polygon([Point(1, 1), Point(8, 1), Point(8, 8), Point(1, 8)], RED)
    assert canvas.pixel(4, 4) == RED
    assert canvas.pixel(0, 0) == WHITE


def test_save_creates_parent_dirs(tmp_path):
    out = tmp_path / "a" / "b" / "img.png"
    PngCanvas(2, 2).save(out)
    assert out.exists()


def test_save_unknown_format_raises(tmp_path):
    with pytest.raises(RenderError):
        PngCanvas(2, 2).save(tmp_path / "img.unknownext")


def test_out_of_range_primitives_are_skipped():
    canvas = PngCanvas(10, 10)
    canvas.draw_ellipse(Point(10**30, 5), Point(1, 1), RED)
    canvas.draw_line(Point(0, 5), Point(-(10**30), 5), RED)
    canvas.draw_polygon([Point(0, 0), Point(9, 0), Point(9, 10**30)], RED)
    assert all(canvas.pixel(x, y) == WHITE for x in range(10) for y in range(10))
