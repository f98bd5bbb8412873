import pytest

from wireframe.canvas import Canvas
from wireframe.mapfile import Point


def _lit(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.pixel(x, y)
    }


def test_put_and_read_pixel():
    canvas = Canvas(8, 6)
    canvas.put_pixel(3, 2, 0x00FF00)
    assert canvas.pixel(3, 2) == 0x00FF00
    assert _lit(canvas) == {(3, 2)}


def test_out_of_bounds_pixels_are_ignored():
    canvas = Canvas(8, 6)
    for x, y in [(-1, 0), (8, 0), (0, 6), (0, -1)]:
        canvas.put_pixel(x, y, 0xFFFFFF)
    assert canvas.to_bytes() == bytes(8 * 6 * 3)


def test_reading_outside_raises():
    canvas = Canvas(4, 4)
    with pytest.raises(IndexError):
        canvas.pixel(4, 0)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Canvas(0, 5)


def test_clear_resets_pixels():
    canvas = Canvas(5, 5)
    canvas.put_pixel(1, 1, 0xABCDEF)
    canvas.clear()
    assert canvas.pixel(1, 1) == 0


def test_to_bytes_is_rgb_row_major():
    canvas = Canvas(3, 2)
    canvas.put_pixel(0, 0, 0x112233)
    canvas.put_pixel(2, 1, 0x445566)
    data = canvas.to_bytes()
    assert len(data) == 3 * 2 * 3
    assert data[:3] == b"\x11\x22\x33"
    assert data[-3:] == b"\x44\x55\x66"


def test_horizontal_line_covers_both_ends():
    canvas = Canvas(10, 5)
    canvas.draw_line(Point(1, 2, 0), Point(5, 2, 0), 0xFF0000)
    assert _lit(canvas) == {(x, 2) for x in range(1, 6)}
    assert canvas.pixel(5, 2) == 0xFF0000


def test_diagonal_line():
    canvas = Canvas(10, 10)
    canvas.draw_line(Point(0, 0, 0), Point(4, 4, 0), 0xFFFFFF)
    assert _lit(canvas) == {(i, i) for i in range(5)}


def test_zero_length_line_draws_nothing():
    canvas = Canvas(5, 5)
    canvas.draw_line(Point(2, 2, 0), Point(2, 2, 0), 0xFFFFFF)
    assert _lit(canvas) == set()


def test_line_pixel_count_matches_major_axis():
    canvas = Canvas(20, 20)
    canvas.draw_line(Point(0, 0, 0), Point(6, 2, 0), 0xFFFFFF)
    lit = _lit(canvas)
    assert len(lit) == 6 + 1
    assert (0, 0) in lit and (6, 2) in lit


def test_line_direction_does_not_matter():
    forward = Canvas(20, 20)
    backward = Canvas(20, 20)
    forward.draw_line(Point(0, 0, 0), Point(6, 2, 0), 0x0000FF)
    backward.draw_line(Point(6, 2, 0), Point(0, 0, 0), 0x0000FF)
    assert forward.to_bytes() == backward.to_bytes()


def test_line_is_clipped_to_canvas():
    canvas = Canvas(5, 5)
    canvas.draw_line(Point(-3, 1, 0), Point(8, 1, 0), 0xFFFFFF)
    assert _lit(canvas) == {(x, 1) for x in range(5)}