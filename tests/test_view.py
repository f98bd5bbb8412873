import pytest

from wireframe.canvas import HEIGHT, WIDTH, Canvas
from wireframe.color import calculate_gradient_color
from wireframe.mapfile import Point, parse_rows
from wireframe.view import Key, View, draw_wireframe


def test_key_codes_match_keysyms():
    view = View()
    view.handle_key(61)
    assert view.scale == 12
    view.handle_key(97)
    assert view.offset_x == 10
    assert view.handle_key(65307) is False


def test_origin_projects_to_centre():
    view = View()
    assert view.project(0, 0, 0) == Point(WIDTH // 2, HEIGHT // 2, 0)


def test_height_lifts_point_by_scale():
    view = View()
    flat = view.project(0, 0, 0)
    raised = view.project(0, 0, 1)
    assert raised.x == flat.x
    assert raised.y == flat.y - view.scale * view.z_scale
    assert raised.z == 1


def test_diagonal_points_share_screen_x():
    view = View()
    assert view.project(3, 3, 0).x == WIDTH // 2
    assert view.project(1, 0, 0).y == view.project(0, 1, 0).y


@pytest.mark.parametrize(
    "key, dx, dy",
    [(Key.A, 10, 0), (Key.D, -10, 0), (Key.W, 0, -10), (Key.S, 0, 10)],
)
def test_move(key, dx, dy):
    view = View()
    before = view.project(2, 1, 0)
    view.move(key)
    after = view.project(2, 1, 0)
    assert (view.offset_x, view.offset_y) == (dx, dy)
    assert (after.x - before.x, after.y - before.y) == (dx, dy)


def test_zoom_in_and_out():
    view = View()
    view.zoom(Key.PLUS)
    assert view.scale == 12
    view.zoom(Key.MINUS)
    view.zoom(Key.MINUS)
    assert view.scale == 8


def test_zoom_out_stops_at_two():
    view = View(scale=2)
    view.zoom(Key.MINUS)
    assert view.scale == 2


def test_scale_height_sequence():
    view = View()
    view.scale_height(Key.Z)
    view.scale_height(Key.Z)
    assert view.z_scale == 3
    view.scale_height(Key.Y)
    assert view.z_scale == 2
    view.scale_height(Key.X)
    assert view.z_scale == 0
    view.scale_height(Key.R)
    assert view.z_scale == 1


def test_escape_stops_without_moving():
    view = View()
    assert view.handle_key(Key.ESC) is False
    assert (view.offset_x, view.offset_y) == (0, 0)


def test_handle_key_dispatches():
    view = View(z_scale=5)
    assert view.handle_key(Key.A) is True
    assert view.offset_x == 10
    view.handle_key(Key.Z)
    assert view.z_scale == 6
    view.handle_key(Key.R)
    assert view.z_scale == 5
    view.handle_key(Key.PLUS)
    assert view.scale == 12


def test_flat_map_is_drawn_with_midpoint_colour():
    height_map = parse_rows(["0 0", "0 0"])
    view = View(width=60, height=60)
    canvas = Canvas(60, 60)
    draw_wireframe(height_map, view, canvas)
    expected = calculate_gradient_color(Point(0, 0, 0), Point(0, 0, 0), 0)
    for y in range(2):
        for x in range(2):
            corner = view.project(x, y, 0)
            assert canvas.pixel(corner.x, corner.y) == expected


def test_single_point_map_draws_nothing():
    canvas = Canvas(20, 20)
    draw_wireframe(parse_rows(["5"]), View(width=20, height=20), canvas)
    assert canvas.to_bytes() == bytes(20 * 20 * 3)