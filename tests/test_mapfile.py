import pytest

from wireframe.mapfile import HeightMap, MapError, Point, load_map, parse_rows


def test_parse_dimensions_and_points():
    height_map = parse_rows(["0 1 2\n", "3 4 5\n"])
    assert height_map.width == 3
    assert height_map.height == 2
    assert height_map.grid[1][2] == Point(2, 1, 5)
    assert height_map.grid[0][0] == Point(0, 0, 0)


def test_points_know_their_coordinates():
    height_map = parse_rows(["7 7 7\n"] * 4)
    for y, row in enumerate(height_map.grid):
        for x, point in enumerate(row):
            assert (point.x, point.y, point.z) == (x, y, 7)


def test_empty_map_rejected():
    with pytest.raises(MapError):
        parse_rows([])


def test_blank_first_row_rejected():
    with pytest.raises(MapError):
        parse_rows(["\n", "1 2\n"])


def test_repeated_spaces_are_one_separator():
    height_map = parse_rows(["  1   2  3 \n"])
    assert [p.z for p in height_map.grid[0]] == [1, 2, 3]


def test_extra_values_are_ignored():
    height_map = parse_rows(["1 2\n", "3 4 5 6\n"])
    assert height_map.width == 2
    assert [p.z for p in height_map.grid[1]] == [3, 4]


def test_short_rows_are_padded_flat():
    height_map = parse_rows(["1 2 3\n", "9\n"])
    assert [p.z for p in height_map.grid[1]] == [9, 0, 0]
    assert height_map.grid[1][2] == Point(2, 1, 0)


def test_colour_suffix_keeps_height():
    height_map = parse_rows(["10,0xFF0000 -3,0xffffff\n"])
    assert [p.z for p in height_map.grid[0]] == [10, -3]


def test_last_line_without_newline():
    height_map = parse_rows(["1 2\n", "3 4"])
    assert height_map.height == 2
    assert height_map.grid[1][1].z == 4


def test_heightmap_empty_grid_dimensions():
    empty = HeightMap(())
    assert (empty.width, empty.height) == (0, 0)


def test_load_map_reads_file(tmp_path):
    path = tmp_path / "pyramid.fdf"
    path.write_text("0 0 0\n0 5 0\n0 0 0\n")
    height_map = load_map(path)
    assert height_map.width == 3
    assert height_map.height == 3
    assert height_map.grid[1][1] == Point(1, 1, 5)


def test_load_map_matches_parse_rows(tmp_path):
    lines = ["1 -2 3\n", "4 5 -6\n"]
    path = tmp_path / "m.fdf"
    path.write_text("".join(lines))
    assert load_map(path) == parse_rows(lines)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "absent.fdf")


def test_load_map_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    with pytest.raises(MapError):
        load_map(path)