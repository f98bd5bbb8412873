import pytest

from wireframe.app import main, render, verify_input
from wireframe.canvas import Canvas
from wireframe.mapfile import parse_rows
from wireframe.view import View


def test_valid_name_is_returned():
    assert verify_input(["fdf", "maps/42.fdf"]) == "maps/42.fdf"


@pytest.mark.parametrize("name", ["map.txt", ".fdf", "x/.fdf", "fdf", "a.fdff"])
def test_invalid_names_are_rejected(name):
    with pytest.raises(ValueError, match="Needs to be of type .fdf"):
        verify_input(["fdf", name])


@pytest.mark.parametrize("argv", [["fdf"], ["fdf", "a.fdf", "b.fdf"]])
def test_wrong_argument_count(argv):
    with pytest.raises(ValueError, match="Usage: fdf <filename>.fdf"):
        verify_input(argv)


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage: fdf <filename>.fdf" in capsys.readouterr().out


def test_main_rejects_bad_extension(capsys):
    assert main(["map.txt"]) == 1
    assert "Not valid file" in capsys.readouterr().out


def test_main_fails_on_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.fdf")]) == 1


def test_main_fails_on_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    assert main([str(path)]) == 1


def test_render_clears_then_draws():
    height_map = parse_rows(["0 0", "0 0"])
    view = View(width=60, height=60)
    canvas = Canvas(60, 60)
    canvas.put_pixel(0, 59, 0x123456)
    result = render(height_map, view, canvas)
    assert result is canvas
    assert canvas.pixel(0, 59) == 0
    origin = view.project(0, 0, 0)
    assert canvas.pixel(origin.x, origin.y) > 0


def test_render_follows_view_changes():
    height_map = parse_rows(["0 0", "0 0"])
    view = View(width=60, height=60)
    first = render(height_map, view, Canvas(60, 60)).to_bytes()
    view.handle_key(ord("a"))
    second = render(height_map, view, Canvas(60, 60)).to_bytes()
    assert first != second
    assert len(first) == len(second)