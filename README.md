# wireframe

Draws `.fdf` height maps as an isometric wireframe in a window.

An `.fdf` file is a grid of integers, one row per line, separated by
spaces. Each value is a height:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

The first line sets the width of the grid. Longer rows are cut to that
width and shorter rows are padded with height 0. Each value is read as a
decimal integer with an optional sign; reading stops at the first
character that is not a digit, so anything after the number (for example
`10,0xFF0000`) is ignored. An empty file, or one whose first line has no
values, is rejected.

## Install

```
pip install .
```

## Run

```
wireframe maps/pyramid.fdf
```

The single argument must be a file name ending in `.fdf`, with a letter
or digit just before the extension. Otherwise a usage or "Not valid file"
message is printed and the command exits with status 1; the same status
is returned when the file cannot be read or a window cannot be opened.

The window is 2800 x 1900 pixels. Keys act when they are released:

| Key        | Action                          |
|------------|---------------------------------|
| W A S D    | move the view by 10 pixels      |
| `=` / `-`  | zoom in / out by 2 (minimum 2)  |
| Z / Y      | raise / lower the height scale  |
| X          | flatten the map                 |
| R          | restore the original height     |
| Esc        | quit                            |

Closing the window also quits. Each edge is shaded on a red-to-white ramp
by the heights of its two ends.

## Library use

```python
from wireframe.mapfile import load_map
from wireframe.view import View, draw_wireframe
from wireframe.canvas import Canvas

height_map = load_map("maps/pyramid.fdf")
view = View()
canvas = Canvas()
draw_wireframe(height_map, view, canvas)
raw = canvas.to_bytes()   # packed RGB bytes, row by row
```

- `wireframe.mapfile`: `load_map`, `parse_rows`, `HeightMap`, `Point`,
  `MapError`.
- `wireframe.view`: `View` (`project`, `move`, `zoom`, `scale_height`,
  `handle_key`), `Key`, `draw_wireframe`.
- `wireframe.canvas`: `Canvas` (`put_pixel`, `pixel`, `clear`,
  `draw_line`, `to_bytes`); pixels outside the canvas are ignored when
  drawing.
- `wireframe.color`: `RGB`, `lerp`, `color_lerp`, `rgb_to_int`,
  `calculate_gradient_color`.
- `wireframe.numbers`: `detect_base`, `atoi_hex`.
- `wireframe.app`: `verify_input`, `render`, `run_window`, `main`.

### XPM images and colour names

`wireframe.xpm` decodes XPM images: `read_xpm_file(path)` or
`parse_xpm(lines)` returns an `XpmImage` with `width`, `height` and
`pixels[y][x]` as 32-bit colours; malformed data raises `XpmError`.
Helpers `strip_comments`, `quoted_lines` and `split_words` are also
available.

`wireframe.colornames` resolves X11 colour names: `lookup_color(name)`
(case-insensitive, raises `KeyError` for unknown names) and
`text_to_rgb(name, end)`, which also accepts `#rrggbb`.

## What it does not do

- Colours written in the map file are not used; only heights are.
- XPM images are decoded into pixel values but are not shown by the
  viewer.
- There is no mouse control and no other projection than isometric.