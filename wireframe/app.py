"""Command-line entry point and interactive window for the viewer."""

from __future__ import annotations

import sys
from typing import Sequence

from .canvas import HEIGHT, WIDTH, Canvas
from .mapfile import HeightMap, MapError, load_map
from .view import Key, View, draw_wireframe

_PROGRAM = "fdf"
_WINDOW_TITLE = "FDF"
_EXTENSION = ".fdf"
_BAD_FILE = "Not valid file. Needs to be of type .fdf"


def verify_input(argv: Sequence[str]) -> str:
    """Check the command line and return the map file name.

    *argv* includes the program name. Raises ValueError with the message to
    show when the arguments are wrong or the file is not ``<name>.fdf``.
    """
    if len(argv) != 2:
        program = argv[0] if argv else _PROGRAM
        raise ValueError(f"Usage: {program} <filename>.fdf")
    name = argv[1]
    if len(name) <= len(_EXTENSION):
        raise ValueError(_BAD_FILE)
    stem_end = name[-len(_EXTENSION) - 1]
    if name.endswith(_EXTENSION) and stem_end.isascii() and stem_end.isalnum():
        return name
    raise ValueError(_BAD_FILE)


def render(height_map: HeightMap, view: View, canvas: Canvas) -> Canvas:
    """Clear *canvas* and draw the wireframe on it."""
    canvas.clear()
    draw_wireframe(height_map, view, canvas)
    return canvas


def run_window(height_map: HeightMap) -> None:
    """Show the map in a window and react to keys until it is closed."""
    import pygame

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error as exc:
            raise RuntimeError("Failed to create window") from exc
        pygame.display.set_caption(_WINDOW_TITLE)
        keysyms = {pygame.K_ESCAPE: int(Key.ESC)}
        view = View()
        canvas = Canvas(WIDTH, HEIGHT)

        def present() -> None:
            render(height_map, view, canvas)
            image = pygame.image.frombuffer(
                canvas.to_bytes(), (canvas.width, canvas.height), "RGB"
            )
            screen.blit(image, (0, 0))
            pygame.display.flip()

        present()
        print("Press ESC to exit, WASD to move, +/- to zoom.")
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                print("Window closed. Exiting...")
                return
            if event.type != pygame.KEYUP:
                continue
            key = keysyms.get(event.key, event.key)
            print(f"Key pressed: {key}")
            if not view.handle_key(key):
                print("ESC pressed, exiting...")
                return
            present()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on the map named in *argv*; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = verify_input([_PROGRAM, *args])
    except ValueError as exc:
        print(exc)
        return 1
    try:
        height_map = load_map(path)
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        run_window(height_map)
    except RuntimeError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())