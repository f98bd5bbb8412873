"""Isometric projection, view controls and wireframe drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from .canvas import HEIGHT, WIDTH, Canvas
from .color import calculate_gradient_color
from .mapfile import HeightMap, Point

ISO_ANGLE = 0.523599  # 30 degrees in radians
MOVE_STEP = 10
ZOOM_STEP = 2


class Key(IntEnum):
    """Key symbols understood by the viewer."""

    ESC = 65307
    A = 97
    D = 100
    S = 115
    W = 119
    PLUS = 61
    MINUS = 45
    Z = 122
    Y = 121
    X = 120
    R = 114


_HEIGHT_KEYS = frozenset({Key.Z, Key.Y, Key.X, Key.R})
_ZOOM_KEYS = frozenset({Key.PLUS, Key.MINUS})


@dataclass
class View:
    """Offsets and scales that place a height map on the screen."""

    offset_x: int = 0
    offset_y: int = 0
    scale: int = 10
    z_scale: int = 1
    width: int = WIDTH
    height: int = HEIGHT
    original_z_scale: int = field(default=0, repr=False)

    def project(self, x: int, y: int, z: int) -> Point:
        """Project grid point (x, y, z) to screen coordinates, keeping z."""
        scaled_z = z * self.z_scale
        iso_x = (x - y) * math.cos(ISO_ANGLE)
        iso_y = (x + y) * math.sin(ISO_ANGLE) - scaled_z
        screen_x = iso_x * self.scale + self.width // 2 + self.offset_x
        screen_y = iso_y * self.scale + self.height // 2 + self.offset_y
        return Point(int(screen_x), int(screen_y), z)

    def move(self, key: int) -> None:
        """Shift the view for the A, D, W and S keys."""
        if key == Key.A:
            self.offset_x += MOVE_STEP
        elif key == Key.D:
            self.offset_x -= MOVE_STEP
        elif key == Key.W:
            self.offset_y -= MOVE_STEP
        elif key == Key.S:
            self.offset_y += MOVE_STEP

    def zoom(self, key: int) -> None:
        """Zoom in or out; the scale never drops below the zoom step."""
        if key == Key.PLUS:
            self.scale += ZOOM_STEP
        elif key == Key.MINUS and self.scale > ZOOM_STEP:
            self.scale -= ZOOM_STEP

    def scale_height(self, key: int) -> None:
        """Raise, lower, flatten or restore the height scale."""
        if self.original_z_scale == 0:
            self.original_z_scale = self.z_scale
        if key == Key.Z:
            self.z_scale += 1
        elif key == Key.Y:
            self.z_scale -= 1
        elif key == Key.X:
            self.z_scale = 0
        elif key == Key.R:
            self.z_scale = self.original_z_scale

    def handle_key(self, key: int) -> bool:
        """Apply a key press; return False when the viewer should quit."""
        if key in _HEIGHT_KEYS:
            self.scale_height(key)
        if key in _ZOOM_KEYS:
            self.zoom(key)
        if key == Key.ESC:
            return False
        self.move(key)
        return True


def draw_wireframe(height_map: HeightMap, view: View, canvas: Canvas) -> None:
    """Draw every edge between a point and its lower and right neighbours."""
    rows = height_map.grid
    last_row = height_map.height - 1
    for y, row in enumerate(rows):
        last_col = len(row) - 1
        for x, point in enumerate(row):
            current = view.project(x, y, point.z)
            if y < last_row:
                neighbor = view.project(x, y + 1, rows[y + 1][x].z)
                color = calculate_gradient_color(current, neighbor, neighbor.z)
                canvas.draw_line(current, neighbor, color)
            if x < last_col:
                neighbor = view.project(x + 1, y, row[x + 1].z)
                color = calculate_gradient_color(current, neighbor, neighbor.z)
                canvas.draw_line(current, neighbor, color)