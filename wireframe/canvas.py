"""An in-memory 32-bit pixel buffer with clipped drawing."""

from __future__ import annotations

import math
import sys
from array import array
from typing import Protocol

WIDTH = 2800
HEIGHT = 1900

_TYPECODE = next(code for code in "ILH" if array(code).itemsize == 4)


class _HasXY(Protocol):
    x: int
    y: int


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


class Canvas:
    """A width x height grid of 0xRRGGBB pixels, initially black."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = self._blank()

    def _blank(self) -> array:
        return array(_TYPECODE, [0]) * (self.width * self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the canvas are ignored."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = color & 0xFFFFFFFF

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y)."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self._pixels[y * self.width + x]

    def clear(self) -> None:
        """Reset every pixel to black."""
        self._pixels = self._blank()

    def draw_line(self, start: _HasXY, end: _HasXY, color: int) -> None:
        """Draw a line with the DDA algorithm; a zero-length line draws nothing."""
        dx = float(end.x - start.x)
        dy = float(end.y - start.y)
        steps = max(abs(dx), abs(dy))
        if steps == 0:
            return
        x_inc = dx / steps
        y_inc = dy / steps
        x = float(start.x)
        y = float(start.y)
        for _ in range(int(steps) + 1):
            self.put_pixel(_round_half_away(x), _round_half_away(y), color)
            x += x_inc
            y += y_inc

    def to_bytes(self) -> bytes:
        """Return the pixels row by row as packed RGB bytes."""
        pixels = array(_TYPECODE, self._pixels)
        if sys.byteorder == "big":
            pixels.byteswap()
        raw = pixels.tobytes()
        rgb = bytearray(len(pixels) * 3)
        rgb[0::3] = raw[2::4]
        rgb[1::3] = raw[1::4]
        rgb[2::3] = raw[0::4]
        return bytes(rgb)