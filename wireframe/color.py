"""Colour interpolation used to shade wireframe edges by height."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class _HasZ(Protocol):
    z: int


@dataclass(frozen=True)
class RGB:
    """An RGB colour with channels in the range 0..255."""

    red: int
    green: int
    blue: int


_LOW_COLOR = RGB(255, 0, 0)
_HIGH_COLOR = RGB(255, 255, 255)


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between *start* and *end*."""
    return start + t * (end - start)


def _channel(start: int, end: int, t: float) -> int:
    value = int(lerp(float(start), float(end), t))
    return max(0, min(255, value))


def color_lerp(color1: RGB, color2: RGB, t: float) -> RGB:
    """Interpolate each channel, truncating and clamping to 0..255."""
    return RGB(
        _channel(color1.red, color2.red, t),
        _channel(color1.green, color2.green, t),
        _channel(color1.blue, color2.blue, t),
    )


def rgb_to_int(color: RGB) -> int:
    """Pack a colour as 0xRRGGBB."""
    return (color.red << 16) | (color.green << 8) | color.blue


def calculate_gradient_color(p1: _HasZ, p2: _HasZ, z_value: float) -> int:
    """Colour for *z_value* on a red-to-white ramp between the points' heights."""
    z_min = float(min(p1.z, p2.z))
    z_max = float(max(p1.z, p2.z))
    if z_max == z_min:
        t = 0.5
    else:
        t = (z_value - z_min) / (z_max - z_min)
    return rgb_to_int(color_lerp(_LOW_COLOR, _HIGH_COLOR, t))