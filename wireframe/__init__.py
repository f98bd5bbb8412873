"""Isometric wireframe rendering of height maps, with an XPM image reader."""

__version__ = "0.1.0"
__all__ = ["app", "canvas", "color", "colornames", "mapfile", "numbers", "view", "xpm"]