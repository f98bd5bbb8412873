"""Reading height maps: rows of space-separated heights."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

from .numbers import atoi_hex, detect_base


@dataclass(frozen=True)
class Point:
    """A grid point: column, row and height."""

    x: int
    y: int
    z: int


class MapError(Exception):
    """Raised when a height map cannot be read."""


@dataclass(frozen=True)
class HeightMap:
    """A rectangular grid of points, indexed as ``grid[y][x]``."""

    grid: tuple[tuple[Point, ...], ...]

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)


def _tokens(line: str) -> list[str]:
    if line.endswith("\n"):
        line = line[:-1]
    return [token for token in line.split(" ") if token]


def _parse_row(tokens: list[str], y: int, width: int) -> tuple[Point, ...]:
    row = [
        Point(x, y, atoi_hex(token, detect_base(token)))
        for x, token in enumerate(tokens[:width])
    ]
    # Cells missing from a short row are treated as flat ground.
    row.extend(Point(x, y, 0) for x in range(len(row), width))
    return tuple(row)


def parse_rows(lines: Iterable[str]) -> HeightMap:
    """Build a height map from text lines.

    The first line fixes the width; longer rows are cut to it and shorter
    rows are padded with height zero.
    """
    all_lines = list(lines)
    if not all_lines:
        raise MapError("map is empty")
    width = len(_tokens(all_lines[0]))
    if width == 0:
        raise MapError("first row of the map has no values")
    grid = tuple(
        _parse_row(_tokens(line), y, width) for y, line in enumerate(all_lines)
    )
    return HeightMap(grid)


def load_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse the height map stored at *path*."""
    try:
        with open(path, "rb") as handle:
            lines = [raw.decode("latin-1") for raw in handle]
    except OSError as exc:
        raise MapError(f"cannot read {os.fspath(path)}: {exc.strerror}") from exc
    return parse_rows(lines)