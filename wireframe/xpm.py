"""Reading XPM images into rows of 32-bit pixel values."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from .colornames import text_to_rgb

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_TRANSPARENT = 0xFF000000


class XpmError(Exception):
    """Raised when XPM data cannot be read or is malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image; ``pixels[y][x]`` holds an unsigned 32-bit colour."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


def split_words(text: str) -> list[str]:
    """Split *text* on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    pieces: list[str] = []
    quoted = False
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == '"':
            quoted = not quoted
        elif not quoted and text.startswith(opener, index):
            end = text.find(closer, index + len(opener))
            stop = length if end < 0 else end + len(closer)
            pieces.append(" " * (stop - index))
            index = stop
            continue
        pieces.append(char)
        index += 1
    return "".join(pieces)


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces.

    The result has the same length as *text*. A line comment is blanked
    together with the newline that ends it.
    """
    return _blank_comments(_blank_comments(text, "/*", "*/"), "//", "\n")


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in *text*, in order."""
    position = 0
    while True:
        opening = text.find('"', position)
        if opening < 0:
            return
        closing = text.find('"', opening + 1)
        if closing < 0:
            return
        yield text[opening + 1 : closing]
        position = closing + 1


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"unexpected end of data while reading {what}") from None


def _pixel_value(color: int) -> int:
    if color == -1:
        return _TRANSPARENT
    return color & 0xFFFFFFFF


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"header needs four values, got {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header {line!r}")
    return width, height, ncolors, cpp


def _read_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour line with an empty 'c' entry: {line!r}")
    following = words[index + 2] if index + 2 < len(words) else None
    return line[:cpp], text_to_rgb(words[index + 1], following)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then rows.

    Keys of one or two characters take their last definition, longer keys
    their first. Pixels whose key is undefined are 0; the colour ``None``
    becomes 0xFF000000.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(source, "the header"))
    last_wins = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        key, value = _read_color(_next_line(source, "the colours"), cpp)
        if last_wins:
            colors[key] = value
        else:
            colors.setdefault(key, value)
    rows = []
    for _ in range(height):
        line = _next_line(source, "the pixels")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        rows.append(
            tuple(
                _pixel_value(colors.get(line[x * cpp : (x + 1) * cpp], 0))
                for x in range(width)
            )
        )
    return XpmImage(width, height, tuple(rows))


def read_xpm_file(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at *path*."""
    try:
        with open(path, "rb") as handle:
            text = handle.read().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)}: {exc.strerror}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))