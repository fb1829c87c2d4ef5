"""Reading XPM pixmaps into images."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Sequence

from .colornames import lookup_color
from .image import Image
from .textutil import split_words, strip_comments

_DIRECT_CPP = 2
_TRANSPARENT = 0xFF000000
_LEADING_INT = re.compile(r"[ \t\n\r\v\f]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, then rows.

    Colour ``None`` becomes 0xFF000000; pixels naming no colour are 0.
    """
    source = iter(lines)

    def next_line() -> str:
        line = next(source, None)
        if line is None:
            raise XpmError("unexpected end of XPM data")
        return line

    header = split_words(next_line())
    if len(header) < 4:
        raise XpmError("incomplete XPM header")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if 0 in (width, height, ncolors, cpp):
        raise XpmError("XPM header values must be non-zero")
    if min(width, height, ncolors, cpp) < 0:
        raise XpmError("XPM header values must be positive")

    # Short codes are kept in a direct table where later definitions
    # overwrite earlier ones; longer codes keep their first definition.
    direct = cpp <= _DIRECT_CPP
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        tokens = split_words(line[cpp:])
        if "c" not in tokens:
            raise XpmError(f"colour line without a 'c' key: {line!r}")
        index = tokens.index("c") + 1
        if index >= len(tokens):
            raise XpmError(f"colour line without a colour value: {line!r}")
        end = tokens[index + 1] if index + 1 < len(tokens) else None
        value = lookup_color(tokens[index], end)
        if direct:
            colors[line[:cpp]] = value
        else:
            colors.setdefault(line[:cpp], value)

    image = Image.new(width, height)
    for y in range(height):
        line = next_line()
        for x in range(width):
            color = colors.get(line[x * cpp : (x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.set_row_pixel(y, x, color)
    return image


def _quoted_strings(text: str):
    pos = 0
    while (start := text.find('"', pos)) != -1:
        stop = text.find('"', start + 1)
        if stop == -1:
            return
        yield text[start + 1 : stop]
        pos = stop + 1


def xpm_text_to_image(text: str) -> Image:
    """Parse the text of an XPM file, comments included."""
    return parse_xpm(_quoted_strings(strip_comments(text)))


def xpm_to_image(data: Sequence[str]) -> Image:
    """Parse XPM strings given in memory.

    The last character of every string is dropped before parsing.
    """
    return parse_xpm(line[:-1] for line in data)


def xpm_file_to_image(path: str | os.PathLike[str]) -> Image:
    """Read and parse an XPM file."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return xpm_text_to_image(text)