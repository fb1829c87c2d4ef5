"""Reading and validating ``.cub`` scene descriptions."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .colors import rgb_to_int
from .xpm import xpm_file_to_image

EMPTY = 0
WALL = 1
VOID = 2

_PLAYER_CHARS = "NSEW"
_NUMBER_CHARS = frozenset("0123456789 \t")
_SPACES = " \t\n\v\f\r"

_ELEMENTS = {
    "NO ": "north",
    "SO ": "south",
    "WE ": "west",
    "EA ": "east",
    "F ": "floor",
    "C ": "ceiling",
}
_COLOR_ELEMENTS = frozenset({"floor", "ceiling"})


class CubError(ValueError):
    """Raised when a scene description is malformed."""


@dataclass
class Scene:
    """A validated scene: wall textures, floor and ceiling colours and the map.

    ``grid`` holds one row per map line, padded with ``VOID`` to ``width``.
    """

    north: Any
    south: Any
    west: Any
    east: Any
    floor: int
    ceiling: int
    grid: list[list[int]]
    width: int
    height: int
    start_x: int
    start_y: int
    orientation: str


def check_format(path: str | os.PathLike[str]) -> bool:
    """Tell whether the part of ``path`` from its last dot is exactly ``.cub``."""
    name = os.fspath(path)
    dot = name.rfind(".")
    return dot != -1 and name[dot:] == ".cub"


def is_number(text: str) -> bool:
    """Tell whether ``text`` holds only decimal digits, spaces and tabs."""
    return all(char in _NUMBER_CHARS for char in text)


def _atoi(text: str) -> int:
    text = text.lstrip(_SPACES)
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = []
    for char in text:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def _words(text: str, separator: str) -> list[str]:
    return [word for word in text.split(separator) if word]


def parse_color(line: str) -> int:
    """Read a ``F r,g,b`` or ``C r,g,b`` line into a clamped 0xRRGGBB value."""
    words = _words(line, " ")
    if len(words) != 2:
        raise CubError("Wrong Floor/Ceiling config")
    parts = _words(words[1], ",")
    if len(parts) != 3 or not all(is_number(part) for part in parts):
        raise CubError("Wrong color")
    red, green, blue = (_atoi(part) for part in parts)
    return rgb_to_int(red, green, blue)


def check_map(grid: list[list[int]], orientation: str | None) -> bool:
    """Tell whether the map is closed.

    Empty cells may not lie on the border, and no void cell (or cell equal to
    the orientation's character code) may touch an empty cell.
    """
    height = len(grid)
    width = max((len(row) for row in grid), default=0)
    marker = ord(orientation) if orientation else 0

    def cell(i: int, j: int) -> int:
        row = grid[i]
        return row[j] if j < len(row) else VOID

    def neighbours(i: int, j: int):
        if i > 0:
            yield i - 1, j
        if i < height - 1:
            yield i + 1, j
        if j > 0:
            yield i, j - 1
        if j < width - 1:
            yield i, j + 1

    for i in range(height):
        for j in range(width):
            value = cell(i, j)
            if value in (VOID, marker) and any(
                cell(ni, nj) == EMPTY for ni, nj in neighbours(i, j)
            ):
                return False
            on_border = i in (0, height - 1) or j in (0, width - 1)
            if value == EMPTY and on_border:
                return False
    return True


class SceneParser:
    """Collect the lines of a scene description into a :class:`Scene`."""

    def __init__(
        self, texture_loader: Callable[[str], Any] = xpm_file_to_image
    ) -> None:
        self._load = texture_loader
        self._counts = {name: 0 for name in _ELEMENTS.values()}
        self._textures: dict[str, Any] = {}
        self._colors: dict[str, int] = {}
        self._rows: list[list[int]] = []
        self._width = 0
        self._map_cells = 0
        self._players = 0
        self._orientation: str | None = None
        self._start = (0, 0)

    def parse_line(self, line: str) -> None:
        """Take in one line; raise :class:`CubError` when it is not acceptable."""
        line = line.removesuffix("\n")
        if not line:
            return
        prefix = next((key for key in _ELEMENTS if line.startswith(key)), None)
        if prefix is not None:
            name = _ELEMENTS[prefix]
            self._counts[name] += 1
            if self._counts[name] == 1:
                if name in _COLOR_ELEMENTS:
                    self._colors[name] = self._color(line)
                else:
                    self._texture(name, line)
                return
        self._map_line(line)

    def _texture(self, name: str, line: str) -> None:
        words = _words(line, " ")
        image = None
        if len(words) == 2:
            try:
                image = self._load(words[1])
            except (OSError, ValueError) as exc:
                raise CubError("Invalid texture provided") from exc
        if image is None or self._map_cells:
            raise CubError("Invalid texture provided")
        self._textures[name] = image

    def _color(self, line: str) -> int:
        color = parse_color(line)
        if self._map_cells:
            raise CubError("Wrong color")
        return color

    def _map_line(self, line: str) -> None:
        row: list[int] = []
        for index, char in enumerate(line):
            if char in "01":
                self._map_cells += 1
                row.append(int(char))
            elif char in _PLAYER_CHARS:
                self._players += 1
                self._orientation = char
                self._start = (index, len(self._rows))
                row.append(EMPTY)
            elif char == " ":
                row.append(VOID)
            else:
                raise CubError("Invalid character")
        if "0" in line or "1" in line:
            self._rows.append(row)
            self._width = max(self._width, len(line))

    def finish(self) -> Scene:
        """Check that every element is present once and the map is closed."""
        if (
            self._players != 1
            or any(count != 1 for count in self._counts.values())
            or not self._map_cells
        ):
            raise CubError("Wrong number of elements")
        if len(self._textures) != 4:
            raise CubError("Wrong texture path")
        grid = [row + [VOID] * (self._width - len(row)) for row in self._rows]
        if not check_map(grid, self._orientation) or not self._orientation:
            raise CubError("Invalid map")
        return Scene(
            north=self._textures["north"],
            south=self._textures["south"],
            west=self._textures["west"],
            east=self._textures["east"],
            floor=self._colors["floor"],
            ceiling=self._colors["ceiling"],
            grid=grid,
            width=self._width,
            height=len(grid),
            start_x=self._start[0],
            start_y=self._start[1],
            orientation=self._orientation,
        )


def parse_scene(
    lines: Iterable[str], texture_loader: Callable[[str], Any] = xpm_file_to_image
) -> Scene:
    """Parse the lines of a scene description, loading textures with the loader."""
    parser = SceneParser(texture_loader)
    for line in lines:
        parser.parse_line(line)
    return parser.finish()


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read a ``.cub`` file and its XPM textures."""
    if not check_format(path):
        raise CubError("Wrong file extension")
    try:
        handle = open(path, encoding="latin-1", newline="")
    except OSError as exc:
        raise CubError("Could not open file") from exc
    with handle:
        return parse_scene(handle, xpm_file_to_image)