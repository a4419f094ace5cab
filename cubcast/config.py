"""Parsing and validation of ``.cub`` scene description files."""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from itertools import takewhile
from pathlib import Path
from typing import Iterable, Sequence

WHITESPACE = " \t\n\v\f\r"
RESOLUTION_WIDTH_MAX = 1920
RESOLUTION_HEIGHT_MAX = 1080
MAP_CHARSET = frozenset("012NSEW")
TEXTURE_TAGS = ("NO", "SO", "WE", "EA", "S")

_HEADINGS = {
    "N": 0.0,
    "S": math.pi,
    "E": math.pi / 2,
    "W": math.pi + math.pi / 2,
}
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d*)")


class ConfigError(ValueError):
    """Raised when a scene description is missing or malformed."""


@dataclass(frozen=True)
class PlayerStart:
    """Initial player position (row, column space) and heading."""

    pos_x: float
    pos_y: float
    angle: float


@dataclass
class SceneConfig:
    """Everything a scene description file defines."""

    width: int
    height: int
    ceiling: int
    floor: int
    textures: dict[str, str]
    grid: list[list[str]]
    player: PlayerStart

    @property
    def map_height(self) -> int:
        return len(self.grid)

    @property
    def map_width(self) -> int:
        return len(self.grid[0]) if self.grid else 0


def skip_whitespace(text: str) -> str:
    """Return *text* without its leading whitespace."""
    return text.lstrip(WHITESPACE)


def _leading_int(text: str) -> int:
    """Parse a leading integer the lenient way: garbage yields 0."""
    digits = _LEADING_INT.match(text).group(1)
    if digits in ("", "+", "-"):
        return 0
    return int(digits)


def check_file(path: str, extension: str | None) -> bool:
    """Tell whether *path* is readable and, if given, has *extension*."""
    wanted = (extension or "").lstrip(".")
    if wanted:
        name = os.path.basename(str(path))
        if "." not in name or name.rsplit(".", 1)[1] != wanted:
            return False
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a file into a list of lines without line terminators."""
    try:
        return Path(path).read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError("File reading failed") from exc


def parse_resolution(lines: Iterable[str]) -> tuple[int, int]:
    """Return the (width, height) given by the ``R`` line, clamped to the maximum."""
    for line in lines:
        if not skip_whitespace(line).startswith("R"):
            continue
        tokens = line.split()
        if len(tokens) != 3 or tokens[0] != "R":
            raise ConfigError("Invalid resolution")
        width, height = _leading_int(tokens[1]), _leading_int(tokens[2])
        if width <= 0 or height <= 0:
            raise ConfigError("Invalid resolution")
        if width > RESOLUTION_WIDTH_MAX or height > RESOLUTION_HEIGHT_MAX:
            return RESOLUTION_WIDTH_MAX, RESOLUTION_HEIGHT_MAX
        return width, height
    raise ConfigError("Invalid resolution")


def parse_color(lines: Iterable[str], tag: str) -> int:
    """Return the ``0xRRGGBB`` colour declared as ``<tag> R,G,B``."""
    error = "Invalid color for ceiling or floor"
    for line in lines:
        if skip_whitespace(line)[:1] != tag[:1]:
            continue
        tokens = line.split()
        if len(tokens) != 2 or tokens[0] != tag:
            raise ConfigError(error)
        parts = [part for part in tokens[1].split(",") if part]
        if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
            raise ConfigError(error)
        red, green, blue = (int(part) for part in parts)
        if max(red, green, blue) > 255:
            raise ConfigError(error)
        return (red << 16) | (green << 8) | blue
    raise ConfigError(error)


def parse_background_colors(lines: Iterable[str]) -> tuple[int, int]:
    """Return the (ceiling, floor) colours."""
    lines = list(lines)
    return parse_color(lines, "C"), parse_color(lines, "F")


def parse_texture_path(lines: Iterable[str], tag: str) -> str:
    """Return the readable ``.xpm`` path declared for *tag*."""
    for line in lines:
        if not skip_whitespace(line).startswith(tag):
            continue
        tokens = line.split()
        if tokens[0] != tag:
            continue
        if len(tokens) != 2 or not check_file(tokens[1], "xpm"):
            raise ConfigError("Invalid textures settings")
        return tokens[1]
    raise ConfigError("Invalid textures settings")


def parse_texture_paths(lines: Iterable[str]) -> dict[str, str]:
    """Return the texture paths keyed by tag (NO, SO, WE, EA, S)."""
    lines = list(lines)
    return {tag: parse_texture_path(lines, tag) for tag in TEXTURE_TAGS}


def parse_map(lines: Sequence[str]) -> list[list[str]]:
    """Return the map grid that follows the ``MAP`` line, whitespace removed."""
    lines = list(lines)
    start = next(
        (index + 1 for index, line in enumerate(lines)
         if skip_whitespace(line).startswith("MAP")),
        None,
    )
    if start is None:
        raise ConfigError("Invalid map")
    rows = list(takewhile(lambda line: skip_whitespace(line).startswith("1"), lines[start:]))
    if not rows:
        raise ConfigError("Invalid map")
    return [[char for char in row if char not in WHITESPACE] for row in rows]


def validate_map(grid: Sequence[Sequence[str]]) -> None:
    """Raise ConfigError unless *grid* is rectangular, closed and well formed."""
    if not grid or not grid[0]:
        raise ConfigError("Invalid map")
    width = len(grid[0])
    for row in grid:
        if len(row) != width or row[0] != "1" or row[-1] != "1":
            raise ConfigError("Invalid map")
        if any(cell not in MAP_CHARSET for cell in row):
            raise ConfigError("Invalid map")
    if any(cell != "1" for cell in grid[0]) or any(cell != "1" for cell in grid[-1]):
        raise ConfigError("Invalid map")


def find_player(grid: list[list[str]]) -> PlayerStart:
    """Locate the single player marker, replace it with floor and return it."""
    start: PlayerStart | None = None
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell not in _HEADINGS:
                continue
            if start is not None:
                raise ConfigError("Invalid player position")
            start = PlayerStart(i + 0.5, j + 0.5, _HEADINGS[cell])
            row[j] = "0"
    if start is None:
        raise ConfigError("Invalid player position")
    return start


def parse_config(lines: Iterable[str]) -> SceneConfig:
    """Build a SceneConfig from the lines of a scene description."""
    lines = list(lines)
    width, height = parse_resolution(lines)
    ceiling, floor = parse_background_colors(lines)
    textures = parse_texture_paths(lines)
    grid = parse_map(lines)
    validate_map(grid)
    player = find_player(grid)
    return SceneConfig(width, height, ceiling, floor, textures, grid, player)


def load_config(path: str | os.PathLike[str]) -> SceneConfig:
    """Read and parse a ``.cub`` file."""
    if not check_file(os.fspath(path), "cub"):
        raise ConfigError("File reading failed")
    return parse_config(read_lines(path))