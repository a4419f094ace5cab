"""Textured wall ray casting into a packed-pixel frame."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from cubcast.textures import Texture, TextureSet

_WALL = "1"
_SPRITE = "2"
_LINE_HEIGHT_LIMIT = 2**31 - 1


@dataclass
class Frame:
    """A row-major image of ``0xRRGGBB`` pixels, indexed as ``frame[x, y]``."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame size must be positive")
        if not self.pixels:
            self.pixels = [0] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match frame size")

    def _offset(self, key: tuple[int, int]) -> int:
        x, y = key
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} frame")
        return y * self.width + x

    def __getitem__(self, key: tuple[int, int]) -> int:
        return self.pixels[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], color: int) -> None:
        self.pixels[self._offset(key)] = color

    def row(self, y: int) -> list[int]:
        """Return a copy of row *y*."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside frame of height {self.height}")
        start = y * self.width
        return self.pixels[start:start + self.width]


@dataclass(frozen=True)
class View:
    """Camera position, direction and projection plane in map space."""

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float

    @classmethod
    def from_angle(cls, pos_x: float, pos_y: float, angle: float, fov: float) -> "View":
        """Build a view looking along *angle* with a plane scaled by *fov*."""
        dir_x = -math.cos(angle)
        dir_y = math.sin(angle)
        return cls(pos_x, pos_y, dir_x, dir_y, dir_y * fov, -dir_x * fov)


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall."""

    map_x: int
    map_y: int
    side: int
    ray_dir_x: float
    ray_dir_y: float
    distance: float
    wall_x: float


@dataclass(frozen=True)
class Sprite:
    """A sprite standing at the centre of a map cell."""

    x: float
    y: float


def cast_ray(grid: Sequence[Sequence[str]], view: View, camera_x: float) -> RayHit:
    """Walk the grid with DDA from the view along the ray at *camera_x* in [-1, 1]."""
    ray_x = view.dir_x + view.plane_x * camera_x
    ray_y = view.dir_y + view.plane_y * camera_x
    map_x, map_y = int(view.pos_x), int(view.pos_y)
    delta_x = abs(1 / ray_x) if ray_x else math.inf
    delta_y = abs(1 / ray_y) if ray_y else math.inf

    if ray_x < 0:
        step_x, side_x = -1, (view.pos_x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - view.pos_x) * delta_x
    if ray_y < 0:
        step_y, side_y = -1, (view.pos_y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - view.pos_y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not (0 <= map_x < len(grid) and 0 <= map_y < len(grid[map_x])):
            raise ValueError("ray left the map without hitting a wall")
        if grid[map_x][map_y] == _WALL:
            break

    if side == 0:
        distance = (map_x - view.pos_x + (1 - step_x) // 2) / ray_x
        wall_x = view.pos_y + distance * ray_y
    else:
        distance = (map_y - view.pos_y + (1 - step_y) // 2) / ray_y
        wall_x = view.pos_x + distance * ray_x
    wall_x = wall_x - math.floor(wall_x) if math.isfinite(wall_x) else 0.0
    return RayHit(map_x, map_y, side, ray_x, ray_y, distance, wall_x)


def _line_height(screen_height: int, distance: float) -> int:
    if distance <= 0 or not math.isfinite(screen_height / distance):
        return _LINE_HEIGHT_LIMIT
    return min(int(screen_height / distance), _LINE_HEIGHT_LIMIT)


def draw_column(frame: Frame, hit: RayHit, texture: Texture,
                ceiling: int, floor: int, x: int) -> None:
    """Paint column *x* with ceiling, the textured wall slice and floor."""
    height = frame.height
    line_height = _line_height(height, hit.distance)
    draw_start = max(-(line_height // 2) + height // 2, 0)
    draw_end = min(line_height // 2 + height // 2, height - 1)
    tex_x = min(int(hit.wall_x * texture.width), texture.width - 1)
    cropped = line_height > draw_end - draw_start + 1
    for y in range(height):
        if y < draw_start:
            frame[x, y] = ceiling
        elif y > draw_end:
            frame[x, y] = floor
        else:
            offset = y - draw_start
            if cropped:
                offset += (line_height - height) // 2
            tex_y = min(texture.height * offset // (line_height + 1), texture.height - 1)
            frame[x, y] = texture.pixel(tex_x, tex_y)


def _texture_for(hit: RayHit, textures: TextureSet) -> Texture:
    if hit.side == 0:
        return textures.south if hit.ray_dir_x < 0 else textures.north
    return textures.east if hit.ray_dir_y < 0 else textures.west


def render(frame: Frame, grid: Sequence[Sequence[str]], view: View,
           textures: TextureSet, ceiling: int, floor: int) -> list[float]:
    """Draw every column of *frame* and return the per-column wall distances."""
    depths = []
    for x in range(frame.width):
        camera_x = 2 * x / frame.width - 1
        hit = cast_ray(grid, view, camera_x)
        draw_column(frame, hit, _texture_for(hit, textures), ceiling, floor, x)
        depths.append(hit.distance)
    return depths


def find_sprites(grid: Sequence[Sequence[str]]) -> list[Sprite]:
    """Return a sprite for every ``2`` cell, in row-major order."""
    return [
        Sprite(i + 0.5, j + 0.5)
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell == _SPRITE
    ]


def sort_sprites(sprites: Iterable[Sprite], pos_x: float, pos_y: float) -> list[Sprite]:
    """Return the sprites ordered from farthest to nearest."""
    return sorted(
        sprites,
        key=lambda sprite: (pos_x - sprite.x) ** 2 + (pos_y - sprite.y) ** 2,
        reverse=True,
    )