"""Player state, keyboard handling, movement and the minimap overlay."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from cubcast.config import SceneConfig
from cubcast.raycaster import Frame, Sprite, View, find_sprites, sort_sprites
from cubcast.raycaster import render as render_walls
from cubcast.textures import TextureSet

MOVE_SPEED = 0.1
ROT_SPEED = 48
FOV = 0.66
MINIMAP_WIDTH = 200
MINIMAP_HEIGHT = 200

_WALL = "1"
_FLOOR = "0"
_MINIMAP_FLOOR = 0xFFFFFF
_MINIMAP_WALL = 0x000000
_MINIMAP_PLAYER = 0xFF0000


class Key(Enum):
    """Keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    ESCAPE = "escape"


@dataclass
class KeyState:
    """Which movement keys are currently held, plus the run bonus."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    shift: float = 0.0


def draw_minimap(frame: Frame, grid: Sequence[Sequence[str]], player_x: float,
                 player_y: float, width: int, height: int) -> None:
    """Draw a *width* x *height* map overview with the player in the frame's corner.

    *player_x* is the column coordinate and *player_y* the row coordinate in map space.
    """
    map_height = len(grid)
    map_width = len(grid[0])
    visible_w = min(width, frame.width)
    visible_h = min(height, frame.height)
    for y in range(visible_h):
        row = grid[y * map_height // height]
        for x in range(visible_w):
            cell = row[x * map_width // width]
            frame[x, y] = _MINIMAP_FLOOR if cell == _FLOOR else _MINIMAP_WALL

    center_y = int(player_y * height / map_height)
    center_x = int(player_x * width / map_width)
    radius = height // 100 + width // 100
    for y in range(max(center_y - radius, 0), min(center_y + radius, visible_h)):
        for x in range(max(center_x - radius, 0), min(center_x + radius, visible_w)):
            frame[x, y] = _MINIMAP_PLAYER


class Game:
    """A running scene: the player, the held keys and the frame being drawn."""

    def __init__(self, config: SceneConfig, textures: TextureSet, *,
                 minimap: bool = True,
                 minimap_size: tuple[int, int] = (MINIMAP_WIDTH, MINIMAP_HEIGHT)) -> None:
        self.config = config
        self.textures = textures
        self.grid = config.grid
        self.frame = Frame(config.width, config.height)
        self.pos_x = config.player.pos_x
        self.pos_y = config.player.pos_y
        self.angle = config.player.angle
        self.keys = KeyState()
        self.running = True
        self.minimap = minimap
        self.minimap_size = minimap_size
        self.sprites: list[Sprite] = []
        self.depths: list[float] = []
        self.dir_x = self.dir_y = self.plane_x = self.plane_y = 0.0
        self.update_direction()

    @property
    def view(self) -> View:
        return View(self.pos_x, self.pos_y, self.dir_x, self.dir_y,
                    self.plane_x, self.plane_y)

    def press(self, key: Key) -> None:
        """Record *key* as held; escape stops the game."""
        if key is Key.ESCAPE:
            self.running = False
        else:
            setattr(self.keys, key.value, True)

    def release(self, key: Key) -> None:
        """Record *key* as released."""
        if key is not Key.ESCAPE:
            setattr(self.keys, key.value, False)

    def update_direction(self) -> None:
        """Recompute the direction and camera plane from the current angle."""
        self.dir_x = -math.cos(self.angle)
        self.dir_y = math.sin(self.angle)
        self.plane_x = self.dir_y * FOV
        self.plane_y = -self.dir_x * FOV

    def _open(self, x: float, y: float) -> bool:
        return self.grid[int(x)][int(y)] != _WALL

    def _slide(self, dx: float, dy: float) -> None:
        if self._open(self.pos_x + dx, self.pos_y):
            self.pos_x += dx
        if self._open(self.pos_x, self.pos_y + dy):
            self.pos_y += dy

    def step(self) -> None:
        """Move and turn the player according to the held keys."""
        keys = self.keys
        speed = MOVE_SPEED + keys.shift
        if keys.up or keys.w:
            self._slide(self.dir_x * speed, self.dir_y * speed)
        if keys.down or keys.s:
            self._slide(-self.dir_x * speed, -self.dir_y * speed)
        if keys.a:
            self._slide(-self.dir_y * speed, self.dir_x * speed)
        if keys.d:
            self._slide(self.dir_y * speed, -self.dir_x * speed)
        if keys.left:
            self.angle -= math.pi / ROT_SPEED
        if keys.right:
            self.angle += math.pi / ROT_SPEED

    def render(self) -> Frame:
        """Draw the current view (and the minimap if enabled) and return the frame."""
        config = self.config
        self.depths = render_walls(self.frame, self.grid, self.view, self.textures,
                                   config.ceiling, config.floor)
        self.sprites = sort_sprites(find_sprites(self.grid), self.pos_x, self.pos_y)
        if self.minimap:
            width, height = self.minimap_size
            draw_minimap(self.frame, self.grid, self.pos_y, self.pos_x, width, height)
        return self.frame