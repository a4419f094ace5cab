"""Loading wall and sprite textures as packed ``0xRRGGBB`` pixels."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from PIL import Image

from cubcast.config import ConfigError


@dataclass(frozen=True)
class Texture:
    """A row-major image of ``0xRRGGBB`` pixels."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture size")

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column *x*, row *y*."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} texture")
        return self.pixels[y * self.width + x]


@dataclass(frozen=True)
class TextureSet:
    """The four wall textures and the sprite texture of a scene."""

    north: Texture
    south: Texture
    west: Texture
    east: Texture
    sprite: Texture


def load_texture(path: str | os.PathLike[str]) -> Texture:
    """Load an image file (XPM or any format Pillow reads) as a Texture."""
    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
            width, height = rgb.size
            data = rgb.tobytes()
    except (OSError, ValueError, SyntaxError) as exc:
        raise ConfigError("Invalid textures settings") from exc
    channels = iter(data)
    pixels = tuple((r << 16) | (g << 8) | b for r, g, b in zip(channels, channels, channels))
    return Texture(width, height, pixels)


def load_textures(paths: Mapping[str, str]) -> TextureSet:
    """Load the textures named by tag (NO, SO, WE, EA, S)."""
    try:
        return TextureSet(
            north=load_texture(paths["NO"]),
            south=load_texture(paths["SO"]),
            west=load_texture(paths["WE"]),
            east=load_texture(paths["EA"]),
            sprite=load_texture(paths["S"]),
        )
    except KeyError as exc:
        raise ConfigError("Invalid textures settings") from exc