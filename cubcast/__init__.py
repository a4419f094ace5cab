"""Textured raycasting renderer for grid maze scenes described by .cub files, with a window viewer and BMP output."""

__version__ = "0.1.0"
__all__ = ["__version__"]