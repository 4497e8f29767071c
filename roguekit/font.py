"""Bitmap font (tileset) descriptions."""

from __future__ import annotations

import os
from dataclasses import dataclass

from PIL import Image


@dataclass
class Font:
    """A tileset image and the size of each glyph in it."""

    bitmap_file: str
    width: int
    height: int
    tile_size: tuple[int, int]

    @classmethod
    def load(cls, filename, tile_size) -> Font:
        """Open the image to learn its dimensions."""
        path = os.fspath(filename)
        with Image.open(path) as img:
            width, height = img.size
        return cls(path, width, height, (int(tile_size[0]), int(tile_size[1])))

    def glyphs_per_row(self) -> int:
        """Number of glyphs across one row of the tileset."""
        tile_width = self.tile_size[0]
        if tile_width <= 0:
            raise ValueError("tile width must be positive")
        return self.width // tile_width