"""Packing console tiles into RGBA byte textures for a shader to sample."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any


def _byte(component: float) -> int:
    if math.isnan(component):
        return 0
    return int(max(0.0, min(255.0, component * 255.0)))


def _rgb(color: Any) -> tuple[int, int, int]:
    if hasattr(color, "r"):
        r, g, b = color.r, color.g, color.b
    else:
        r, g, b = color
    return _byte(r), _byte(g), _byte(b)


def _check_index(idx: int, count: int) -> None:
    if not 0 <= idx < count:
        raise IndexError(f"tile index {idx} is outside a texture of {count} cells")


def pack_simple_textures(tiles: Sequence[Any], width: int, height: int) -> tuple[bytes, bytes]:
    """Return the glyph texture and the background texture for a full console.

    Each cell of the glyph texture is ``(glyph, fg.r, fg.g, fg.b)``; each cell of
    the background texture is ``(bg.r, bg.g, bg.b, 0)``.
    """
    count = width * height
    glyphs = bytearray(count * 4)
    backgrounds = bytearray(count * 4)
    for i, tile in enumerate(tiles):
        _check_index(i, count)
        glyphs[i * 4:i * 4 + 4] = bytes((tile.glyph & 0xFF, *_rgb(tile.fg)))
        backgrounds[i * 4:i * 4 + 3] = bytes(_rgb(tile.bg))
    return bytes(glyphs), bytes(backgrounds)


def pack_sparse_textures(tiles: Sequence[Any], width: int, height: int) -> tuple[bytes, bytes]:
    """Return the glyph texture and an all-zero background texture for a sparse console."""
    count = width * height
    glyphs = bytearray(count * 4)
    for tile in tiles:
        _check_index(tile.idx, count)
        i = tile.idx
        glyphs[i * 4:i * 4 + 4] = bytes((tile.glyph & 0xFF, *_rgb(tile.fg)))
    return bytes(glyphs), bytes(count * 4)


def texture_offset(offset_x: float, offset_y: float, width: int, height: int) -> tuple[float, float]:
    """The console offset expressed per cell, as the shader expects it."""
    return (offset_x / width, offset_y / height)