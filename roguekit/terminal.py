"""Mapping console tiles onto a 16-color text terminal."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

_F32_MAX = 3.4028234663852886e38


@dataclass
class SparseTile:
    """One drawn cell of a sparse console, addressed by flat index."""

    idx: int
    glyph: int
    fg: Any
    bg: Any


@dataclass(frozen=True)
class PaletteColor:
    """A terminal palette entry: curses components (0..1000) and their float form."""

    r: int
    g: int
    b: int
    rf: float
    gf: float
    bf: float

    @classmethod
    def from_curses(cls, red: int, green: int, blue: int) -> PaletteColor:
        """Build an entry from curses color components."""
        return cls(red, green, blue, red / 1000.0, green / 1000.0, blue / 1000.0)


@dataclass(frozen=True)
class DrawCommand:
    """Put ``char`` at screen ``(row, col)`` using color pair ``pair``."""

    row: int
    col: int
    pair: int
    char: str


def _components(color: Any) -> tuple[float, float, float]:
    if hasattr(color, "r"):
        return color.r, color.g, color.b
    r, g, b = color
    return r, g, b


def find_nearest_color(color: Any, palette: Sequence[PaletteColor]) -> int:
    """Index of the palette entry closest to ``color``, or -1 if none is."""
    r, g, b = _components(color)
    result = -1
    best = _F32_MAX
    for i, entry in enumerate(palette):
        diff = abs(r - entry.rf) + abs(g - entry.gf) + abs(b - entry.bf)
        if diff < best:
            result = i
            best = diff
    return result


def color_pair(fg_index: int, bg_index: int) -> int:
    """Number of the pair set up for this foreground/background combination."""
    return bg_index * 16 + fg_index


def glyph_to_char(glyph: int) -> str:
    """The code page 437 character for a glyph number."""
    return bytes([glyph & 0xFF]).decode("cp437")


def _command(tile: Any, row: int, col: int, palette: Sequence[PaletteColor]) -> DrawCommand:
    fg = find_nearest_color(tile.fg, palette)
    bg = find_nearest_color(tile.bg, palette)
    return DrawCommand(row, col, color_pair(fg, bg), glyph_to_char(tile.glyph))


def render_simple(
    tiles: Sequence[Any], width: int, height: int, palette: Sequence[PaletteColor]
) -> list[DrawCommand]:
    """Draw commands for a full console; tile row 0 is the bottom screen row."""
    count = width * height
    if len(tiles) < count:
        raise IndexError(f"{len(tiles)} tiles cannot fill a {width}x{height} console")
    return [
        _command(tile, height - (i // width + 1), i % width, palette)
        for i, tile in enumerate(tiles[:count])
    ]


def render_sparse(
    tiles: Sequence[SparseTile], width: int, height: int, palette: Sequence[PaletteColor]
) -> list[DrawCommand]:
    """Draw commands for only the tiles a sparse console holds."""
    return [
        _command(tile, height - (tile.idx // width + 1), tile.idx % width, palette)
        for tile in tiles
    ]