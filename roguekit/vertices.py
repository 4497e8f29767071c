"""Vertex and index buffers that draw console tiles as textured quads."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

STRIDE = 11
"""Floats per vertex: position (3), foreground (3), background (3), texture (2)."""

_GLYPH_SIZE = 1.0 / 16.0

_QUAD = (
    -1.0, 1.0, 0.0, 1.0,
    -1.0, -1.0, 0.0, 0.0,
    1.0, -1.0, 1.0, 0.0,
    -1.0, 1.0, 0.0, 1.0,
    1.0, -1.0, 1.0, 0.0,
    1.0, 1.0, 1.0, 1.0,
)


@dataclass
class VertexData:
    """Interleaved vertex floats and triangle indices for a set of tiles."""

    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        """Number of vertices held."""
        return len(self.vertices) // STRIDE

    @property
    def tile_count(self) -> int:
        """Number of tile quads held."""
        return len(self.indices) // 6

    def vertex(self, n: int) -> tuple[float, ...]:
        """The ``STRIDE`` floats of vertex ``n``."""
        if not 0 <= n < self.vertex_count:
            raise IndexError(f"vertex {n} is outside {self.vertex_count} vertices")
        return tuple(self.vertices[n * STRIDE:(n + 1) * STRIDE])

    def _push_point(self, x: float, y: float, fg: tuple, bg: tuple, ux: float, uy: float) -> None:
        self.vertices.extend((x, y, 0.0, *fg, *bg, ux, uy))

    def _push_tile(self, screen_x: float, screen_y: float, step_x: float, step_y: float,
                   fg: Any, bg: Any, glyph: int) -> None:
        fg_rgb = _rgb(fg)
        bg_rgb = _rgb(bg)
        left, right, top, bottom = glyph_uv(glyph)
        base = self.vertex_count
        self._push_point(screen_x + step_x, screen_y + step_y, fg_rgb, bg_rgb, right, top)
        self._push_point(screen_x + step_x, screen_y, fg_rgb, bg_rgb, right, bottom)
        self._push_point(screen_x, screen_y, fg_rgb, bg_rgb, left, bottom)
        self._push_point(screen_x, screen_y + step_y, fg_rgb, bg_rgb, left, top)
        self.indices.extend((base, base + 1, base + 3, base + 1, base + 2, base + 3))


def _rgb(color: Any) -> tuple[float, float, float]:
    if hasattr(color, "r"):
        return (color.r, color.g, color.b)
    r, g, b = color
    return (r, g, b)


def _steps(width: int, height: int) -> tuple[float, float]:
    if width <= 0 or height <= 0:
        raise ValueError("console dimensions must be positive")
    return 2.0 / width, 2.0 / height


def glyph_uv(glyph: int) -> tuple[float, float, float, float]:
    """Texture coordinates ``(left, right, top, bottom)`` of a glyph on a 16x16 sheet."""
    if not 0 <= glyph <= 255:
        raise ValueError(f"glyph {glyph} is not in 0..255")
    glyph_x = glyph % 16
    glyph_y = 16 - glyph // 16
    return (
        glyph_x * _GLYPH_SIZE,
        (glyph_x + 1) * _GLYPH_SIZE,
        glyph_y * _GLYPH_SIZE,
        (glyph_y - 1) * _GLYPH_SIZE,
    )


def build_simple_vertices(tiles: Sequence[Any], width: int, height: int,
                          offset_x: float, offset_y: float) -> VertexData:
    """Quads for every cell of a full console; storage row 0 is the bottom of the screen."""
    step_x, step_y = _steps(width, height)
    count = width * height
    if len(tiles) < count:
        raise IndexError(f"{len(tiles)} tiles cannot fill a {width}x{height} console")
    data = VertexData()
    screen_y = -1.0
    for y in range(height):
        screen_x = -1.0
        for tile in tiles[y * width:(y + 1) * width]:
            data._push_tile(screen_x + offset_x, screen_y + offset_y, step_x, step_y,
                            tile.fg, tile.bg, tile.glyph)
            screen_x += step_x
        screen_y += step_y
    return data


def build_sparse_vertices(tiles: Sequence[Any], width: int, height: int,
                          offset_x: float, offset_y: float) -> VertexData:
    """Quads for only the tiles a sparse console holds, placed by flat index."""
    step_x, step_y = _steps(width, height)
    data = VertexData()
    for tile in tiles:
        x = tile.idx % width
        y = tile.idx // width
        screen_x = step_x * x - 1.0 + offset_x
        screen_y = step_y * y - 1.0 + offset_y
        data._push_tile(screen_x, screen_y, step_x, step_y, tile.fg, tile.bg, tile.glyph)
    return data


def quad_vertices() -> tuple[float, ...]:
    """Two triangles covering the screen: position (2) and texture (2) per vertex."""
    return _QUAD