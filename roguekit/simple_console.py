"""A fixed-size grid console in which every cell has a glyph and two colors."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .rex import XpCell, XpColor, XpLayer

WHITE = (1.0, 1.0, 1.0)
BLACK = (0.0, 0.0, 0.0)
SPACE = 32


def _glyphs(text: str) -> bytes:
    """Encode text as code page 437 glyph numbers."""
    return text.encode("cp437", errors="replace")


@dataclass
class Tile:
    """One console cell: a glyph number with foreground and background colors."""

    glyph: int = 0
    fg: Any = WHITE
    bg: Any = BLACK


class SimpleConsole:
    """A console that stores every cell, with a background color for each.

    Tile rows are stored bottom-up: screen row ``y`` lives in storage row
    ``height - 1 - y``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("console dimensions must not be negative")
        self.width = width
        self.height = height
        self.tiles: list[Tile] = [Tile() for _ in range(width * height)]
        self.is_dirty = True
        self.offset_x = 0.0
        self.offset_y = 0.0

    def at(self, x: int, y: int) -> int:
        """Translate screen coordinates into an index into :attr:`tiles`."""
        if x < 0 or y < 0 or y >= self.height:
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} console")
        return (self.height - 1 - y) * self.width + x

    def char_size(self) -> tuple[int, int]:
        """The console size in cells."""
        return (self.width, self.height)

    def resize_pixels(self, width: int, height: int) -> None:
        """The window changed size; the console needs rebuilding."""
        self.is_dirty = True

    def rebuild_if_dirty(self, rebuild: Callable[[SimpleConsole], Any]) -> bool:
        """Call ``rebuild`` with this console if it changed; return whether it did."""
        if not self.is_dirty:
            return False
        rebuild(self)
        self.is_dirty = False
        return True

    def cls(self) -> None:
        """Clear to spaces, white on black."""
        self.cls_bg(BLACK)

    def cls_bg(self, background: Any) -> None:
        """Clear to spaces, white on ``background``."""
        self.is_dirty = True
        for tile in self.tiles:
            tile.glyph = SPACE
            tile.fg = WHITE
            tile.bg = background

    def _write(self, x: int, y: int, output: str, colors: tuple[Any, Any] | None) -> None:
        self.is_dirty = True
        start = self.at(x, y)
        for offset, glyph in enumerate(_glyphs(output)):
            idx = start + offset
            if idx >= len(self.tiles):
                break
            tile = self.tiles[idx]
            tile.glyph = glyph
            if colors is not None:
                tile.fg, tile.bg = colors

    def print(self, x: int, y: int, output: str) -> None:
        """Write text starting at (x, y), keeping the cells' colors."""
        self._write(x, y, output, None)

    def print_color(self, x: int, y: int, fg: Any, bg: Any, output: str) -> None:
        """Write text starting at (x, y) in the given colors."""
        self._write(x, y, output, (fg, bg))

    def set(self, x: int, y: int, fg: Any, bg: Any, glyph: int) -> None:
        """Set one cell's glyph and colors."""
        tile = self.tiles[self.at(x, y)]
        tile.glyph = glyph
        tile.fg = fg
        tile.bg = bg

    def set_bg(self, x: int, y: int, bg: Any) -> None:
        """Set one cell's background color."""
        self.tiles[self.at(x, y)].bg = bg

    def _centered_x(self, text: str) -> int:
        return self.width // 2 - len(text.encode("utf-8")) // 2

    def print_centered(self, y: int, text: str) -> None:
        """Write text centred across the console width on row ``y``."""
        self.is_dirty = True
        self.print(self._centered_x(text), y, text)

    def print_color_centered(self, y: int, fg: Any, bg: Any, text: str) -> None:
        """Write colored text centred across the console width on row ``y``."""
        self.is_dirty = True
        self.print_color(self._centered_x(text), y, fg, bg, text)

    def to_xp_layer(self) -> XpLayer:
        """Copy the console into a REXPaint layer."""
        layer = XpLayer.blank(self.width, self.height)
        for y in range(self.height):
            for x in range(self.width):
                tile = self.tiles[self.at(x, y)]
                layer.set(
                    x,
                    y,
                    XpCell(tile.glyph, XpColor.from_rgb(_rgb(tile.fg)), XpColor.from_rgb(_rgb(tile.bg))),
                )
        return layer

    def set_offset(self, x: float, y: float) -> None:
        """Shift rendering by a fraction of a cell; -0.5 moves half a cell left/up."""
        self.offset_x = x * (2.0 / self.width)
        self.offset_y = y * (2.0 / self.height)


def _rgb(color: Any) -> tuple[float, float, float]:
    if hasattr(color, "r"):
        return (color.r, color.g, color.b)
    r, g, b = color
    return (r, g, b)