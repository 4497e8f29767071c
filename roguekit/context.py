"""The application context: fonts, a stack of consoles, input and frame state."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from .font import Font
from .rex import XpFile, XpLayer, xp_to_console
from .simple_console import SimpleConsole

SHADER_WITH_BACKGROUND = 0
SHADER_NO_BACKGROUND = 1


def iclamp(val: int, low: int, high: int) -> int:
    """Clamp an integer into ``[low, high]``; ``low`` wins if the bounds cross."""
    return max(low, min(val, high))


@dataclass
class DisplayConsole:
    """A registered console, the font it draws with and how it is shaded.

    ``buffers`` holds whatever the renderer last built for the console.
    """

    console: Any
    shader_index: int = SHADER_WITH_BACKGROUND
    font_index: int = 0
    buffers: Any = None


class Context:
    """Everything a game's ``tick`` sees: consoles to draw on and this frame's input.

    Drawing calls go to the active console.
    """

    def __init__(self, width_pixels: int, height_pixels: int, title: str = "") -> None:
        self.title = str(title)
        self.width_pixels = width_pixels
        self.height_pixels = height_pixels
        self.fonts: list[Font] = []
        self.consoles: list[DisplayConsole] = []
        self.fps = 0.0
        self.frame_time_ms = 0.0
        self.active_console = 0
        self.key = None
        self.mouse_pos: tuple[int, int] = (0, 0)
        self.left_click = False
        self.shift = False
        self.control = False
        self.alt = False
        self.web_button: str | None = None
        self.quitting = False
        self.post_scanlines = False
        self.post_screenburn = False

    @classmethod
    def _init_simple(cls, width_chars: int, height_chars: int, title: str,
                     resource_dir: Any, font_file: str, tile_size: tuple[int, int]) -> Context:
        font_path = f"{os.fspath(resource_dir)}/{font_file}"
        context = cls(width_chars * tile_size[0], height_chars * tile_size[1], title)
        font = context.register_font(Font.load(font_path, tile_size))
        context.register_console(SimpleConsole(width_chars, height_chars), font)
        return context

    @classmethod
    def init_simple8x8(cls, width_chars: int, height_chars: int, title: str,
                       resource_dir: Any) -> Context:
        """A context with one console using ``terminal8x8.png`` from ``resource_dir``."""
        return cls._init_simple(width_chars, height_chars, title, resource_dir,
                                "terminal8x8.png", (8, 8))

    @classmethod
    def init_simple8x16(cls, width_chars: int, height_chars: int, title: str,
                        resource_dir: Any) -> Context:
        """A context with one console using the VGA font ``vga8x16.png``."""
        return cls._init_simple(width_chars, height_chars, title, resource_dir,
                                "vga8x16.png", (8, 16))

    def register_font(self, font: Font) -> int:
        """Add a font and return its handle."""
        self.fonts.append(font)
        return len(self.fonts) - 1

    def register_console(self, console: Any, font_index: int) -> int:
        """Add a console drawn with its background colors; return its handle."""
        self.consoles.append(DisplayConsole(console, SHADER_WITH_BACKGROUND, font_index))
        return len(self.consoles) - 1

    def register_console_no_bg(self, console: Any, font_index: int) -> int:
        """Add a console drawn without backgrounds, for layering; return its handle."""
        self.consoles.append(DisplayConsole(console, SHADER_NO_BACKGROUND, font_index))
        return len(self.consoles) - 1

    def set_active_console(self, idx: int) -> None:
        """Direct drawing calls to console ``idx``."""
        self.active_console = idx

    @property
    def _active(self) -> Any:
        return self.consoles[self.active_console].console

    def console_mouse_pos(self) -> tuple[int, int]:
        """The mouse position in cells of the active console, clamped to it."""
        display = self.consoles[self.active_console]
        tile_w, tile_h = self.fonts[display.font_index].tile_size
        max_w, max_h = display.console.char_size()
        return (
            iclamp(int(self.mouse_pos[0] / tile_w), 0, max_w - 1),
            iclamp(int(self.mouse_pos[1] / tile_h), 0, max_h - 1),
        )

    def quit(self) -> None:
        """Ask the main loop to stop."""
        self.quitting = True

    def render_xp_sprite(self, xp: XpFile, x: int, y: int) -> None:
        """Draw a REXPaint image onto the active console, skipping transparent cells."""
        xp_to_console(xp, self._active, x, y)

    def to_xp_file(self, width: int, height: int) -> XpFile:
        """An image of a blank layer, the active console, then every console after the first."""
        xp = XpFile.blank(width, height)
        xp.layers.append(self._active.to_xp_layer())
        xp.layers.extend(display.console.to_xp_layer() for display in self.consoles[1:])
        return xp

    def with_post_scanlines(self, with_burn: bool) -> None:
        """Turn on the scanline effect, and optionally screen burn."""
        self.post_scanlines = True
        self.post_screenburn = with_burn

    def char_size(self) -> tuple[int, int]:
        """Size in cells of the active console."""
        return self._active.char_size()

    def resize_pixels(self, width: int, height: int) -> None:
        """The window changed size; tell every console."""
        self.width_pixels = width
        self.height_pixels = height
        for display in self.consoles:
            display.console.resize_pixels(width, height)

    def cls(self) -> None:
        """Clear the active console."""
        self._active.cls()

    def cls_bg(self, background: Any) -> None:
        """Clear the active console to a background color."""
        self._active.cls_bg(background)

    def print(self, x: int, y: int, output: str) -> None:
        """Write text on the active console."""
        self._active.print(x, y, output)

    def print_color(self, x: int, y: int, fg: Any, bg: Any, output: str) -> None:
        """Write colored text on the active console."""
        self._active.print_color(x, y, fg, bg, output)

    def set(self, x: int, y: int, fg: Any, bg: Any, glyph: int) -> None:
        """Set one cell of the active console."""
        self._active.set(x, y, fg, bg, glyph)

    def set_bg(self, x: int, y: int, bg: Any) -> None:
        """Set one cell's background on the active console."""
        self._active.set_bg(x, y, bg)

    def print_centered(self, y: int, text: str) -> None:
        """Write centred text on the active console."""
        self._active.print_centered(y, text)

    def print_color_centered(self, y: int, fg: Any, bg: Any, text: str) -> None:
        """Write centred colored text on the active console."""
        self._active.print_color_centered(y, fg, bg, text)

    def to_xp_layer(self) -> XpLayer:
        """The active console as a REXPaint layer."""
        return self._active.to_xp_layer()

    def set_offset(self, x: float, y: float) -> None:
        """Offset rendering of the active console by a fraction of a cell."""
        self._active.set_offset(x, y)