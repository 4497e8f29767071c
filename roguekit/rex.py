"""Reading and writing REXPaint ``.xp`` images."""

from __future__ import annotations

import gzip
import io
import math
import struct
from dataclasses import dataclass, field
from typing import Any, BinaryIO, ClassVar

_HEADER = struct.Struct("<iI")
_DIMS = struct.Struct("<II")
_CELL = struct.Struct("<I3B3B")


class XpFormatError(ValueError):
    """Raised when an .xp stream is corrupt or truncated."""


def _to_byte(component: float) -> int:
    if math.isnan(component):
        return 0
    return int(max(0.0, min(255.0, component * 255.0)))


@dataclass(frozen=True)
class XpColor:
    """An 8-bit RGB color."""

    r: int
    g: int
    b: int

    BLACK: ClassVar[XpColor]
    TRANSPARENT: ClassVar[XpColor]

    def is_transparent(self) -> bool:
        """Hot pink (255, 0, 255) marks a background the layer below shows through."""
        return self == XpColor.TRANSPARENT

    def to_rgb(self) -> tuple[float, float, float]:
        """Return the color as floats in [0, 1]."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)

    @classmethod
    def from_rgb(cls, rgb) -> XpColor:
        """Build a color from three floats in [0, 1], truncating and saturating."""
        r, g, b = rgb
        return cls(_to_byte(r), _to_byte(g), _to_byte(b))


XpColor.BLACK = XpColor(0, 0, 0)
XpColor.TRANSPARENT = XpColor(255, 0, 255)


@dataclass(frozen=True)
class XpCell:
    """A glyph with its foreground and background colors."""

    ch: int = 0
    fg: XpColor = XpColor.BLACK
    bg: XpColor = XpColor.BLACK


@dataclass
class XpLayer:
    """A grid of cells stored column-major: cell (x, y) is at ``x * height + y``."""

    width: int
    height: int
    cells: list[XpCell] = field(default_factory=list)

    @classmethod
    def blank(cls, width: int, height: int) -> XpLayer:
        """A layer of empty cells: glyph 0, black on black."""
        return cls(width, height, [XpCell()] * (width * height))

    def _index(self, x: int, y: int) -> int | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return x * self.height + y
        return None

    def get(self, x: int, y: int) -> XpCell | None:
        """Return the cell at (x, y), or None when out of range."""
        idx = self._index(x, y)
        return None if idx is None else self.cells[idx]

    def set(self, x: int, y: int, cell: XpCell) -> None:
        """Replace the cell at (x, y)."""
        idx = self._index(x, y)
        if idx is None:
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} layer")
        self.cells[idx] = cell


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._view = memoryview(data)
        self._offset = 0

    def unpack(self, fmt: struct.Struct) -> tuple:
        end = self._offset + fmt.size
        if end > len(self._view):
            raise XpFormatError("unexpected end of .xp data")
        values = fmt.unpack_from(self._view, self._offset)
        self._offset = end
        return values


@dataclass
class XpFile:
    """A REXPaint image: a stack of layers."""

    version: int = -1
    layers: list[XpLayer] = field(default_factory=list)

    @classmethod
    def blank(cls, width: int, height: int) -> XpFile:
        """An image with a single empty layer."""
        return cls(-1, [XpLayer.blank(width, height)])

    @classmethod
    def read(cls, stream: BinaryIO) -> XpFile:
        """Read a gzip-compressed .xp image from a binary stream."""
        try:
            with gzip.GzipFile(fileobj=stream, mode="rb") as gz:
                data = gz.read()
        except (OSError, EOFError) as exc:
            raise XpFormatError(f"cannot decompress .xp data: {exc}") from exc

        reader = _Reader(data)
        version, num_layers = reader.unpack(_HEADER)
        layers = []
        for _ in range(num_layers):
            width, height = reader.unpack(_DIMS)
            cells = []
            for _ in range(width * height):
                ch, fr, fg, fb, br, bg, bb = reader.unpack(_CELL)
                cells.append(XpCell(ch, XpColor(fr, fg, fb), XpColor(br, bg, bb)))
            layers.append(XpLayer(width, height, cells))
        return cls(version, layers)

    def write(self, stream: BinaryIO) -> None:
        """Write the image, gzip-compressed, to a binary stream."""
        payload = bytearray(_HEADER.pack(self.version, len(self.layers)))
        for layer in self.layers:
            payload += _DIMS.pack(layer.width, layer.height)
            for cell in layer.cells:
                payload += _CELL.pack(
                    cell.ch,
                    cell.fg.r, cell.fg.g, cell.fg.b,
                    cell.bg.r, cell.bg.g, cell.bg.b,
                )
        with gzip.GzipFile(fileobj=stream, mode="wb", compresslevel=9, mtime=0) as gz:
            gz.write(payload)

    @classmethod
    def from_bytes(cls, data: bytes) -> XpFile:
        """Parse an image from compressed bytes."""
        return cls.read(io.BytesIO(data))

    def to_bytes(self) -> bytes:
        """Serialise the image to compressed bytes."""
        buffer = io.BytesIO()
        self.write(buffer)
        return buffer.getvalue()


def xp_to_console(xp: XpFile, console: Any, offset_x: int, offset_y: int) -> None:
    """Draw every non-transparent cell of every layer onto ``console``."""
    for layer in xp.layers:
        for y in range(layer.height):
            for x in range(layer.width):
                cell = layer.get(x, y)
                if cell.bg.is_transparent():
                    continue
                console.set(
                    x + offset_x,
                    y + offset_y,
                    cell.fg.to_rgb(),
                    cell.bg.to_rgb(),
                    cell.ch & 0xFF,
                )