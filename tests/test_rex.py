import io

import pytest

from roguekit.rex import XpCell, XpColor, XpFile, XpFormatError, XpLayer, xp_to_console

WIDTH = 80
HEIGHT = 60


def test_roundtrip():
    xp = XpFile.blank(WIDTH, HEIGHT)
    for y in range(HEIGHT):
        for x in range(WIDTH):
            xp.layers[0].set(
                x,
                y,
                XpCell(
                    ch=32 + x + y,
                    fg=XpColor(y, 0, 255 - y),
                    bg=XpColor(x, 0, 255 - x),
                ),
            )
    buffer = io.BytesIO()
    xp.write(buffer)
    buffer.seek(0)
    assert XpFile.read(buffer) == xp


def _two_layer_image():
    xp = XpFile(-1, [XpLayer.blank(8, 4), XpLayer.blank(8, 4)])
    xp.layers[0].set(0, 0, XpCell(ord("A"), XpColor(0, 0, 255), XpColor.BLACK))
    for y in range(4):
        for x in range(8):
            xp.layers[1].set(x, y, XpCell(32, XpColor.BLACK, XpColor.TRANSPARENT))
    xp.layers[1].set(2, 2, XpCell(ord("B"), XpColor.BLACK, XpColor.TRANSPARENT))
    return xp


def test_image():
    xp = XpFile.from_bytes(_two_layer_image().to_bytes())
    assert xp.version == -1
    assert len(xp.layers) == 2
    assert xp.layers[0].width == 8
    assert xp.layers[0].height == 4
    assert xp.layers[1].width == 8
    assert xp.layers[1].height == 4
    assert xp.layers[1].get(0, 0).fg == XpColor.BLACK
    assert xp.layers[1].get(0, 0).bg.is_transparent()
    assert xp.layers[1].get(0, 0).ch == 32
    assert xp.layers[1].get(2, 2).ch == ord("B")
    assert xp.layers[0].get(0, 0).fg == XpColor(0, 0, 255)
    assert xp.layers[0].get(0, 0).bg == XpColor.BLACK
    assert xp.layers[0].get(0, 0).ch == ord("A")


def test_output_is_gzip():
    assert XpFile.blank(2, 2).to_bytes()[:2] == b"\x1f\x8b"


def test_blank_layer_is_black_glyph_zero():
    layer = XpLayer.blank(3, 2)
    assert layer.cells == [XpCell(0, XpColor.BLACK, XpColor.BLACK)] * 6


def test_cells_are_column_major():
    layer = XpLayer.blank(3, 2)
    cell = XpCell(65, XpColor.BLACK, XpColor.BLACK)
    layer.set(1, 0, cell)
    assert layer.cells[layer.height] == cell


@pytest.mark.parametrize("x, y", [(3, 0), (0, 2), (-1, 0)])
def test_get_out_of_range_returns_none(x, y):
    assert XpLayer.blank(3, 2).get(x, y) is None


def test_set_out_of_range_raises():
    with pytest.raises(IndexError):
        XpLayer.blank(3, 2).set(3, 0, XpCell())


def test_transparency():
    assert XpColor(255, 0, 255).is_transparent()
    assert not XpColor.BLACK.is_transparent()


def test_rgb_round_trip():
    color = XpColor(12, 128, 255)
    assert XpColor.from_rgb(color.to_rgb()) == color


def test_from_rgb_saturates():
    assert XpColor.from_rgb((2.0, -1.0, 1.0)) == XpColor(255, 0, 255)


def test_truncated_data_raises():
    data = XpFile.blank(4, 4).to_bytes()
    with pytest.raises(XpFormatError):
        XpFile.from_bytes(data[: len(data) // 2])


def test_not_gzip_raises():
    with pytest.raises(XpFormatError):
        XpFile.from_bytes(b"not an xp file at all")


def test_missing_cells_raise():
    import gzip
    import struct

    payload = struct.pack("<iIII", -1, 1, 2, 2)
    with pytest.raises(XpFormatError):
        XpFile.from_bytes(gzip.compress(payload))


class RecordingConsole:
    def __init__(self):
        self.calls = []

    def set(self, x, y, fg, bg, glyph):
        self.calls.append((x, y, fg, bg, glyph))


def test_xp_to_console_skips_transparent_cells():
    xp = _two_layer_image()
    console = RecordingConsole()
    xp_to_console(xp, console, 10, 20)
    assert len(console.calls) == 32
    first = console.calls[0]
    assert first == (10, 20, XpColor(0, 0, 255).to_rgb(), XpColor.BLACK.to_rgb(), ord("A"))


def test_xp_to_console_truncates_glyph_to_byte():
    xp = XpFile.blank(1, 1)
    xp.layers[0].set(0, 0, XpCell(0x141, XpColor.BLACK, XpColor.BLACK))
    console = RecordingConsole()
    xp_to_console(xp, console, 0, 0)
    assert console.calls[0][4] == 0x41