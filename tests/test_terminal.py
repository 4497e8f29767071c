from types import SimpleNamespace

import pytest

from roguekit.terminal import (
    DrawCommand,
    PaletteColor,
    SparseTile,
    color_pair,
    find_nearest_color,
    glyph_to_char,
    render_simple,
    render_sparse,
)

BLACK = (0.0, 0.0, 0.0)
WHITE = (1.0, 1.0, 1.0)
PALETTE = [
    PaletteColor.from_curses(0, 0, 0),
    PaletteColor.from_curses(1000, 1000, 1000),
    PaletteColor.from_curses(1000, 0, 0),
]


def tile(glyph, fg=WHITE, bg=BLACK):
    return SimpleNamespace(glyph=glyph, fg=fg, bg=bg)


def test_from_curses_scales_components():
    entry = PaletteColor.from_curses(1000, 0, 500)
    assert (entry.r, entry.g, entry.b) == (1000, 0, 500)
    assert (entry.rf, entry.gf, entry.bf) == (1.0, 0.0, 0.5)


@pytest.mark.parametrize("idx", range(len(PALETTE)))
def test_exact_palette_match(idx):
    entry = PALETTE[idx]
    assert find_nearest_color((entry.rf, entry.gf, entry.bf), PALETTE) == idx


def test_color_object_with_attributes():
    color = SimpleNamespace(r=0.9, g=0.1, b=0.05)
    assert find_nearest_color(color, PALETTE) == 2


def test_empty_palette_gives_minus_one():
    assert find_nearest_color(WHITE, []) == -1


def test_ties_pick_first_entry():
    palette = [PaletteColor.from_curses(0, 0, 0), PaletteColor.from_curses(0, 0, 0)]
    assert find_nearest_color(BLACK, palette) == 0


@pytest.mark.parametrize("fg,bg", [(0, 0), (15, 0), (3, 7), (15, 15)])
def test_color_pair_layout(fg, bg):
    pair = color_pair(fg, bg)
    assert pair % 16 == fg
    assert pair // 16 == bg


def test_glyph_to_char_ascii():
    assert glyph_to_char(ord("A")) == "A"
    assert glyph_to_char(ord("B")) == "B"
    assert glyph_to_char(32) == " "


def test_render_simple_flips_rows():
    width, height = 3, 2
    tiles = [tile(ord("a") + i) for i in range(width * height)]
    commands = render_simple(tiles, width, height, PALETTE)
    assert len(commands) == width * height
    assert commands[0] == DrawCommand(height - 1, 0, color_pair(1, 0), "a")
    assert {(c.row, c.col) for c in commands} == {
        (r, c) for r in range(height) for c in range(width)
    }
    assert commands[-1].row == 0
    assert commands[-1].col == width - 1


def test_render_simple_colors():
    commands = render_simple([tile(ord("x"), fg=(1.0, 0.0, 0.0), bg=WHITE)], 1, 1, PALETTE)
    assert commands[0].pair == color_pair(2, 1)


def test_render_simple_too_few_tiles():
    with pytest.raises(IndexError):
        render_simple([tile(65)], 2, 2, PALETTE)


def test_render_sparse_positions():
    width, height = 4, 3
    tiles = [
        SparseTile(idx=0, glyph=ord("@"), fg=WHITE, bg=BLACK),
        SparseTile(idx=width + 1, glyph=ord("#"), fg=WHITE, bg=BLACK),
    ]
    commands = render_sparse(tiles, width, height, PALETTE)
    assert [(c.row, c.col, c.char) for c in commands] == [
        (height - 1, 0, "@"),
        (height - 2, 1, "#"),
    ]


def test_render_sparse_empty():
    assert render_sparse([], 4, 4, PALETTE) == []