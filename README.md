# roguekit

Building blocks for roguelike games:

- `roguekit.simple_console.SimpleConsole`: a fixed-size grid of `Tile`s (glyph, foreground, background) with `print`, `print_color`, `print_centered`, `print_color_centered`, `set`, `set_bg`, `cls`, `cls_bg`, `set_offset` and `to_xp_layer`. Text is encoded as code page 437; colors are `(r, g, b)` floats in 0..1 or any object with `r`, `g`, `b` attributes.
- `roguekit.context.Context`: holds fonts and a stack of consoles, forwards drawing calls to the active console, keeps per-frame fields (`mouse_pos`, `left_click`, `key`, `shift`, `control`, `alt`, `fps`, `frame_time_ms`, `quitting`) and converts the mouse position to console cells with `console_mouse_pos()`.
- `roguekit.rex`: reading and writing gzip-compressed REXPaint `.xp` images (`XpFile`, `XpLayer`, `XpCell`, `XpColor`), and `xp_to_console` to stamp an image onto a console, skipping transparent (hot pink) backgrounds. Corrupt data raises `XpFormatError`.
- `roguekit.font.Font`: a tileset image and its glyph size; `Font.load` opens the image with Pillow to learn its dimensions.
- `roguekit.rng.RandomNumberGenerator`: a seedable xorshift generator with `range`, `rand`, `next_u32`, `next_u64` and `roll_dice`.
- Render data helpers:
  - `roguekit.vertices`: `build_simple_vertices`, `build_sparse_vertices`, `glyph_uv` and `quad_vertices` produce interleaved vertex floats and triangle indices (`VertexData`).
  - `roguekit.textures`: `pack_simple_textures`, `pack_sparse_textures` and `texture_offset` pack tiles into RGBA byte textures.
  - `roguekit.terminal`: `render_simple` and `render_sparse` turn tiles into `DrawCommand`s for a 16-color terminal, using `find_nearest_color`, `color_pair` and `glyph_to_char`.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Dice

```python
from roguekit.rng import RandomNumberGenerator

rng = RandomNumberGenerator.seeded(42)
print(rng.roll_dice(3, 6))   # 3d6
print(rng.range(1, 6))       # 1..5, upper bound excluded
print(rng.range(0.0, 1.0))   # a float in [0, 1)
```

## Consoles

```python
from roguekit.simple_console import SimpleConsole

console = SimpleConsole(80, 50)
console.cls()
console.print(1, 1, "Hello, dungeon!")
console.print_color_centered(3, (1.0, 1.0, 0.0), (0.0, 0.0, 0.0), "Welcome")
console.set(10, 10, (1.0, 0.0, 0.0), (0.0, 0.0, 0.0), ord("@"))
```

With a context and a font image (`terminal8x8.png` in the given directory):

```python
from roguekit.context import Context

ctx = Context.init_simple8x8(80, 50, "My game", "resources")
ctx.cls()
ctx.print(1, 1, "Hello, dungeon!")
ctx.mouse_pos = (100, 40)
print(ctx.console_mouse_pos())      # (12, 5) with 8x8 tiles
snapshot = ctx.to_xp_file(80, 50)
```

## REXPaint images

```python
from roguekit.rex import XpFile

with open("sprite.xp", "rb") as stream:
    image = XpFile.read(stream)

layer = image.layers[0]
cell = layer.get(0, 0)
print(cell.ch, cell.fg, cell.bg.is_transparent())

ctx.render_xp_sprite(image, 5, 5)

with open("copy.xp", "wb") as stream:
    image.write(stream)
```

`XpFile.from_bytes` and `XpFile.to_bytes` do the same in memory.

## Render data

```python
from roguekit.vertices import build_simple_vertices
from roguekit.textures import pack_simple_textures

data = build_simple_vertices(console.tiles, console.width, console.height,
                             console.offset_x, console.offset_y)
glyphs, backgrounds = pack_simple_textures(console.tiles, console.width, console.height)
```

## What this package does not do

- It opens no window, drives no graphics or terminal library and has no main loop: the render helpers produce vertex data, textures and terminal draw commands for your own renderer to use, and your code fills in the context's input fields each frame.
- It has no key-code table or translation of keyboard, mouse or browser events; `Context.key` is simply whatever value you store there.
- It has no path-finding or field-of-view algorithms.
- It provides no command-line program.