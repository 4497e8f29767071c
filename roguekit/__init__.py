"""Building blocks for roguelike games: consoles, a context, REXPaint images, fonts, dice and render data."""

__version__ = "0.1.0"