"""Bitmaps, colours, geometry, layouts, button states, cursors and image loading for a software-rendered widget toolkit."""

__version__ = "0.1.0"

__all__ = ["bitmap", "buttonstates", "colors", "geometry", "layout", "loaders", "mousecursors"]