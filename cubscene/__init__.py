"""Scene files, XPM textures, pixel images, colours and event dispatch for a raycasting engine."""

__version__ = "0.1.0"
__all__ = ["colornames", "colors", "textutil", "image", "xpm", "events", "cubfile"]