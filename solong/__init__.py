"""A tile-based puzzle game with map validation, XPM sprite loading and a pygame window."""

__version__ = "0.1.0"
__all__ = ["colors", "xpm", "mapcheck", "visual", "game", "render", "cli"]