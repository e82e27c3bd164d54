"""Top-down mini-golf game with levels drawn as colour-coded images."""

__version__ = "0.1.0"
__all__ = ["game", "mapdata", "physics", "readmap", "wall"]