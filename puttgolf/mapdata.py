"""Reading course maps from images: pixel classes, walls and markers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Sequence

from PIL import Image

from .wall import Wall

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

Color = Sequence[int]
Grid = Sequence[Sequence[Color]]


class PixelType(enum.IntEnum):
    """What a map pixel stands for."""

    UNKNOWN = -1
    GRASS = 1
    WALL = 2
    START = 3
    END = 4


_COLOR_TYPES = {
    (255, 255, 255): PixelType.GRASS,
    (0, 0, 0): PixelType.WALL,
    (168, 230, 29): PixelType.START,
    (237, 28, 36): PixelType.END,
}


def pixel_type(color) -> PixelType:
    """Classify an RGB or RGBA colour; alpha is ignored."""
    return _COLOR_TYPES.get(tuple(int(c) for c in color[:3]), PixelType.UNKNOWN)


def load_grid(path) -> list[list[tuple[int, int, int]]]:
    """Load an image as rows of RGB tuples."""
    with Image.open(path) as image:
        rgb = image.convert("RGB")
        width, height = rgb.size
        data = rgb.tobytes()
    pixels = [tuple(data[i:i + 3]) for i in range(0, len(data), 3)]
    return [pixels[row * width:(row + 1) * width] for row in range(height)]


def _dimensions(grid: Grid) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("map is empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("map rows differ in length")
    return width, len(grid)


def scan_wall_rects(grid) -> list[tuple[int, int, int, int]]:
    """Group wall pixels into rectangles (x, y, width, height) in map cells.

    A rectangle grows right along its first row, then down along its last
    column; the downward run is also limited by ``x + height < map height``.
    Rectangles thinner than two cells are dropped.
    """
    width, height = _dimensions(grid)

    def is_wall(x: int, y: int) -> bool:
        return 0 <= x < width and 0 <= y < height and pixel_type(grid[y][x]) is PixelType.WALL

    visited: set[tuple[int, int]] = set()
    rects: list[tuple[int, int, int, int]] = []
    for y, row in enumerate(grid):
        for x, color in enumerate(row):
            if (x, y) in visited or pixel_type(color) is not PixelType.WALL:
                continue
            w = 0
            while x + w < width and is_wall(x + w, y):
                w += 1
            h = 0
            while x + h < height and is_wall(x + w - 1, y + h):
                h += 1
            if w < 2 or h < 2:
                continue
            rects.append((x, y, w, h))
            visited.update((cx, cy) for cy in range(y, y + h) for cx in range(x, x + w))
    return rects


def build_walls(grid, screen_width=SCREEN_WIDTH) -> list[Wall]:
    """Turn the map's wall rectangles into screen-space walls."""
    map_width, _ = _dimensions(grid)
    scale = screen_width // map_width
    return [Wall(x * scale, y * scale, w * scale, h * scale) for x, y, w, h in scan_wall_rects(grid)]


def find_markers(grid, screen_width=SCREEN_WIDTH) -> tuple[tuple[float, float], tuple[float, float]]:
    """Return screen positions of the start and hole markers.

    The last marker of each kind in reading order wins; a missing one is (0, 0).
    """
    map_width, _ = _dimensions(grid)
    scale = float(screen_width // map_width)
    start = (0.0, 0.0)
    hole = (0.0, 0.0)
    for y, row in enumerate(grid):
        for x, color in enumerate(row):
            kind = pixel_type(color)
            if kind is PixelType.START:
                start = (x * scale, y * scale)
            elif kind is PixelType.END:
                hole = (x * scale, y * scale)
    return start, hole


@dataclass
class MapLayout:
    """Everything the game needs from a map."""

    start: tuple[float, float]
    hole: tuple[float, float]
    walls: list[Wall] = field(default_factory=list)


def load_layout(grid, screen_width=SCREEN_WIDTH) -> MapLayout:
    """Build the full layout of a map for the given screen width."""
    start, hole = find_markers(grid, screen_width)
    return MapLayout(start=start, hole=hole, walls=build_walls(grid, screen_width))