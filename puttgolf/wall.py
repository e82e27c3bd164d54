"""Rectangular course walls and their collision test against the ball."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar


class Collision(enum.IntEnum):
    """Which velocity component a collision should flip."""

    NONE = 0
    VERTICAL = 1  # reverse dy
    HORIZONTAL = 2  # reverse dx


@dataclass
class Wall:
    """An axis-aligned wall drawn with a dark outline."""

    x: float = 0.0
    y: float = 0.0
    width: float = 100.0
    height: float = 20.0

    FILL_COLOR: ClassVar[tuple[int, int, int]] = (153, 107, 0)
    OUTLINE_COLOR: ClassVar[tuple[int, int, int]] = (0, 0, 0)
    OUTLINE_THICKNESS: ClassVar[float] = 2.0

    def move_to(self, x, y) -> None:
        """Place the wall's top-left corner at integer coordinates."""
        self.x = float(int(x))
        self.y = float(int(y))

    def resize(self, width, height) -> None:
        """Change the wall's size to integer dimensions."""
        self.width = float(int(width))
        self.height = float(int(height))

    def bounds(self) -> tuple[float, float, float, float]:
        """Return (left, top, width, height) including the outline."""
        t = self.OUTLINE_THICKNESS
        return (self.x - t, self.y - t, self.width + 2 * t, self.height + 2 * t)

    def contains(self, px, py) -> bool:
        """True if the point lies inside the bounds (right and bottom edges excluded)."""
        left, top, width, height = self.bounds()
        return left <= px < left + width and top <= py < top + height

    def check_collision(self, ball_x, ball_y, radius) -> Collision:
        """Test the ball's four extreme points; ball_x/ball_y is its top-left corner."""
        r = int(radius + 2)
        bx = int(ball_x + r)
        by = int(ball_y + r)
        if self.contains(bx, by - r) or self.contains(bx, by + r):
            return Collision.VERTICAL
        if self.contains(bx - r, by) or self.contains(bx + r, by):
            return Collision.HORIZONTAL
        return Collision.NONE