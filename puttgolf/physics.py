"""Ball, aiming arrow and hole: the moving parts of a putting course."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from .mapdata import SCREEN_HEIGHT, SCREEN_WIDTH

FRICTION = -0.05
TOWARD_SPEED = 5.0
MAX_SHOT_SPEED = 20.0
SHOT_DISTANCE_DIVISOR = 30.0

_BLACK = (0, 0, 0)


def distance(x1, y1, x2, y2) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x1 - x2, y1 - y2)


class BallColor(enum.IntEnum):
    """Colour codes accepted by :meth:`Ball.set_color`."""

    GREEN = 1
    BLUE = 2
    RED = 3
    WHITE = 4

    @property
    def rgb(self) -> tuple[int, int, int]:
        return _BALL_RGB[self]


_BALL_RGB = {
    BallColor.GREEN: (0, 255, 0),
    BallColor.BLUE: (0, 0, 255),
    BallColor.RED: (255, 0, 0),
    BallColor.WHITE: (255, 255, 255),
}


@dataclass
class Ball:
    """A ball whose (x, y) is the top-left corner of its bounding square."""

    radius: float
    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    velocity: float = 0.0
    a: float = 0.0
    color: tuple[int, int, int] = BallColor.GREEN.rgb

    def set_position(self, x, y) -> None:
        self.x = float(x)
        self.y = float(y)

    def set_color(self, code) -> None:
        """Apply a colour code; an unknown code gives black."""
        try:
            self.color = BallColor(code).rgb
        except ValueError:
            self.color = _BLACK

    def center(self) -> tuple[int, int]:
        """Centre of the ball, truncated to whole pixels."""
        return int(self.x + self.radius), int(self.y + self.radius)

    def is_moving(self) -> bool:
        return not (self.dx == 0 and self.dy == 0)

    def update(self) -> None:
        """Advance one frame: move, slow down, and bounce off the screen edges."""
        self.x += self.dx
        self.y += self.dy

        if abs(self.velocity) < abs(self.a) * 2:
            self.dx = self.dy = self.velocity = self.a = 0.0
        elif self.velocity:
            factor = (self.velocity + self.a) / self.velocity
            self.dx *= factor
            self.dy *= factor
            self.velocity += self.a

        diameter = 2 * self.radius
        if self.x + diameter + 1 >= SCREEN_WIDTH or self.x <= 1:
            self.dx = -self.dx
        if self.y + diameter + 1 >= SCREEN_HEIGHT or self.y <= 1:
            self.dy = -self.dy

    def _launch(self, dx: float, dy: float, velocity: float) -> None:
        self.a = FRICTION
        self.velocity = velocity
        length = math.hypot(dx, dy)
        if length == 0:
            # No direction to travel in: the ball stays where it is.
            self.dx = self.dy = 0.0
            return
        self.dx = dx * velocity / length
        self.dy = dy * velocity / length

    def toward(self, x, y) -> None:
        """Send the ball at a fixed speed toward a point."""
        self._launch(x - self.x, y - self.y, TOWARD_SPEED)

    def shoot(self, mouse_x, mouse_y) -> None:
        """Shoot away from the mouse, harder the farther the mouse is dragged."""
        cx = self.x + self.radius
        cy = self.y + self.radius
        speed = min(distance(mouse_x, mouse_y, cx, cy) / SHOT_DISTANCE_DIVISOR, MAX_SHOT_SPEED)
        self._launch(cx - mouse_x, cy - mouse_y, speed)


@dataclass
class Arrow:
    """A thin rectangle rotated about its top-left corner to join two points."""

    width: float
    x: float = 0.0
    y: float = 0.0
    height: float = 0.0
    angle: float = 0.0
    color: tuple[int, int, int] = (0, 0, 255)

    def point_to(self, x1, y1, x2, y2) -> None:
        """Stretch the arrow from tail (x2, y2) to head (x1, y1); angle is in radians."""
        vx = x1 - x2
        vy = y1 - y2
        if vy != 0:
            angle = -math.atan(vx / vy)
        elif vx != 0:
            angle = -math.copysign(math.pi / 2, vx)
        else:
            angle = 0.0
        length = math.hypot(vx, vy)
        half_width = self.width / 2
        if vy < 0:
            shift_x = half_width * vy / length
            shift_y = half_width * vx / length
        else:
            shift_x = shift_y = 0.0

        self.angle = angle
        self.height = length
        self.x = (x1 + x2) / 2 + length / 2 * math.sin(angle) + shift_x
        self.y = (y1 + y2) / 2 - length / 2 * math.cos(angle) + shift_y

    def corners(self) -> list[tuple[float, float]]:
        """The four corners of the rotated rectangle, clockwise from its origin."""
        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)
        local = [(0.0, 0.0), (self.width, 0.0), (self.width, self.height), (0.0, self.height)]
        return [(self.x + px * cos_a - py * sin_a, self.y + px * sin_a + py * cos_a) for px, py in local]


@dataclass
class Hole:
    """The target; (x, y) is the top-left corner of its bounding square."""

    radius: float
    x: float = 0.0
    y: float = 0.0
    color: tuple[int, int, int] = _BLACK

    def check_in(self, ball: Ball) -> bool:
        """True when the ball's corner lies within one radius of the hole's corner."""
        return distance(ball.x, ball.y, self.x, self.y) <= self.radius