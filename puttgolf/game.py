"""The putting game: input state machine, per-frame logic and drawing."""

from __future__ import annotations

import argparse
import enum
import sys

import pygame

from .mapdata import SCREEN_HEIGHT, SCREEN_WIDTH, load_grid, load_layout
from .physics import Arrow, Ball, BallColor, Hole
from .wall import Collision, Wall

BACKGROUND = (11, 112, 38)
TEXT_COLOR = (255, 255, 255)
ARROW_COLOR = (250, 150, 100)
FRAME_RATE = 60
FONT_SIZE = 24


class MouseState(enum.Enum):
    CLICKED = enum.auto()
    NOT_CLICKED = enum.auto()


class PlayerState(enum.Enum):
    AIMING = enum.auto()
    IDLE = enum.auto()


class Game:
    """One course being played; drive it with press/release and one step per frame."""

    def __init__(self, layout):
        self.start = tuple(layout.start)
        self.ball = Ball(10.0)
        self.ball.a = -0.0001
        self.ball.set_color(BallColor.WHITE)
        self.ball.set_position(*self.start)
        self.hole = Hole(15.0, *layout.hole)
        self.arrow = Arrow(5.0, color=ARROW_COLOR)
        self.walls: list[Wall] = list(layout.walls)
        self.strike_number = 0
        self.mouse = MouseState.NOT_CLICKED
        self.player = PlayerState.IDLE
        self.aim = (0, 0)
        self.arrow_visible = False
        self.sunk = False

    def press(self) -> None:
        self.mouse = MouseState.CLICKED

    def release(self) -> None:
        self.mouse = MouseState.NOT_CLICKED

    @property
    def status_text(self) -> str:
        return f"Strike number: {self.strike_number}"

    def step(self, mouse_x, mouse_y) -> None:
        """Run one frame of game logic with the mouse at the given position."""
        self.arrow_visible = False
        if self.player is PlayerState.IDLE:
            if self.mouse is MouseState.CLICKED and not self.ball.is_moving():
                self.player = PlayerState.AIMING
        elif self.player is PlayerState.AIMING:
            if self.mouse is MouseState.CLICKED:
                self.aim = (int(mouse_x), int(mouse_y))
                cx, cy = self.ball.center()
                mx, my = self.aim
                self.arrow.point_to(2 * cx - mx, 2 * cy - my, cx, cy)
            else:
                self.ball.shoot(*self.aim)
                self.player = PlayerState.IDLE
                self.strike_number += 1
            self.arrow_visible = True

        for wall in self.walls:
            hit = wall.check_collision(self.ball.x, self.ball.y, self.ball.radius)
            if hit is Collision.VERTICAL:
                self.ball.dy = -self.ball.dy
                break
            if hit is Collision.HORIZONTAL:
                self.ball.dx = -self.ball.dx
                break

        self.ball.update()

        self.sunk = self.hole.check_in(self.ball)
        if self.sunk:
            self.ball.velocity = 0.0
            self.strike_number = 0

    def draw(self, surface, font) -> None:
        """Render the current frame onto a surface."""
        surface.fill(BACKGROUND)
        if self.arrow_visible:
            pygame.draw.polygon(surface, self.arrow.color, self.arrow.corners())

        r = self.ball.radius
        bx, by = self.start if self.sunk else (self.ball.x, self.ball.y)
        pygame.draw.circle(surface, self.ball.color, (bx + r, by + r), r)

        hr = self.hole.radius
        pygame.draw.circle(surface, self.hole.color, (self.hole.x + hr, self.hole.y + hr), hr)

        surface.blit(font.render(self.status_text, True, TEXT_COLOR), (0, 0))

        for wall in self.walls:
            left, top, width, height = wall.bounds()
            pygame.draw.rect(surface, wall.OUTLINE_COLOR,
                             pygame.Rect(round(left), round(top), round(width), round(height)))
            pygame.draw.rect(surface, wall.FILL_COLOR,
                             pygame.Rect(round(wall.x), round(wall.y), round(wall.width), round(wall.height)))


def run(map_path="map1.png", font_path="arial.ttf") -> None:
    """Open the game window and play the given map until it is closed."""
    layout = load_layout(load_grid(map_path))
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("My window")
        font = pygame.font.Font(font_path, FONT_SIZE)
        clock = pygame.time.Clock()
        game = Game(layout)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    game.press()
                elif event.type == pygame.MOUSEBUTTONUP:
                    game.release()
            if not running:
                break
            game.step(*pygame.mouse.get_pos())
            game.draw(screen, font)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Play a putting course.")
    parser.add_argument("map", nargs="?", default="map1.png", help="map image")
    parser.add_argument("--font", default="arial.ttf", help="font file for the score")
    args = parser.parse_args(argv)
    try:
        run(args.map, args.font)
    except (OSError, ValueError, pygame.error) as exc:
        print(f"cannot start game: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())