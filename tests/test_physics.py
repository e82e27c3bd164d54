import math

import pytest

from puttgolf.mapdata import SCREEN_HEIGHT
from puttgolf.physics import Arrow, Ball, BallColor, Hole, distance


def test_distance_pythagorean():
    assert distance(0, 0, 3, 4) == 5.0


def test_distance_is_symmetric():
    assert distance(1.5, -2, 7, 9) == distance(7, 9, 1.5, -2)


def test_new_ball_is_green_and_still():
    ball = Ball(10)
    assert ball.color == BallColor.GREEN.rgb
    assert not ball.is_moving()


@pytest.mark.parametrize("code", list(BallColor))
def test_set_color_known_codes(code):
    ball = Ball(10)
    ball.set_color(int(code))
    assert ball.color == code.rgb


def test_set_color_unknown_code_is_black():
    ball = Ball(10)
    ball.set_color(99)
    assert ball.color == (0, 0, 0)


def test_white_is_white():
    ball = Ball(10)
    ball.set_color(4)
    assert ball.color == (255, 255, 255)


def test_center_truncates():
    ball = Ball(10)
    ball.set_position(100.9, 200.2)
    assert ball.center() == (110, 210)


def test_update_moves_by_velocity_components():
    ball = Ball(10)
    ball.set_position(300, 300)
    ball.dx, ball.dy = 2.0, 3.0
    ball.update()
    assert (ball.x, ball.y) == (302.0, 303.0)
    assert (ball.dx, ball.dy) == (2.0, 3.0)


def test_update_stops_slow_ball():
    ball = Ball(10)
    ball.set_position(300, 300)
    ball.dx, ball.dy, ball.velocity, ball.a = 0.03, 0.04, 0.05, -0.05
    ball.update()
    assert not ball.is_moving()
    assert ball.velocity == 0
    assert ball.a == 0


def test_update_bounces_off_left_edge():
    ball = Ball(10)
    ball.set_position(0.5, 300)
    ball.dx = -1.0
    ball.update()
    assert ball.dx == 1.0


def test_update_bounces_off_bottom_edge():
    ball = Ball(10)
    ball.set_position(300, SCREEN_HEIGHT - 20)
    ball.dy = 5.0
    ball.update()
    assert ball.dy == -5.0


def test_shoot_goes_away_from_mouse():
    ball = Ball(10)
    ball.set_position(300, 300)
    ball.shoot(200, 310)
    assert ball.dx > 0
    assert ball.dy == 0
    assert math.isclose(math.hypot(ball.dx, ball.dy), ball.velocity)


def test_shoot_speed_is_capped():
    ball = Ball(10)
    ball.set_position(300, 300)
    ball.shoot(-5000, -5000)
    assert ball.velocity == 20.0


def test_shoot_then_update_decays_speed():
    ball = Ball(10)
    ball.set_position(300, 300)
    ball.shoot(100, 150)
    before = ball.velocity
    ball.update()
    assert math.isclose(ball.velocity, before - 0.05)
    assert math.isclose(math.hypot(ball.dx, ball.dy), ball.velocity)


def test_shoot_at_center_leaves_ball_still():
    ball = Ball(10)
    ball.set_position(300, 300)
    ball.shoot(310, 310)
    assert not ball.is_moving()


def test_toward_uses_fixed_speed():
    ball = Ball(10)
    ball.set_position(300, 300)
    ball.toward(500, 400)
    assert ball.velocity == 5.0
    assert math.isclose(math.hypot(ball.dx, ball.dy), 5.0)
    assert ball.dx > 0 and ball.dy > 0


def test_arrow_length_matches_points():
    arrow = Arrow(5)
    arrow.point_to(130, 60, 100, 100)
    assert math.isclose(arrow.height, distance(130, 60, 100, 100))


def test_arrow_vertical_upward_is_centred_on_line():
    arrow = Arrow(5)
    arrow.point_to(100, 50, 100, 150)
    assert arrow.angle == 0
    xs = [x for x, _ in arrow.corners()]
    ys = [y for _, y in arrow.corners()]
    assert math.isclose((min(xs) + max(xs)) / 2, 100)
    assert (min(ys), max(ys)) == (50, 150)


def test_arrow_horizontal_angle():
    arrow = Arrow(5)
    arrow.point_to(200, 100, 100, 100)
    assert math.isclose(arrow.angle, -math.pi / 2)


def test_arrow_degenerate_points():
    arrow = Arrow(5)
    arrow.point_to(10, 10, 10, 10)
    assert arrow.height == 0
    assert arrow.angle == 0


def test_hole_check_in_boundary():
    hole = Hole(15, 100, 100)
    ball = Ball(10)
    ball.set_position(100, 115)
    assert hole.check_in(ball)
    ball.set_position(100, 116)
    assert not hole.check_in(ball)