import pytest

from puttgolf.wall import Collision, Wall


def test_collision_codes_match_source():
    wall = Wall(100, 100, 50, 50)
    assert int(wall.check_collision(400, 400, 10)) == 0
    assert int(wall.check_collision(108, 130, 10)) == 1
    assert int(wall.check_collision(78, 108, 10)) == 2


def test_default_wall_size():
    wall = Wall()
    assert (wall.width, wall.height) == (100.0, 20.0)


def test_bounds_include_outline():
    wall = Wall(10, 20, 30, 40)
    t = Wall.OUTLINE_THICKNESS
    assert wall.bounds() == (10 - t, 20 - t, 30 + 2 * t, 40 + 2 * t)


def test_move_and_resize_truncate():
    wall = Wall(0, 0, 5, 5)
    wall.move_to(3.9, 7.2)
    wall.resize(11.8, 4.1)
    assert (wall.x, wall.y, wall.width, wall.height) == (3.0, 7.0, 11.0, 4.0)


def test_contains_is_half_open():
    wall = Wall(10, 10, 20, 20)
    left, top, width, height = wall.bounds()
    assert wall.contains(left, top)
    assert not wall.contains(left + width, top)
    assert not wall.contains(left, top + height)
    assert wall.contains(left + width - 0.5, top + height - 0.5)


@pytest.fixture
def block():
    return Wall(100, 100, 50, 50)


def test_top_point_inside_is_vertical(block):
    assert block.check_collision(108, 130, 10) is Collision.VERTICAL


def test_right_point_inside_is_horizontal(block):
    assert block.check_collision(78, 108, 10) is Collision.HORIZONTAL


def test_far_ball_no_collision(block):
    assert block.check_collision(400, 400, 10) is Collision.NONE
    assert not block.check_collision(0, 0, 10)


def test_ball_left_of_wall_edge_just_misses(block):
    left, _, _, _ = block.bounds()
    # right-most point of the ball sits exactly one pixel before the bounds
    r = int(10 + 2)
    ball_x = left - 1 - 2 * r
    assert block.check_collision(ball_x, 108, 10) is Collision.NONE