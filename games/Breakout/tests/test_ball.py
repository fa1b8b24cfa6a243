"""Tests for the Ball entity and its collision checks."""

import pytest

from games.Breakout.game.entities.ball import Ball, BallConfig
from models import Rectangle


@pytest.fixture
def ball():
    """Default ball on an 800px playfield."""
    return Ball(BallConfig(), playfield_width=800)


class TestBallInitialization:
    """Test ball start state."""

    def test_start_state(self, ball):
        assert (ball.x, ball.y) == (400, 300)
        assert (ball.x_speed, ball.y_speed) == (2, -2)

    def test_bounds_and_circle(self, ball):
        bounds = ball.bounds()
        assert (bounds.x, bounds.y, bounds.width, bounds.height) == (400, 300, 15, 15)
        circle = ball.circle()
        assert circle.diameter == 15
        assert circle.center.x == 407.5


class TestBallMove:
    """Test movement and projected wall bounces."""

    def test_moves_by_velocity(self, ball):
        ball.move()
        assert (ball.x, ball.y) == (402, 298)

    def test_right_wall_flips_before_moving(self, ball):
        ball.x = 784
        ball.x_speed = 2
        ball.move()
        assert ball.x_speed == -2
        assert ball.x == 782

    def test_right_wall_exact_limit_no_flip(self, ball):
        """Landing exactly on 785 is inside the playfield."""
        ball.x = 783
        ball.move()
        assert ball.x_speed == 2
        assert ball.x == 785

    def test_left_wall_flips(self, ball):
        ball.x = 1
        ball.x_speed = -2
        ball.move()
        assert ball.x_speed == 2
        assert ball.x == 3

    def test_ceiling_flips(self, ball):
        ball.y = 1
        ball.y_speed = -2
        ball.move()
        assert ball.y_speed == 2
        assert ball.y == 3

    def test_no_floor_bounce(self, ball):
        ball.y = 599
        ball.y_speed = 2
        ball.move()
        assert ball.y_speed == 2
        assert ball.y == 601

    def test_bounded_horizontal_travel(self, ball):
        """x never leaves [0, 785] over a long run of bounces."""
        ball.y_speed = 0
        ball.x_speed = 7
        for _ in range(2000):
            ball.move()
            assert 0 <= ball.x <= 785


class TestBallCollisions:
    """Test paddle and brick collision checks."""

    def test_paddle_hit_flips_vertical_only(self, ball):
        ball.x, ball.y = 360, 540
        ball.x_speed, ball.y_speed = 2, 2
        hit = ball.check_paddle_collision(Rectangle(x=350, y=550, width=100, height=20))
        assert hit is True
        assert (ball.x_speed, ball.y_speed) == (2, -2)
        assert (ball.x, ball.y) == (360, 540)

    def test_paddle_touching_edge_counts(self, ball):
        ball.x, ball.y = 360, 535       # bottom edge at 550
        ball.y_speed = 2
        assert ball.check_paddle_collision(Rectangle(x=350, y=550, width=100, height=20))
        assert ball.y_speed == -2

    def test_paddle_miss_leaves_velocity(self, ball):
        ball.y_speed = 2
        assert not ball.check_paddle_collision(Rectangle(x=350, y=550, width=100, height=20))
        assert ball.y_speed == 2

    def test_brick_check_is_pure(self, ball):
        ball.x, ball.y = 20, 20
        brick = Rectangle(x=10, y=10, width=80, height=30)
        assert ball.check_brick_collision(brick) is True
        assert (ball.x, ball.y, ball.x_speed, ball.y_speed) == (20, 20, 2, -2)

    def test_brick_miss(self, ball):
        assert not ball.check_brick_collision(Rectangle(x=10, y=10, width=80, height=30))

    def test_reverse_direction_y(self, ball):
        ball.reverse_direction_y()
        assert ball.y_speed == 2
        ball.reverse_direction_y()
        assert ball.y_speed == -2


class TestBallReset:
    """Test reset to the fixed restart state."""

    def test_reset(self, ball):
        ball.x, ball.y, ball.x_speed, ball.y_speed = 10, 10, -2, 2
        ball.reset()
        assert (ball.x, ball.y, ball.x_speed, ball.y_speed) == (400, 300, 2, -2)
