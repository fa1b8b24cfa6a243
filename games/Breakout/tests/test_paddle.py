"""Tests for the Paddle entity."""

import itertools
import random

import pytest

from games.Breakout.game.entities.paddle import Paddle, PaddleConfig


@pytest.fixture
def paddle():
    """Default paddle on an 800px playfield."""
    return Paddle(PaddleConfig(), playfield_width=800)


class TestPaddleInitialization:
    """Test paddle start state."""

    def test_starts_center_bottom(self, paddle):
        assert paddle.x == 350
        assert paddle.y == 550

    def test_dimensions(self, paddle):
        assert paddle.width == 100
        assert paddle.height == 20
        assert paddle.speed == 5

    def test_bounds(self, paddle):
        bounds = paddle.bounds()
        assert (bounds.x, bounds.y, bounds.width, bounds.height) == (350, 550, 100, 20)


class TestPaddleMovement:
    """Test left/right movement and clamping."""

    def test_move_left(self, paddle):
        paddle.move(left_held=True, right_held=False)
        assert paddle.x == 345

    def test_move_right(self, paddle):
        paddle.move(left_held=False, right_held=True)
        assert paddle.x == 355

    def test_no_keys_no_motion(self, paddle):
        paddle.move(False, False)
        assert paddle.x == 350

    def test_both_keys_cancel_out(self, paddle):
        """Both directions apply independently, netting zero in open space."""
        paddle.move(True, True)
        assert paddle.x == 350

    def test_stops_at_left_wall(self, paddle):
        for _ in range(200):
            paddle.move(True, False)
        assert paddle.x == 0

    def test_stops_at_right_wall(self, paddle):
        for _ in range(200):
            paddle.move(False, True)
        assert paddle.x == 700

    def test_both_keys_at_left_wall_moves_right(self, paddle):
        """At x=0 the left step is refused but the right step still applies."""
        paddle.x = 0
        paddle.move(True, True)
        assert paddle.x == 5

    def test_both_keys_at_right_wall_stays(self, paddle):
        """At x=700 left moves to 695, then right is allowed back to 700."""
        paddle.x = 700
        paddle.move(True, True)
        assert paddle.x == 700

    def test_clamped_for_every_input_sequence(self, paddle):
        """x stays in [0, 700] under arbitrary held-key sequences."""
        rng = random.Random(1234)
        combos = list(itertools.product([False, True], repeat=2))
        for _ in range(5000):
            left, right = rng.choice(combos)
            paddle.move(left, right)
            assert 0 <= paddle.x <= 700


class TestPaddleReset:
    """Test reset repositions without recreating."""

    def test_reset_returns_to_start(self, paddle):
        for _ in range(30):
            paddle.move(True, False)
        paddle.reset()
        assert (paddle.x, paddle.y) == (350, 550)
