"""Collision detection for Breakout.

Every pairwise test (ball-paddle, ball-brick) uses the same closed AABB
overlap, so a ball touching an edge counts as a hit everywhere.
"""

from typing import Tuple

from models import Rectangle


def check_collision(a: Rectangle, b: Rectangle) -> bool:
    """Check whether two bounding boxes overlap or touch.

    Args:
        a: First bounding box
        b: Second bounding box

    Returns:
        True if the boxes share any point, edges included
    """
    return a.intersects(b)


def check_wall_collision(
    x: float,
    y: float,
    x_speed: float,
    y_speed: float,
    max_x: float,
) -> Tuple[bool, bool]:
    """Check the projected next position against the walls.

    Left and right walls bound x to [0, max_x]; the ceiling bounds y at 0.
    There is no floor: leaving through the bottom is not a bounce.

    Args:
        x: Current left edge of the ball
        y: Current top edge of the ball
        x_speed: Horizontal velocity (pixels/tick)
        y_speed: Vertical velocity (pixels/tick)
        max_x: Largest x the ball may occupy (playfield width - diameter)

    Returns:
        Tuple of (hits side wall, hits ceiling)
    """
    next_x = x + x_speed
    next_y = y + y_speed
    hits_side = next_x < 0 or next_x > max_x
    hits_ceiling = next_y < 0
    return hits_side, hits_ceiling
