"""Breakout physics and collision detection."""

from .collision import (
    check_collision,
    check_wall_collision,
)

__all__ = [
    'check_collision',
    'check_wall_collision',
]
