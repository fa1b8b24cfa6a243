"""Breakout game entities."""

from .paddle import Paddle, PaddleConfig
from .ball import Ball, BallConfig
from .brick import Brick, BrickConfig
from .brick_field import BrickField

__all__ = [
    'Paddle', 'PaddleConfig',
    'Ball', 'BallConfig',
    'Brick', 'BrickConfig',
    'BrickField',
]
