"""Configuration for Breakout game.

Contains playfield dimensions, entity sizes and speeds, level rules,
tick cadence, and color definitions. Values are per tick, not per second:
the simulation advances on a fixed interval.
"""

from dataclasses import dataclass, field

from models import Color, Resolution

from .game.entities.ball import BallConfig
from .game.entities.brick import BrickConfig
from .game.entities.paddle import PaddleConfig

# Playfield dimensions (fixed contract with every renderer)
SCREEN_WIDTH: int = 800
SCREEN_HEIGHT: int = 600

# Paddle
PADDLE_WIDTH: int = 100
PADDLE_HEIGHT: int = 20
PADDLE_SPEED: int = 5           # pixels/tick
PADDLE_START_X: int = 350       # centered: (800 - 100) / 2
PADDLE_START_Y: int = 550

# Ball
BALL_DIAMETER: int = 15
BALL_START_X: int = 400
BALL_START_Y: int = 300
BALL_START_X_SPEED: int = 2     # pixels/tick
BALL_START_Y_SPEED: int = -2    # negative = up

# Brick grid
BRICK_WIDTH: int = 80
BRICK_HEIGHT: int = 30
BRICK_COLUMNS: int = 10
BRICK_BASE_ROWS: int = 5        # rows = base + level
GRID_OFFSET_X: int = 10
GRID_OFFSET_Y: int = 10

# Rules
MAX_LEVEL: int = 5
POINTS_PER_BRICK: int = 10

# Fixed tick cadence (100 Hz logic)
TICK_MS: int = 10

# Visual
BACKGROUND_COLOR = Color(r=0, g=0, b=0)
PADDLE_COLOR = Color(r=255, g=255, b=255)
BALL_COLOR = Color(r=255, g=255, b=255)
BRICK_COLOR = Color(r=255, g=0, b=0)
HUD_COLOR = Color(r=255, g=255, b=255)

# Screen messages
LEVEL_COMPLETED_MESSAGE: str = "Level Completed!"
GAME_OVER_MESSAGE: str = "Game Over"


@dataclass(frozen=True)
class GameConfig:
    """Every fixed value the simulation needs, shared read-only.

    Components receive the slice they use (paddle, ball, brick) plus the
    playfield; nothing mutates a config after construction.
    """

    playfield: Resolution = field(
        default_factory=lambda: Resolution(width=SCREEN_WIDTH, height=SCREEN_HEIGHT)
    )
    paddle: PaddleConfig = field(default_factory=lambda: PaddleConfig(
        width=PADDLE_WIDTH,
        height=PADDLE_HEIGHT,
        speed=PADDLE_SPEED,
        start_x=PADDLE_START_X,
        start_y=PADDLE_START_Y,
    ))
    ball: BallConfig = field(default_factory=lambda: BallConfig(
        diameter=BALL_DIAMETER,
        start_x=BALL_START_X,
        start_y=BALL_START_Y,
        start_x_speed=BALL_START_X_SPEED,
        start_y_speed=BALL_START_Y_SPEED,
    ))
    brick: BrickConfig = field(default_factory=lambda: BrickConfig(
        width=BRICK_WIDTH,
        height=BRICK_HEIGHT,
        columns=BRICK_COLUMNS,
        base_rows=BRICK_BASE_ROWS,
        offset_x=GRID_OFFSET_X,
        offset_y=GRID_OFFSET_Y,
    ))
    max_level: int = MAX_LEVEL
    points_per_brick: int = POINTS_PER_BRICK
    tick_ms: int = TICK_MS

    @property
    def paddle_max_x(self) -> int:
        """Rightmost paddle x (700 on the default playfield)."""
        return self.playfield.width - self.paddle.width

    @property
    def ball_max_x(self) -> int:
        """Rightmost ball x before it bounces (785 on the default playfield)."""
        return self.playfield.width - self.ball.diameter


DEFAULT_CONFIG = GameConfig()
