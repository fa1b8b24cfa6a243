"""Breakout - paddle, ball and five levels of bricks.

The game mode owns the paddle, ball, brick field, score, level and phase,
and advances them one fixed tick at a time. Rendering reads a frozen
snapshot taken after the tick.
"""

from typing import Dict, List, Optional

import pygame

from bricklane.games import BaseGame, GameState
from bricklane.games.input import KeyState
from bricklane.logging import get_logger
from models import RenderSnapshot

from .config import (
    DEFAULT_CONFIG,
    GAME_OVER_MESSAGE,
    LEVEL_COMPLETED_MESSAGE,
    GameConfig,
)
from .game.entities import Ball, Brick, BrickField, Paddle
from .game.skins import BreakoutSkin, GeometricSkin

log = get_logger('breakout')


class BreakoutMode(BaseGame):
    """Breakout game mode.

    Phases:
    - PLAYING: paddle and ball move, bricks are hit
    - LEVEL_COMPLETED: shown for one tick, then the next level starts
      (or the game ends after the last level)
    - GAME_OVER: terminal; ticks change nothing
    """

    # Game metadata
    NAME = "Breakout"
    DESCRIPTION = "Clear five increasingly dense brick walls with one ball."
    VERSION = "1.0.0"
    AUTHOR = "Bricklane Team"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--start-level',
            'type': int,
            'default': 1,
            'choices': [1, 2, 3, 4, 5],
            'help': 'Level to start on'
        },
        {
            'name': '--skin',
            'type': str,
            'default': 'geometric',
            'choices': ['geometric'],
            'help': 'Visual skin'
        },
    ]

    # Skin registry
    SKINS: Dict[str, type] = {
        'geometric': GeometricSkin,
    }

    def __init__(
        self,
        start_level: int = 1,
        skin: str = 'geometric',
        config: Optional[GameConfig] = None,
        **kwargs,
    ):
        """Initialize Breakout game.

        Args:
            start_level: Level to begin (and restart) on, 1..max_level
            skin: Visual skin to use
            config: Fixed game constants (defaults to the standard 800x600 game)
            **kwargs: Extra driver options, ignored

        Raises:
            ValueError: If start_level is outside 1..max_level
        """
        self._config = config or DEFAULT_CONFIG
        if not 1 <= start_level <= self._config.max_level:
            raise ValueError(
                f'start_level must be in [1, {self._config.max_level}], got {start_level}'
            )
        self._start_level = start_level

        skin_class = self.SKINS.get(skin, GeometricSkin)
        self._skin: BreakoutSkin = skin_class()

        playfield_width = self._config.playfield.width
        self._paddle = Paddle(self._config.paddle, playfield_width)
        self._ball = Ball(self._config.ball, playfield_width)
        self._brick_field = BrickField(self._config.brick)

        self._keys = KeyState()
        self._init_game()

    def _init_game(self) -> None:
        """Put every entity and counter in its starting state."""
        self._internal_state = GameState.PLAYING
        self._score = 0
        self._level = self._start_level
        self._paddle.reset()
        self._ball.reset()
        self._brick_field.initialize(self._level)
        log.info("Game started on level %d with %d bricks",
                 self._level, len(self._brick_field))

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def config(self) -> GameConfig:
        """Game constants in use."""
        return self._config

    @property
    def level(self) -> int:
        """Current level number (1-based)."""
        return self._level

    @property
    def paddle(self) -> Paddle:
        return self._paddle

    @property
    def ball(self) -> Ball:
        return self._ball

    @property
    def brick_field(self) -> BrickField:
        return self._brick_field

    def _get_internal_state(self) -> GameState:
        """Get current game phase."""
        return self._internal_state

    def get_score(self) -> int:
        """Get current score."""
        return self._score

    # =========================================================================
    # Simulation
    # =========================================================================

    def advance_tick(
        self,
        left_held: bool,
        right_held: bool,
        playfield_height: Optional[int] = None,
    ) -> None:
        """Advance the game by one fixed tick.

        Args:
            left_held: Move-left key held this tick
            right_held: Move-right key held this tick
            playfield_height: Ball y beyond which the game is lost
                (defaults to the configured playfield height)
        """
        if self._internal_state == GameState.GAME_OVER:
            return

        if self._internal_state == GameState.LEVEL_COMPLETED:
            self._finish_level()
            return

        if playfield_height is None:
            playfield_height = self._config.playfield.height

        self._paddle.move(left_held, right_held)
        self._ball.move()
        self._ball.check_paddle_collision(self._paddle.bounds())

        self._handle_brick_collisions()

        if self._brick_field.is_empty():
            self._internal_state = GameState.LEVEL_COMPLETED
            log.info("Level %d completed, score %d", self._level, self._score)

        if self._ball.y > playfield_height:
            self._internal_state = GameState.GAME_OVER
            log.info("Ball lost on level %d. Final score: %d", self._level, self._score)

    def _handle_brick_collisions(self) -> None:
        """Score and remove every brick the ball touches this tick.

        Each hit flips the ball's vertical direction on its own, so an even
        number of simultaneous hits leaves the direction unchanged.
        """
        hit: List[Brick] = []
        for brick in self._brick_field:
            if self._ball.check_brick_collision(brick.bounds()):
                hit.append(brick)
                self._ball.reverse_direction_y()
                self._score += self._config.points_per_brick
                log.debug("Brick destroyed at (%d, %d), score %d",
                          brick.x, brick.y, self._score)

        self._brick_field.remove_all(hit)

    def _finish_level(self) -> None:
        """Leave LEVEL_COMPLETED: next level, or game over after the last."""
        if self._level >= self._config.max_level:
            self._internal_state = GameState.GAME_OVER
            log.info("All %d levels cleared. Final score: %d",
                     self._config.max_level, self._score)
            return

        self._level += 1
        self._internal_state = GameState.PLAYING
        self._ball.reset()
        self._paddle.reset()
        self._brick_field.initialize(self._level)
        log.info("Level %d started with %d bricks", self._level, len(self._brick_field))

    def snapshot(self) -> RenderSnapshot:
        """Read-only view of the state after the last completed tick."""
        if self._internal_state == GameState.PLAYING:
            return RenderSnapshot(
                phase=self._internal_state,
                score=self._score,
                level=self._level,
                paddle=self._paddle.bounds(),
                ball=self._ball.circle(),
                bricks=tuple(brick.bounds() for brick in self._brick_field),
            )

        if self._internal_state == GameState.LEVEL_COMPLETED:
            message = LEVEL_COMPLETED_MESSAGE
        else:
            message = GAME_OVER_MESSAGE
        return RenderSnapshot(
            phase=self._internal_state,
            score=self._score,
            level=self._level,
            message=message,
        )

    # =========================================================================
    # BaseGame interface
    # =========================================================================

    def handle_input(self, keys: KeyState) -> None:
        """Record the keys held for the next tick.

        Args:
            keys: Held flags from the input source
        """
        self._keys = keys

    def update(self, dt: float) -> None:
        """Advance one tick using the most recently recorded keys.

        Args:
            dt: Tick length in seconds; movement is per tick, so unused
        """
        self.advance_tick(self._keys.left, self._keys.right)

    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        self._skin.render(self.snapshot(), screen)

    def reset(self) -> None:
        """Reset game to initial state."""
        super().reset()
        self._keys = KeyState()
        self._init_game()
        log.info("Game reset")
