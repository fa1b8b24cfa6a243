"""
Breakout-specific data models.

The render snapshot is the only thing a renderer reads from the
simulation: a frozen projection taken after a tick has fully completed.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from bricklane.games.game_state import GameState
from .primitives import Circle, Rectangle


class RenderSnapshot(BaseModel):
    """Immutable read-only view of the game after one tick.

    While PLAYING the snapshot carries the geometry to draw. On the
    LEVEL_COMPLETED and GAME_OVER screens it carries only the message and
    the score; no entities are drawn there.

    Attributes:
        phase: Game phase after the tick
        score: Score so far (non-negative)
        level: Current level number (1-based)
        message: Screen text for the non-playing phases
        paddle: Paddle bounds (PLAYING only)
        ball: Ball circle (PLAYING only)
        bricks: Bounds of every live brick, in field order (PLAYING only)

    Examples:
        >>> snap = RenderSnapshot(phase=GameState.GAME_OVER, score=120,
        ...                       level=2, message="Game Over")
        >>> snap.has_geometry
        False
    """
    phase: GameState
    score: int = Field(..., ge=0)
    level: int = Field(..., ge=1)
    message: Optional[str] = None
    paddle: Optional[Rectangle] = None
    ball: Optional[Circle] = None
    bricks: Tuple[Rectangle, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def check_phase_contents(self) -> 'RenderSnapshot':
        """Geometry only while playing; a message only on the other screens."""
        if self.phase == GameState.PLAYING:
            if self.paddle is None or self.ball is None:
                raise ValueError('PLAYING snapshot requires paddle and ball geometry')
            if self.message is not None:
                raise ValueError('PLAYING snapshot carries no message')
        else:
            if self.paddle is not None or self.ball is not None or self.bricks:
                raise ValueError(f'{self.phase.value} snapshot carries no geometry')
            if not self.message:
                raise ValueError(f'{self.phase.value} snapshot requires a message')
        return self

    @computed_field
    @property
    def has_geometry(self) -> bool:
        """True when there are entities to draw."""
        return self.phase == GameState.PLAYING
