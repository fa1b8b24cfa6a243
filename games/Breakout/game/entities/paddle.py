"""Paddle entity driven by held left/right keys.

The paddle moves a fixed distance per tick for each held direction and
never leaves the playfield.
"""

from dataclasses import dataclass

from models import Rectangle


@dataclass(frozen=True)
class PaddleConfig:
    """Paddle size, speed and starting position."""

    width: int = 100
    height: int = 20
    speed: int = 5          # pixels per tick
    start_x: int = 350
    start_y: int = 550


class Paddle:
    """Horizontal paddle at the bottom of the playfield.

    Position is the top-left corner. x stays within
    [0, playfield_width - width].
    """

    def __init__(self, config: PaddleConfig, playfield_width: int):
        """Initialize paddle at its start position.

        Args:
            config: Paddle configuration
            playfield_width: Playfield width in pixels
        """
        self._config = config
        self._max_x = playfield_width - config.width
        self.x = config.start_x
        self.y = config.start_y

    @property
    def width(self) -> int:
        """Get paddle width."""
        return self._config.width

    @property
    def height(self) -> int:
        """Get paddle height."""
        return self._config.height

    @property
    def speed(self) -> int:
        """Get paddle speed in pixels per tick."""
        return self._config.speed

    def move(self, left_held: bool, right_held: bool) -> None:
        """Move one tick's worth for each held direction.

        The two directions are checked independently, so holding both
        moves left then right and leaves the paddle where it was, except
        at an edge where only one of the steps is allowed.

        Args:
            left_held: Move-left key is held
            right_held: Move-right key is held
        """
        if left_held and self.x > 0:
            self.x -= self._config.speed
        if right_held and self.x < self._max_x:
            self.x += self._config.speed

    def bounds(self) -> Rectangle:
        """Get paddle bounding rectangle."""
        return Rectangle(
            x=self.x,
            y=self.y,
            width=self._config.width,
            height=self._config.height,
        )

    def reset(self) -> None:
        """Return to the start position (center bottom)."""
        self.x = self._config.start_x
        self.y = self._config.start_y
