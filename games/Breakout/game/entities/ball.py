"""Ball entity with per-tick velocity and wall bouncing.

Wall bounces are decided on the projected next position, before moving,
so the ball turns around in the same tick it would have left the
playfield and never overshoots a side wall or the ceiling.
"""

from dataclasses import dataclass

from models import Circle, Rectangle

from ..physics.collision import check_collision, check_wall_collision


@dataclass(frozen=True)
class BallConfig:
    """Ball size and the fixed state it restarts from each level."""

    diameter: int = 15
    start_x: int = 400
    start_y: int = 300
    start_x_speed: int = 2       # pixels per tick
    start_y_speed: int = -2      # negative = up


class Ball:
    """Ball with velocity-based movement and bouncing physics.

    Position (x, y) is the top-left corner of the ball's bounding square.
    """

    def __init__(self, config: BallConfig, playfield_width: int):
        """Initialize ball at its start position and velocity.

        Args:
            config: Ball configuration
            playfield_width: Playfield width in pixels
        """
        self._config = config
        self._max_x = playfield_width - config.diameter
        self.x = config.start_x
        self.y = config.start_y
        self.x_speed = config.start_x_speed
        self.y_speed = config.start_y_speed

    @property
    def diameter(self) -> int:
        """Get ball diameter."""
        return self._config.diameter

    def move(self) -> None:
        """Bounce off walls the ball is about to cross, then advance."""
        hits_side, hits_ceiling = check_wall_collision(
            self.x, self.y, self.x_speed, self.y_speed, self._max_x,
        )
        if hits_side:
            self.x_speed = -self.x_speed
        if hits_ceiling:
            self.y_speed = -self.y_speed

        self.x += self.x_speed
        self.y += self.y_speed

    def check_paddle_collision(self, paddle_bounds: Rectangle) -> bool:
        """Bounce vertically if touching the paddle.

        Only the vertical direction flips and the position is left as is;
        a ball still overlapping the paddle separates on following ticks
        under the reversed velocity.

        Args:
            paddle_bounds: Paddle bounding rectangle

        Returns:
            True if the ball hit the paddle
        """
        if not check_collision(self.bounds(), paddle_bounds):
            return False
        self.reverse_direction_y()
        return True

    def check_brick_collision(self, brick_bounds: Rectangle) -> bool:
        """Check whether the ball touches a brick. Does not change the ball."""
        return check_collision(self.bounds(), brick_bounds)

    def reverse_direction_y(self) -> None:
        """Flip the vertical velocity."""
        self.y_speed = -self.y_speed

    def reset(self) -> None:
        """Return to the fixed start position and velocity."""
        self.x = self._config.start_x
        self.y = self._config.start_y
        self.x_speed = self._config.start_x_speed
        self.y_speed = self._config.start_y_speed

    def bounds(self) -> Rectangle:
        """Get ball bounding box (x, y, diameter, diameter)."""
        return Rectangle(
            x=self.x,
            y=self.y,
            width=self._config.diameter,
            height=self._config.diameter,
        )

    def circle(self) -> Circle:
        """Get the circle to draw."""
        return Circle(x=self.x, y=self.y, diameter=self._config.diameter)
