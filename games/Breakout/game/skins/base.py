"""Base class for Breakout game skins.

Skins handle ALL rendering - the game only manages state and hands the
skin a finished RenderSnapshot once per tick.
"""

from abc import ABC, abstractmethod

import pygame

from models import Circle, Rectangle, RenderSnapshot


class BreakoutSkin(ABC):
    """Base class for game skins.

    render() walks a snapshot in draw order: background, bricks, paddle,
    ball, HUD. Non-playing snapshots draw the background and the screen
    message only.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def render(self, snapshot: RenderSnapshot, screen: pygame.Surface) -> None:
        """Draw one snapshot.

        Args:
            snapshot: State to present
            screen: Pygame surface to draw on
        """
        self.render_background(screen)

        if not snapshot.has_geometry:
            self.render_message(screen, snapshot.message or "", snapshot.score)
            return

        for brick in snapshot.bricks:
            self.render_brick(brick, screen)
        self.render_paddle(snapshot.paddle, screen)
        self.render_ball(snapshot.ball, screen)
        self.render_hud(screen, snapshot.score, snapshot.level)

    @abstractmethod
    def render_background(self, screen: pygame.Surface) -> None:
        """Clear the screen."""
        pass

    @abstractmethod
    def render_paddle(self, paddle: Rectangle, screen: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle bounds
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: Circle, screen: pygame.Surface) -> None:
        """Render the ball.

        Args:
            ball: Ball circle
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_brick(self, brick: Rectangle, screen: pygame.Surface) -> None:
        """Render one live brick.

        Args:
            brick: Brick bounds
            screen: Pygame surface to draw on
        """
        pass

    def render_hud(self, screen: pygame.Surface, score: int, level: int) -> None:
        """Render the heads-up display (score and level).

        Args:
            screen: Pygame surface to draw on
            score: Current score
            level: Current level number
        """
        pass

    def render_message(self, screen: pygame.Surface, message: str, score: int) -> None:
        """Render a level-complete or game-over screen.

        Args:
            screen: Pygame surface to draw on
            message: Text to show
            score: Score to show under the message
        """
        pass
