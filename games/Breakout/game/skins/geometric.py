"""Geometric skin - flat shapes on black, the classic look."""

from typing import Optional

import pygame

from models import Circle, Rectangle

from .base import BreakoutSkin
from ...config import (
    BACKGROUND_COLOR,
    BALL_COLOR,
    BRICK_COLOR,
    HUD_COLOR,
    PADDLE_COLOR,
)


class GeometricSkin(BreakoutSkin):
    """Renders game using simple geometric shapes.

    - Paddle: White rectangle
    - Ball: White circle
    - Bricks: Red rectangles
    - Score top-left, level top-right
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes: white paddle and ball, red bricks"

    HUD_MARGIN = 10

    def __init__(self):
        """Initialize geometric skin."""
        self._font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> pygame.font.Font:
        """Ensure font is initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 36)
        return self._font

    def render_background(self, screen: pygame.Surface) -> None:
        screen.fill(BACKGROUND_COLOR.as_rgb_tuple)

    def render_paddle(self, paddle: Rectangle, screen: pygame.Surface) -> None:
        """Render paddle as a filled rectangle."""
        pygame.draw.rect(screen, PADDLE_COLOR.as_rgb_tuple, paddle.as_tuple())

    def render_ball(self, ball: Circle, screen: pygame.Surface) -> None:
        """Render ball as a filled circle inside its bounding square."""
        center = ball.center
        pygame.draw.circle(
            screen,
            BALL_COLOR.as_rgb_tuple,
            (int(center.x), int(center.y)),
            int(ball.radius),
        )

    def render_brick(self, brick: Rectangle, screen: pygame.Surface) -> None:
        """Render brick as a filled rectangle."""
        pygame.draw.rect(screen, BRICK_COLOR.as_rgb_tuple, brick.as_tuple())

    def render_hud(self, screen: pygame.Surface, score: int, level: int) -> None:
        """Render score (top left) and level (top right)."""
        font = self._ensure_font()

        score_text = font.render(f"Score: {score}", True, HUD_COLOR.as_rgb_tuple)
        screen.blit(score_text, (self.HUD_MARGIN, self.HUD_MARGIN))

        level_text = font.render(f"Level: {level}", True, HUD_COLOR.as_rgb_tuple)
        level_rect = level_text.get_rect()
        level_rect.topright = (screen.get_width() - self.HUD_MARGIN, self.HUD_MARGIN)
        screen.blit(level_text, level_rect)

    def render_message(self, screen: pygame.Surface, message: str, score: int) -> None:
        """Render the screen message with the score beneath it, centered."""
        font = self._ensure_font()
        center_x = screen.get_width() // 2
        center_y = screen.get_height() // 2

        text = font.render(message, True, HUD_COLOR.as_rgb_tuple)
        screen.blit(text, text.get_rect(center=(center_x, center_y)))

        score_text = font.render(f"Score: {score}", True, HUD_COLOR.as_rgb_tuple)
        screen.blit(score_text, score_text.get_rect(center=(center_x, center_y + 40)))
