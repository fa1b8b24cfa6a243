"""
Keyboard Input Source - arrow keys held on the pygame keyboard.
"""
from typing import Sequence

import pygame

from bricklane.games.input.key_state import KeyState
from bricklane.games.input.sources.base import InputSource


class KeyboardInputSource(InputSource):
    """Samples pygame's pressed-key table once per update.

    Key-down/up events are left on the event queue; the driver still
    handles quit and restart keys itself.
    """

    def __init__(
        self,
        left_keys: Sequence[int] = (pygame.K_LEFT,),
        right_keys: Sequence[int] = (pygame.K_RIGHT,),
    ):
        """Initialize the keyboard source.

        Args:
            left_keys: pygame key codes that count as move-left
            right_keys: pygame key codes that count as move-right
        """
        self._left_keys = tuple(left_keys)
        self._right_keys = tuple(right_keys)
        self._state = KeyState()

    def poll(self) -> KeyState:
        """Get the key state sampled at the last update."""
        return self._state

    def update(self, dt: float) -> None:
        """Read the currently held keys."""
        pressed = pygame.key.get_pressed()
        self._state = KeyState(
            left=any(pressed[key] for key in self._left_keys),
            right=any(pressed[key] for key in self._right_keys),
        )
