"""
Input Manager - Reads held keys from the active source.
"""
from typing import Optional

from bricklane.games.input.key_state import KeyState
from bricklane.games.input.sources.base import InputSource


class InputManager:
    """Manages input sources and collects key state.

    The InputManager allows drivers to switch between input sources
    (keyboard, scripted replay) at runtime without changing game logic.
    With no source attached every tick reads as no keys held.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source

    def set_source(self, source: InputSource) -> None:
        """Set the input source."""
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        """Get the currently active input source."""
        return self._source

    def has_source(self) -> bool:
        """Check if an input source is currently active."""
        return self._source is not None

    def update(self, dt: float) -> None:
        """Update the active input source.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is not None:
            self._source.update(dt)

    def get_keys(self) -> KeyState:
        """Get the key state for the current tick."""
        if self._source is None:
            return KeyState()
        return self._source.poll()
