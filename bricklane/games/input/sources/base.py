"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod

from bricklane.games.input.key_state import KeyState


class InputSource(ABC):
    """Abstract base class for input sources.

    All input backends (keyboard, scripted replay) must implement this interface.
    """

    @abstractmethod
    def poll(self) -> KeyState:
        """Return the keys held as of the last update.

        Returns:
            KeyState for the current tick.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, sampling its device.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass
