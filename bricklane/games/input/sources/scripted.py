"""
Scripted Input Source - replays a fixed sequence of key states.

Used for headless runs and tests, where ticks are driven directly.
"""
from collections import deque
from typing import Iterable

from bricklane.games.input.key_state import KeyState
from bricklane.games.input.sources.base import InputSource


class ScriptedInputSource(InputSource):
    """Yields one queued KeyState per update, then no keys held."""

    def __init__(self, states: Iterable[KeyState] = ()):
        self._queue = deque(states)
        self._state = KeyState()

    @property
    def remaining(self) -> int:
        """Number of queued states not yet replayed."""
        return len(self._queue)

    def push(self, state: KeyState, repeat: int = 1) -> None:
        """Queue a state for the next `repeat` updates."""
        self._queue.extend([state] * repeat)

    def poll(self) -> KeyState:
        return self._state

    def update(self, dt: float) -> None:
        self._state = self._queue.popleft() if self._queue else KeyState()
