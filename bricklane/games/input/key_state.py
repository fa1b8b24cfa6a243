"""
Key State - the held/not-held flags a game reads each tick.

Uses dataclass for immutability, like the other per-tick value types.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyState:
    """Immutable snapshot of the logical keys held during one tick.

    Every combination is valid, including both directions at once.

    Attributes:
        left: Move-left key is held
        right: Move-right key is held
    """
    left: bool = False
    right: bool = False

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"KeyState(left={self.left}, right={self.right})"
