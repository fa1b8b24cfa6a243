"""Common GameState enum for all Bricklane games.

Games report one of these states via their `state` property. The
phases are mutually exclusive; GAME_OVER is terminal.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states used by the Bricklane framework.

    States:
        PLAYING: Active gameplay in progress
        LEVEL_COMPLETED: Every brick of the level is gone; the next tick
            either starts the following level or ends the game
        GAME_OVER: Game ended; no transition leaves this state

    Usage in game_mode.py:
        from bricklane.games.game_state import GameState

        class MyGameMode(BaseGame):
            def __init__(self):
                super().__init__()
                self._internal_state = GameState.PLAYING

            def _get_internal_state(self) -> GameState:
                return self._internal_state
    """
    PLAYING = "playing"
    LEVEL_COMPLETED = "level_completed"
    GAME_OVER = "game_over"
