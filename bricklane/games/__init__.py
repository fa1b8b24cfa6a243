"""
Bricklane Game Framework.

Provides:
- base_game: BaseGame class that all games should inherit from
- game_state: Standard GameState enum
- input: Held-key state and the sources that produce it
"""

from bricklane.games.game_state import GameState
from bricklane.games.base_game import BaseGame

__all__ = [
    'GameState',
    'BaseGame',
]
