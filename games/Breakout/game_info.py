"""Breakout - Game Info.

Factory used by drivers to build the game without importing its internals.
"""


def get_game_mode(**kwargs):
    """Factory function to create Breakout game instance.

    Args:
        **kwargs: Game configuration options (from CLI)

    Returns:
        BreakoutMode instance
    """
    from games.Breakout.game_mode import BreakoutMode
    return BreakoutMode(**kwargs)
