"""
Input abstraction layer for Bricklane games.

Games only ever see a KeyState per tick; where it comes from (keyboard,
a recorded script, a test) is the input source's business.
"""

from bricklane.games.input.key_state import KeyState
from bricklane.games.input.input_manager import InputManager

__all__ = ['KeyState', 'InputManager']
