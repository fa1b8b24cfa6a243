"""
Input source implementations.
"""

from bricklane.games.input.sources.base import InputSource
from bricklane.games.input.sources.keyboard import KeyboardInputSource
from bricklane.games.input.sources.scripted import ScriptedInputSource

__all__ = ['InputSource', 'KeyboardInputSource', 'ScriptedInputSource']
