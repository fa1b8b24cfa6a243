"""
Bricklane

Small framework for fixed-tick arcade games: the BaseGame contract,
the standard game states, keyboard input plumbing and logging.
"""

__all__ = ['games', 'logging']
