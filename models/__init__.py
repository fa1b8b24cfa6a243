"""
Unified models library for Bricklane games.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric and color types (Point2D, Resolution, Color,
  Rectangle, Circle)
- Breakout: Game-specific models for Breakout (RenderSnapshot)

Usage:
    >>> from models import Rectangle, Resolution
    >>> from models.breakout import RenderSnapshot
"""

from .primitives import (
    Point2D,
    Resolution,
    Color,
    Rectangle,
    Circle,
)

from .breakout import RenderSnapshot

__all__ = [
    'Point2D',
    'Resolution',
    'Color',
    'Rectangle',
    'Circle',
    'RenderSnapshot',
]
