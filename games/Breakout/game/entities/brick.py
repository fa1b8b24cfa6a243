"""Brick entity.

A brick has no hit points or destroyed flag: it is alive exactly as long
as it is in the BrickField, and destroying it means removing it.
"""

from dataclasses import dataclass

from models import Rectangle


@dataclass(frozen=True)
class BrickConfig:
    """Brick size and grid layout rules."""

    width: int = 80
    height: int = 30
    columns: int = 10
    base_rows: int = 5      # rows on level n = base_rows + n
    offset_x: int = 10
    offset_y: int = 10


class Brick:
    """A static rectangle in the brick grid.

    Bricks compare and hash by identity, so two bricks are only ever the
    same brick if they are the same object.
    """

    __slots__ = ('_x', '_y', '_width', '_height')

    def __init__(self, x: int, y: int, width: int, height: int):
        """Initialize brick.

        Args:
            x: Left edge X position
            y: Top edge Y position
            width: Brick width
            height: Brick height
        """
        self._x = x
        self._y = y
        self._width = width
        self._height = height

    @property
    def x(self) -> int:
        """Get left edge X position."""
        return self._x

    @property
    def y(self) -> int:
        """Get top edge Y position."""
        return self._y

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def bounds(self) -> Rectangle:
        """Get bounding rectangle (x, y, width, height)."""
        return Rectangle(x=self._x, y=self._y, width=self._width, height=self._height)

    def __repr__(self) -> str:
        return f"Brick(x={self._x}, y={self._y})"
