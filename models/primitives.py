"""
Shared primitive data types for the game framework.

This module provides basic geometric and color types used throughout
the codebase: entity bounds, collision tests, render snapshots and skins.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point for positions and coordinates.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> center = Point2D(x=400.0, y=300.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Playfield or display resolution.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> playfield = Resolution(width=800, height=600)
        >>> playfield.aspect_ratio
        1.3333333333333333
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
        a: Alpha/opacity component (0-255), where 255 is fully opaque

    Examples:
        >>> red = Color(r=255, g=0, b=0)
        >>> white = Color(r=255, g=255, b=255)
    """
    r: int
    g: int
    b: int
    a: int = 255  # Default to fully opaque

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame compatibility."""
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha)."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class Rectangle(BaseModel):
    """Immutable rectangle defined by position and dimensions.

    Used for bounding boxes, collision detection, and draw calls.
    Position is at top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=10.0, y=10.0, width=80.0, height=30.0)
        >>> rect.right
        90.0
        >>> rect.contains_point(Point2D(x=50.0, y=25.0))
        True
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def area(self) -> float:
        """Calculate the area of the rectangle."""
        return self.width * self.height

    @computed_field
    @property
    def center(self) -> Point2D:
        """Calculate the center point of the rectangle."""
        return Point2D(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2
        )

    @computed_field
    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.x

    @computed_field
    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.y

    @computed_field
    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point is inside or on the boundary of the rectangle."""
        return (self.left <= point.x <= self.right and
                self.top <= point.y <= self.bottom)

    def intersects(self, other: 'Rectangle') -> bool:
        """Check if this rectangle intersects with another rectangle.

        The test is closed: rectangles that only share an edge or a
        corner intersect.

        Args:
            other: Another rectangle to check intersection with

        Returns:
            True if rectangles overlap or touch

        Examples:
            >>> rect1 = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
            >>> rect2 = Rectangle(x=100.0, y=50.0, width=100.0, height=100.0)
            >>> rect1.intersects(rect2)
            True
        """
        return not (self.right < other.left or
                    self.left > other.right or
                    self.bottom < other.top or
                    self.top > other.bottom)

    def overlaps_interior(self, other: 'Rectangle') -> bool:
        """Check if the two rectangles share any interior area.

        Unlike intersects(), rectangles that merely touch do not overlap.
        """
        return (self.left < other.right and other.left < self.right and
                self.top < other.bottom and other.top < self.bottom)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Return (x, y, width, height) for pygame draw calls."""
        return (self.x, self.y, self.width, self.height)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"


class Circle(BaseModel):
    """Immutable circle described by its bounding square.

    Position is the top-left corner of the bounding square, matching how
    rectangles are positioned, so a circle and its bounds share x/y.

    Attributes:
        x: X coordinate of the bounding square's top-left corner
        y: Y coordinate of the bounding square's top-left corner
        diameter: Circle diameter (must be positive)

    Examples:
        >>> ball = Circle(x=400.0, y=300.0, diameter=15.0)
        >>> ball.center.x
        407.5
    """
    x: float
    y: float
    diameter: float = Field(..., gt=0)

    @computed_field
    @property
    def radius(self) -> float:
        """Half the diameter."""
        return self.diameter / 2

    @computed_field
    @property
    def center(self) -> Point2D:
        """Center point of the circle."""
        return Point2D(x=self.x + self.radius, y=self.y + self.radius)

    def bounds(self) -> Rectangle:
        """Axis-aligned bounding square."""
        return Rectangle(x=self.x, y=self.y, width=self.diameter, height=self.diameter)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Circle(x={self.x:.2f}, y={self.y:.2f}, d={self.diameter:.2f})"
