"""Tests for the primitive pydantic models."""

import pytest
from pydantic import ValidationError

from models import Circle, Color, Point2D, Rectangle, Resolution


class TestRectangle:
    """Test rectangle geometry and intersection."""

    def test_edges(self):
        rect = Rectangle(x=10, y=10, width=80, height=30)
        assert (rect.left, rect.right, rect.top, rect.bottom) == (10, 90, 10, 40)
        assert rect.center == Point2D(x=50, y=25)

    def test_non_positive_size_rejected(self):
        with pytest.raises(ValidationError):
            Rectangle(x=0, y=0, width=0, height=10)

    def test_overlap_intersects(self):
        a = Rectangle(x=0, y=0, width=100, height=100)
        b = Rectangle(x=50, y=50, width=100, height=100)
        assert a.intersects(b)
        assert b.intersects(a)

    def test_touching_edges_intersect(self):
        a = Rectangle(x=10, y=10, width=80, height=30)
        b = Rectangle(x=90, y=10, width=80, height=30)
        assert a.intersects(b)
        assert not a.overlaps_interior(b)

    def test_separate_rectangles(self):
        a = Rectangle(x=0, y=0, width=10, height=10)
        b = Rectangle(x=11, y=0, width=10, height=10)
        assert not a.intersects(b)

    def test_as_tuple(self):
        assert Rectangle(x=1, y=2, width=3, height=4).as_tuple() == (1, 2, 3, 4)


class TestCircle:
    """Test circle helpers."""

    def test_center_and_bounds(self):
        ball = Circle(x=400, y=300, diameter=15)
        assert ball.radius == 7.5
        assert ball.center == Point2D(x=407.5, y=307.5)
        assert ball.bounds() == Rectangle(x=400, y=300, width=15, height=15)

    def test_diameter_must_be_positive(self):
        with pytest.raises(ValidationError):
            Circle(x=0, y=0, diameter=0)


class TestColorAndResolution:
    """Test color validation and resolution helpers."""

    def test_rgb_tuple(self):
        assert Color(r=255, g=0, b=0).as_rgb_tuple == (255, 0, 0)

    def test_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)

    def test_resolution(self):
        playfield = Resolution(width=800, height=600)
        assert playfield.aspect_ratio == pytest.approx(4 / 3)
        with pytest.raises(ValidationError):
            Resolution(width=0, height=600)
