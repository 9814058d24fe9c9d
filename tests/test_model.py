"""
Tests for the figure model objects.

These tests verify:
    - Figure creation and immutability
    - Shared value / figure_type accessors
    - Per-figure perimeter and area formulas
"""

import dataclasses
import math

import pytest
from shapestore.model import (
    Circle,
    Figure,
    Square,
    FigureType,
    make_figure,
    perimeter,
    area,
)


class TestCircle:
    """Test Circle objects."""

    def test_create_circle(self):
        """Should store the radius."""
        c = Circle(radius=1.5)
        assert c.radius == 1.5
        assert c.value == 1.5
        assert c.figure_type is FigureType.CIRCLE

    def test_circle_is_immutable(self):
        """Should reject attribute assignment."""
        c = Circle(2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.radius = 3.0

    def test_circle_formulas(self):
        """Perimeter is 2*pi*r and area is pi*r^2."""
        c = Circle(3.0)
        assert perimeter(c) == 2 * math.pi * 3.0
        assert area(c) == pytest.approx(math.pi * 9.0)


class TestSquare:
    """Test Square objects."""

    def test_create_square(self):
        """Should store the side."""
        s = Square(side=2.0)
        assert s.side == 2.0
        assert s.value == 2.0
        assert s.figure_type is FigureType.SQUARE

    def test_square_formulas(self):
        """Perimeter is 4*s and area is s^2."""
        s = Square(2.5)
        assert perimeter(s) == 10.0
        assert area(s) == 6.25

    def test_equality_is_by_value(self):
        """Two squares with equal sides compare equal; shapes never do."""
        assert Square(1.0) == Square(1.0)
        assert Square(1.0) != Circle(1.0)


class TestFigureType:
    """Test FigureType codes and dispatch."""

    def test_console_codes(self):
        assert FigureType("1") is FigureType.SQUARE
        assert FigureType("2") is FigureType.CIRCLE

    def test_make_figure(self):
        assert make_figure(FigureType.CIRCLE, 1.0) == Circle(1.0)
        assert make_figure(FigureType.SQUARE, 1.0) == Square(1.0)

    def test_unknown_figure_rejected(self):
        """Formulas only accept the closed Circle/Square set."""
        with pytest.raises(TypeError):
            perimeter("not a figure")
        with pytest.raises(TypeError):
            area(object())


def test_figure_base_is_abstract():
    """Only Circle and Square can be instantiated."""
    with pytest.raises(TypeError):
        Figure()
