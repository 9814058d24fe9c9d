"""
Core Figure Model Objects

Defines the fundamental data structures of the figure store.

These are pure data classes representing:
    - Circles (one radius)
    - Squares (one side)

ARCHITECTURAL RULE:
    These objects:
        - Are immutable (frozen=True)
        - Do NOT validate themselves (validation belongs in the store)
        - Do NOT print or log on construction
        - Form a CLOSED set: every computation matches Circle and Square
          exhaustively and rejects anything else
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class FigureType(Enum):
    """
    Figure kinds, keyed by the code typed at the console.

    Keep this in sync with the Figure subclasses below.
    """

    SQUARE = "1"
    CIRCLE = "2"


class Figure(ABC):
    """
    Base class for all stored figures.

    This is intentionally minimal.
    It exists to provide type-safety for the figure variant.

    DO NOT:
        - Add new subclasses without updating perimeter() and area()
        - Add presentation logic here (belongs in the console layer)
    """

    @property
    @abstractmethod
    def value(self) -> float:
        """The single defining numeric parameter (radius or side)."""

    @property
    @abstractmethod
    def figure_type(self) -> FigureType:
        """FigureType tag of this shape."""


@dataclass(frozen=True)
class Circle(Figure):
    """
    A circle described by its radius.

    Properties:
        radius: Circle radius (positive once stored)
    """

    radius: float

    @property
    def value(self) -> float:
        return self.radius

    @property
    def figure_type(self) -> FigureType:
        return FigureType.CIRCLE


@dataclass(frozen=True)
class Square(Figure):
    """
    A square described by the length of its side.

    Properties:
        side: Side length (positive once stored)
    """

    side: float

    @property
    def value(self) -> float:
        return self.side

    @property
    def figure_type(self) -> FigureType:
        return FigureType.SQUARE


def make_figure(figure_type: FigureType, value: float) -> Figure:
    """Build an unvalidated figure of the given type."""
    if figure_type is FigureType.CIRCLE:
        return Circle(value)
    if figure_type is FigureType.SQUARE:
        return Square(value)
    raise TypeError(f"Unsupported FigureType: {figure_type!r}")


def perimeter(figure: Figure) -> float:
    """
    Perimeter of a single figure.

    Circle: 2 * pi * radius
    Square: 4 * side
    """
    if isinstance(figure, Circle):
        return 2 * math.pi * figure.radius
    if isinstance(figure, Square):
        return 4 * figure.side
    raise TypeError(f"Unsupported Figure type: {type(figure)}")


def area(figure: Figure) -> float:
    """
    Area of a single figure.

    Circle: pi * radius^2
    Square: side^2
    """
    if isinstance(figure, Circle):
        return math.pi * figure.radius * figure.radius
    if isinstance(figure, Square):
        return figure.side * figure.side
    raise TypeError(f"Unsupported Figure type: {type(figure)}")
